from rest_framework import serializers


class PermissionsSerializer(serializers.Serializer):
    READ = serializers.ListField(child=serializers.CharField(), source="read")
    WRITE = serializers.ListField(child=serializers.CharField(), source="write")


class CredentialSerializer(serializers.Serializer):
    """
    Render a ``kubernetes_accounts.Credential`` in the shape the
    orchestration system expects.

    ``spinnakerKindMap`` is omitted when no kind map is attached.
    ``namespaces`` is rendered only when the ``include_namespaces`` context
    flag is set, i.e. when namespace discovery ran for this response.
    """

    accountType = serializers.CharField(source="account_type")
    challengeDestructiveActions = serializers.BooleanField(source="challenge_destructive_actions")
    cloudProvider = serializers.CharField(source="cloud_provider")
    environment = serializers.CharField()
    name = serializers.CharField()
    permissions = PermissionsSerializer()
    primaryAccount = serializers.BooleanField(source="primary_account")
    providerVersion = serializers.CharField(source="provider_version")
    requiredGroupMembership = serializers.ListField(source="required_group_membership")
    skin = serializers.CharField()
    spinnakerKindMap = serializers.DictField(
        child=serializers.CharField(), source="spinnaker_kind_map", allow_null=True,
    )
    type = serializers.CharField()
    namespaces = serializers.ListField(child=serializers.CharField())

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get("spinnakerKindMap") is None:
            data.pop("spinnakerKindMap", None)
        if not self.context.get("include_namespaces", False):
            data.pop("namespaces", None)
        return data
