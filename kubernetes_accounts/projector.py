"""Project provider records into Credentials."""
from __future__ import annotations

from typing import Mapping, Sequence

from .base import Credential, Permissions
from .kinds import SPINNAKER_KIND_MAP


def project_credential(
    provider_name: str,
    read_groups: Sequence[str],
    write_groups: Sequence[str],
    expand: bool = False,
    kind_map: Mapping[str, str] = SPINNAKER_KIND_MAP,
) -> Credential:
    """
    Build the Credential for one provider.

    The kind map is attached only when ``expand`` is set. ``namespaces``
    always starts empty; discovery fills it in later.
    """
    return Credential(
        name=provider_name,
        account_type=provider_name,
        environment=provider_name,
        permissions=Permissions(read=list(read_groups), write=list(write_groups)),
        required_group_membership=[],
        spinnaker_kind_map=kind_map if expand else None,
        namespaces=[],
    )
