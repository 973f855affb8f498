"""
This is the initialization for the apps.settings module.
don't declare settings here, declare the settings in one of
the following places:

Read Only (overridable)

- `credentials_service/settings.py` - Framework defaults

Editable:

- `apps/settings/defaults.py` - Defaults for the whole project
- `apps/credentials/settings.py` - Credentials app settings
- `apps/settings/{mode}.py` - Settings specific to the current `CREDENTIALS_SERVICE_MODE`
  (`development` when unset, `test`, `production`)
- `CREDENTIALS_SERVICE_` prefixed environment variables

After loading, `apps/settings/database.py` runs as a post hook and builds
the PostgreSQL connection when `DB_HOST` is configured.

Declaring Settings:

To merge with previously defined setting use any Dynaconf merging markers:

`@merge`, `@merge_unique`, `@insert` on string values and
`dynaconf_merge` or `dynaconf_merge_unique` on data structures.

Examples:

```python
INSTALLED_APPS = "@merge_unique new_app"
DATABASES__default__PORT = 1234
LOGGING__loggers = {
    "dynaconf_merge": True,
    "foobar": {...}
}
```

"""

# Must be empty, declare your settings on a separate file.
