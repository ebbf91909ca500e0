"""Configuration loading and the user settings store."""

from jira_helper.config.settings import (
    get_config,
    get_config_loaded_sources,
    invalidate_config,
)
from jira_helper.config.store import (
    COMPONENTS_FIELD,
    get_affected_field_id,
    get_aliases,
    get_setting,
    get_user_aliases,
    remove_alias,
    save_alias,
    set_affected_field_id,
    set_setting,
)

__all__ = [
    "get_config",
    "get_config_loaded_sources",
    "invalidate_config",
    "COMPONENTS_FIELD",
    "get_setting",
    "set_setting",
    "get_aliases",
    "get_user_aliases",
    "save_alias",
    "remove_alias",
    "get_affected_field_id",
    "set_affected_field_id",
]
