"""User settings store: key/value pairs in ~/.config/jira-helper/config.yaml."""

from typing import Any, Optional

import jira_helper.config.settings as settings
from jira_helper.config.utils import load_yaml, save_yaml

COMPONENTS_FIELD = "components"


def _read_user() -> dict:
    return load_yaml(settings.GLOBAL_CONFIG) or {}


def _write_user(data: dict) -> None:
    save_yaml(settings.GLOBAL_CONFIG, data)
    settings.invalidate_config()


def get_setting(key: str) -> Optional[Any]:
    """Effective value across all config layers."""
    return settings.get_config().get(key)


def set_setting(key: str, value: Any) -> None:
    data = _read_user()
    data[key] = value
    _write_user(data)


def delete_setting(key: str) -> None:
    data = _read_user()
    if key in data:
        del data[key]
        _write_user(data)


def get_user_aliases() -> dict[str, str]:
    """Aliases the user added (no built-ins)."""
    return dict(_read_user().get("aliases") or {})


def save_alias(short: str, long: str) -> None:
    aliases = get_user_aliases()
    aliases[short] = long
    set_setting("aliases", aliases)


def remove_alias(short: str) -> bool:
    """Remove a user alias. Returns False if it wasn't there."""
    aliases = get_user_aliases()
    if short not in aliases:
        return False
    del aliases[short]
    set_setting("aliases", aliases)
    return True


def get_aliases() -> dict[str, str]:
    """Built-in aliases merged with user aliases; user entries win on collision."""
    return dict(settings.get_config().get("aliases") or {})


def get_affected_field_id() -> str:
    """Field Rescue Mode fills in. Falls back to the built-in components field."""
    return get_setting("affected_field_id") or COMPONENTS_FIELD


def set_affected_field_id(field_id: str) -> None:
    set_setting("affected_field_id", field_id)
