"""Location helpers: per-user config directory and project config discovery."""
from __future__ import annotations

from .project import (
    PACKAGE_JSON_KEY,
    PROJECT_CONFIG_CANDIDATES,
    ProjectConfig,
    find_project_config,
)
from .user import (
    DEFAULT_USER_CONFIG_PRIMARY,
    USER_CONFIG_FILENAME,
    USER_DIR_ENV,
    get_user_config_dir,
    get_user_config_file,
)

__all__ = [
    "PACKAGE_JSON_KEY",
    "PROJECT_CONFIG_CANDIDATES",
    "ProjectConfig",
    "find_project_config",
    "DEFAULT_USER_CONFIG_PRIMARY",
    "USER_CONFIG_FILENAME",
    "USER_DIR_ENV",
    "get_user_config_dir",
    "get_user_config_file",
]
