"""Demo data source and settings for the typeahead demo app."""

from .config import DemoConfig, load_demo_config
from .directory import DEFAULT_USERS, DirectoryUnavailable, User, UserDirectory

__all__ = [
    "DemoConfig",
    "load_demo_config",
    "DEFAULT_USERS",
    "DirectoryUnavailable",
    "User",
    "UserDirectory",
]
