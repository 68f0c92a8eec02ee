from bloglist.configs.settings import (
    CONFIG_MAP,
    PasswordHasherConfig,
    Settings,
    file_logger,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "PasswordHasherConfig",
    "Settings",
    "file_logger",
    "settings",
]
