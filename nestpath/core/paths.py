"""
Default locations for nestpath configuration.
"""
from pathlib import Path
from platformdirs import user_config_dir

APP_NAME = 'nestpath'
SETTINGS_DIR_ENV = 'NESTPATH_SETTINGS_DIR'

def default_settings_dir() -> Path:
    """Get the default settings directory for nestpath."""
    return Path(user_config_dir(APP_NAME)).expanduser().resolve()
