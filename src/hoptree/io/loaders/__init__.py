from hoptree.core.errors import ConfigError
from .settings_loader import load_settings

__all__ = ["load_settings", "ConfigError"]
