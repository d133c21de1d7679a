from .config_manager import ConfigManager, FACTORY_DEFAULTS_PATH

__all__ = ["ConfigManager", "FACTORY_DEFAULTS_PATH"]
