from .loader import ConfigError, SplitConfig, load_config, resolve_config_path

__all__ = ["ConfigError", "SplitConfig", "load_config", "resolve_config_path"]
