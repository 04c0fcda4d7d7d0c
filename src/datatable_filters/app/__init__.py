from .config import FilterConfig, get_config, load_config, reset_config, set_config

__all__ = ["FilterConfig", "get_config", "load_config", "reset_config", "set_config"]
