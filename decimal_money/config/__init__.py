from .config import AppConfig, EngineConfig, LoggingConfig, get_config

__all__ = [
    "AppConfig",
    "EngineConfig",
    "LoggingConfig",
    "get_config",
]
