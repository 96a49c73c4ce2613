from .registry import EngineSettings, get_settings, load_settings

__all__ = [
    "EngineSettings",
    "get_settings",
    "load_settings",
]
