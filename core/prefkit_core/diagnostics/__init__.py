from .logger import log_prefs, set_log_handler

__all__ = [
    "log_prefs",
    "set_log_handler",
]
