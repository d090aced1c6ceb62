from .binding import LOGURU_TARGET, BindingTarget, Gateway
from .dynamic_provider import DynamicLogProvider

__all__ = [
    "LOGURU_TARGET",
    "BindingTarget",
    "Gateway",
    "DynamicLogProvider",
]
