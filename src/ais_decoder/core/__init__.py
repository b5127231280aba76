"""
Core module - Configuration, receiving session and delta translation.
"""

from .config import AISConfig, ConfigValidationError, OutputConfig, ReceiverConfig
from .delta import context_for, create_delta, is_own_vessel
from .receiver import AISReceiver, ReceiverStatus

__all__ = [
    "AISConfig",
    "ReceiverConfig",
    "OutputConfig",
    "ConfigValidationError",
    "AISReceiver",
    "ReceiverStatus",
    "create_delta",
    "context_for",
    "is_own_vessel",
]
