"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ChannelActionError,
    ChannelConfigError,
    ParameterError,
    UnsupportedActionError,
)

__all__ = [
    "ChannelActionError",
    "ChannelConfigError",
    "ParameterError",
    "UnsupportedActionError",
]
