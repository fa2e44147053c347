"""Agregador de settings do adaptador de ações de canal.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.telegram import (
    DEFAULT_ACCOUNT_ID,
    ChannelsConfig,
    InlineButtonsScope,
    TelegramAccountConfig,
    TelegramActionConfig,
    TelegramCapabilitiesConfig,
    TelegramChannelConfig,
    get_channels_config,
    get_env_bot_token,
    load_channels_config,
)

__all__ = [
    # Constants
    "DEFAULT_ACCOUNT_ID",
    # Base
    "BaseSettings",
    # Channels
    "ChannelsConfig",
    "Environment",
    "InlineButtonsScope",
    "TelegramAccountConfig",
    "TelegramActionConfig",
    "TelegramCapabilitiesConfig",
    "TelegramChannelConfig",
    "get_base_settings",
    "get_channels_config",
    "get_env_bot_token",
    "load_channels_config",
]
