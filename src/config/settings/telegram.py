"""Settings específicas de Telegram.

Documento de configuração do canal Telegram: conta base, contas
adicionais, gates de ação e capacidades (inline buttons).

Exemplo (YAML):
    channels:
      telegram:
        botToken: "123:abc"
        actions:
          reactions: true
          sticker: false
        capabilities:
          inlineButtons: dm
        accounts:
          ops:
            tokenFile: /run/secrets/ops_bot
            actions:
              sticker: true
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from config.settings.base import get_base_settings
from utils.errors import ChannelConfigError

logger = logging.getLogger(__name__)

# Id da conta implícita quando nenhuma conta é declarada
DEFAULT_ACCOUNT_ID: str = "default"

InlineButtonsScope = Literal["off", "dm", "group", "all", "allowlist"]


class _ConfigModel(BaseModel):
    """Base dos modelos de configuração (aceita camelCase e snake_case)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class TelegramActionConfig(_ConfigModel):
    """Habilitação por tipo de ação (None = usa o default do gate)."""

    reactions: bool | None = None
    send_message: bool | None = None
    delete_message: bool | None = None
    edit_message: bool | None = None
    sticker: bool | None = None
    send_poll: bool | None = None
    create_forum_topic: bool | None = None

    def get(self, key: str) -> bool | None:
        """Retorna o valor configurado para a chave camelCase (ex: deleteMessage)."""
        return self.model_dump(by_alias=True).get(key)


class TelegramCapabilitiesConfig(_ConfigModel):
    """Capacidades opcionais do bot."""

    inline_buttons: InlineButtonsScope | None = None


class TelegramAccountConfig(_ConfigModel):
    """Configuração de uma conta (bot) Telegram.

    Attributes:
        enabled: Conta habilitada
        name: Nome amigável da conta
        bot_token: Token inline do bot (obtido via @BotFather)
        token_file: Caminho de arquivo contendo o token
        actions: Gates de ação da conta
        capabilities: Lista legada de strings ou objeto de capacidades
    """

    enabled: bool = True
    name: str | None = None
    bot_token: str | None = None
    token_file: str | None = None
    actions: TelegramActionConfig | None = None
    capabilities: list[str] | TelegramCapabilitiesConfig | None = None


class TelegramChannelConfig(TelegramAccountConfig):
    """Configuração do canal: valores base + contas por id."""

    accounts: dict[str, TelegramAccountConfig] = Field(default_factory=dict)


class ChannelsConfig(_ConfigModel):
    """Documento raiz de configuração de canais."""

    telegram: TelegramChannelConfig | None = None


def _parse_document(raw: Any) -> ChannelsConfig:
    """Valida o documento YAML já carregado."""
    if raw is None:
        return ChannelsConfig()
    if not isinstance(raw, dict):
        raise ChannelConfigError("YAML de canais deve ser um dicionário")
    channels = raw.get("channels", {})
    if channels is None:
        return ChannelsConfig()
    if not isinstance(channels, dict):
        raise ChannelConfigError("Chave 'channels' deve ser um dicionário")
    try:
        return ChannelsConfig.model_validate(channels)
    except ValidationError as exc:
        raise ChannelConfigError(f"Configuração de canais inválida: {exc}") from exc


def load_channels_config(path: str | Path) -> ChannelsConfig:
    """Carrega e valida o YAML de configuração de canais.

    Args:
        path: Caminho do arquivo YAML

    Returns:
        ChannelsConfig validado

    Raises:
        ChannelConfigError: Se o arquivo não puder ser lido, parseado ou validado
    """
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as exc:
        raise ChannelConfigError(f"Não foi possível ler {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        logger.error("Failed to parse channels YAML", extra={"error": str(exc)})
        raise ChannelConfigError(f"YAML de canais inválido: {exc}") from exc

    config = _parse_document(raw)
    logger.debug("Channels config loaded", extra={"path": str(config_path)})
    return config


@lru_cache(maxsize=1)
def get_channels_config() -> ChannelsConfig:
    """Retorna instância cacheada de ChannelsConfig.

    Usa CHANNELS_CONFIG_PATH; sem caminho configurado retorna config vazia.
    """
    path = get_base_settings().channels_config_path
    if not path:
        return ChannelsConfig()
    return load_channels_config(path)


def get_env_bot_token() -> str:
    """Token do bot via TELEGRAM_BOT_TOKEN (aplicável só à conta default)."""
    return os.getenv("TELEGRAM_BOT_TOKEN", "").strip()
