"""Protocolos de contas e capacidades consumidos pelo adaptador."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.constants.actions import TokenSource
    from config.settings import ChannelsConfig, TelegramAccountConfig


class ActionGate(Protocol):
    """Consulta de habilitação por chave de configuração com default."""

    def __call__(self, key: str, default: bool = True) -> bool: ...


@dataclass(frozen=True)
class ResolvedTelegramAccount:
    """Conta Telegram com configuração efetiva (base + overrides)."""

    account_id: str
    enabled: bool
    token: str
    token_source: TokenSource
    config: TelegramAccountConfig
    name: str | None = None


class TelegramAccountSourceProtocol(Protocol):
    """Fonte de contas habilitadas e seus gates de ação."""

    def list_enabled_accounts(self, cfg: ChannelsConfig) -> list[ResolvedTelegramAccount]: ...

    def create_action_gate(self, cfg: ChannelsConfig, account_id: str | None) -> ActionGate: ...


class InlineButtonsProbeProtocol(Protocol):
    """Verifica se uma conta suporta botões interativos."""

    def is_enabled(self, cfg: ChannelsConfig, account_id: str | None) -> bool: ...
