"""Resolução de contas Telegram a partir do ChannelsConfig.

A configuração efetiva de uma conta é a base do canal sobrescrita
(campo a campo) pelos valores definidos na conta. Sem contas declaradas
existe uma única conta implícita `default`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from app.constants.actions import TokenSource
from app.protocols.accounts import ResolvedTelegramAccount
from app.services.action_gate import create_account_action_gate
from config.settings import (
    DEFAULT_ACCOUNT_ID,
    TelegramAccountConfig,
    get_env_bot_token,
)

if TYPE_CHECKING:
    from app.protocols.accounts import ActionGate
    from config.settings import ChannelsConfig, TelegramChannelConfig

logger = logging.getLogger(__name__)


def normalize_account_id(account_id: str | None) -> str:
    """Normaliza id de conta (trim + lower; vazio → default)."""
    value = (account_id or "").strip().lower()
    return value or DEFAULT_ACCOUNT_ID


def list_telegram_account_ids(cfg: ChannelsConfig) -> list[str]:
    """Ids de conta configurados, ordenados; `default` quando não há nenhum."""
    channel = cfg.telegram
    if channel is None or not channel.accounts:
        return [DEFAULT_ACCOUNT_ID]
    return sorted({normalize_account_id(key) for key in channel.accounts})


def _find_account_config(
    channel: TelegramChannelConfig, account_id: str
) -> TelegramAccountConfig | None:
    for key, account in channel.accounts.items():
        if normalize_account_id(key) == account_id:
            return account
    return None


def merge_telegram_account_config(
    cfg: ChannelsConfig, account_id: str | None
) -> TelegramAccountConfig:
    """Configuração efetiva da conta (base do canal + overrides da conta)."""
    channel = cfg.telegram
    if channel is None:
        return TelegramAccountConfig()
    merged = channel.model_dump(exclude={"accounts"}, exclude_unset=True)
    account = _find_account_config(channel, normalize_account_id(account_id))
    if account is not None:
        merged.update(account.model_dump(exclude_unset=True))
    return TelegramAccountConfig.model_validate(merged)


def _read_token_file(path: str) -> str:
    try:
        return Path(path).expanduser().read_text(encoding="utf-8").strip()
    except OSError as exc:
        logger.warning("Telegram token file unreadable", extra={"error": str(exc)})
        return ""


def resolve_telegram_token(cfg: ChannelsConfig, account_id: str | None) -> tuple[str, TokenSource]:
    """Resolve token e origem.

    Ordem: tokenFile/botToken da conta; para a conta default, também
    tokenFile/botToken do canal e, por fim, TELEGRAM_BOT_TOKEN.
    """
    resolved_id = normalize_account_id(account_id)
    channel = cfg.telegram
    account = _find_account_config(channel, resolved_id) if channel is not None else None

    if account is not None:
        if account.token_file and account.token_file.strip():
            token = _read_token_file(account.token_file.strip())
            return (token, TokenSource.TOKEN_FILE) if token else ("", TokenSource.NONE)
        if account.bot_token and account.bot_token.strip():
            return account.bot_token.strip(), TokenSource.CONFIG

    if resolved_id != DEFAULT_ACCOUNT_ID:
        return "", TokenSource.NONE

    if channel is not None:
        if channel.token_file and channel.token_file.strip():
            token = _read_token_file(channel.token_file.strip())
            return (token, TokenSource.TOKEN_FILE) if token else ("", TokenSource.NONE)
        if channel.bot_token and channel.bot_token.strip():
            return channel.bot_token.strip(), TokenSource.CONFIG

    env_token = get_env_bot_token()
    if env_token:
        return env_token, TokenSource.ENV
    return "", TokenSource.NONE


def resolve_telegram_account(
    cfg: ChannelsConfig, account_id: str | None
) -> ResolvedTelegramAccount:
    """Resolve uma conta com config efetiva, habilitação e token."""
    resolved_id = normalize_account_id(account_id)
    merged = merge_telegram_account_config(cfg, resolved_id)
    channel_enabled = cfg.telegram.enabled if cfg.telegram is not None else True
    token, source = resolve_telegram_token(cfg, resolved_id)
    return ResolvedTelegramAccount(
        account_id=resolved_id,
        enabled=channel_enabled and merged.enabled,
        token=token,
        token_source=source,
        config=merged,
        name=merged.name.strip() if merged.name and merged.name.strip() else None,
    )


def list_enabled_telegram_accounts(cfg: ChannelsConfig) -> list[ResolvedTelegramAccount]:
    """Contas habilitadas do canal Telegram (pode ser vazia)."""
    accounts = [
        resolve_telegram_account(cfg, account_id) for account_id in list_telegram_account_ids(cfg)
    ]
    return [account for account in accounts if account.enabled]


def create_telegram_action_gate(cfg: ChannelsConfig, account_id: str | None) -> ActionGate:
    """Gate de ações da conta: actions da conta → actions do canal → default."""
    channel = cfg.telegram
    if channel is None:
        return create_account_action_gate(None, None)
    account = _find_account_config(channel, normalize_account_id(account_id))
    return create_account_action_gate(
        channel.actions,
        account.actions if account is not None else None,
    )


class ConfigTelegramAccountSource:
    """TelegramAccountSourceProtocol sobre o ChannelsConfig."""

    def list_enabled_accounts(self, cfg: ChannelsConfig) -> list[ResolvedTelegramAccount]:
        return list_enabled_telegram_accounts(cfg)

    def create_action_gate(self, cfg: ChannelsConfig, account_id: str | None) -> ActionGate:
        return create_telegram_action_gate(cfg, account_id)
