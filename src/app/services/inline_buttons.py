"""Capacidade de inline buttons por conta Telegram."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.services.telegram_accounts import merge_telegram_account_config

if TYPE_CHECKING:
    from config.settings import ChannelsConfig, InlineButtonsScope

DEFAULT_INLINE_BUTTONS_SCOPE: InlineButtonsScope = "allowlist"


def resolve_inline_buttons_scope(
    cfg: ChannelsConfig, account_id: str | None
) -> InlineButtonsScope:
    """Resolve o escopo de inline buttons da conta.

    Forma legada (lista de strings): contém "inlineButtons" → all; senão off.
    """
    capabilities = merge_telegram_account_config(cfg, account_id).capabilities
    if capabilities is None:
        return DEFAULT_INLINE_BUTTONS_SCOPE
    if isinstance(capabilities, list):
        has_buttons = any(entry.strip().lower() == "inlinebuttons" for entry in capabilities)
        return "all" if has_buttons else "off"
    return capabilities.inline_buttons or DEFAULT_INLINE_BUTTONS_SCOPE


def is_inline_buttons_enabled(cfg: ChannelsConfig, account_id: str | None) -> bool:
    return resolve_inline_buttons_scope(cfg, account_id) != "off"


class ConfigInlineButtonsProbe:
    """InlineButtonsProbeProtocol sobre o ChannelsConfig."""

    def is_enabled(self, cfg: ChannelsConfig, account_id: str | None) -> bool:
        return is_inline_buttons_enabled(cfg, account_id)
