"""Factory de wiring para ações Telegram (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.coordinators.telegram.actions import create_telegram_message_actions
from app.services.inline_buttons import ConfigInlineButtonsProbe
from app.services.telegram_accounts import ConfigTelegramAccountSource

if TYPE_CHECKING:
    from app.coordinators.telegram.actions import TelegramMessageActions
    from app.protocols.action_handler import TelegramActionHandlerProtocol


def create_telegram_actions(handler: TelegramActionHandlerProtocol) -> TelegramMessageActions:
    """Cria o adaptador Telegram com fontes de conta baseadas em config."""
    return create_telegram_message_actions(
        handler,
        account_source=ConfigTelegramAccountSource(),
        buttons_probe=ConfigInlineButtonsProbe(),
    )
