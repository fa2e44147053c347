"""Coordenação de ações de mensagem do canal Telegram."""

from .actions import PROVIDER_ID, TelegramMessageActions, create_telegram_message_actions

__all__ = [
    "PROVIDER_ID",
    "TelegramMessageActions",
    "create_telegram_message_actions",
]
