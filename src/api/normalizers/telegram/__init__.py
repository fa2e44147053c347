"""Normalizer Telegram — parâmetros brutos de ação → requisições canônicas.

Ações suportadas: send, react, delete, edit, sticker, sticker-search,
topic-create, poll.
"""

from .normalizer import DEFAULT_POLL_MAX_SELECTIONS, get_action_normalizer
from .targets import read_chat_target, read_message_id, read_poll_target

__all__ = [
    "DEFAULT_POLL_MAX_SELECTIONS",
    "get_action_normalizer",
    "read_chat_target",
    "read_message_id",
    "read_poll_target",
]
