"""Protocolos e contratos do core da aplicação."""

from .accounts import (
    ActionGate,
    InlineButtonsProbeProtocol,
    ResolvedTelegramAccount,
    TelegramAccountSourceProtocol,
)
from .action_handler import TelegramActionHandlerProtocol
from .models import (
    ActionRequest,
    ChatTarget,
    CreateForumTopicRequest,
    DeleteMessageRequest,
    EditMessageRequest,
    ReactRequest,
    SearchStickerRequest,
    SendMessageRequest,
    SendPollRequest,
    SendStickerRequest,
    TelegramActionRequest,
    ToolSend,
)

__all__ = [
    "ActionGate",
    "ActionRequest",
    "ChatTarget",
    "CreateForumTopicRequest",
    "DeleteMessageRequest",
    "EditMessageRequest",
    "InlineButtonsProbeProtocol",
    "ReactRequest",
    "ResolvedTelegramAccount",
    "SearchStickerRequest",
    "SendMessageRequest",
    "SendPollRequest",
    "SendStickerRequest",
    "TelegramAccountSourceProtocol",
    "TelegramActionHandlerProtocol",
    "TelegramActionRequest",
    "ToolSend",
]
