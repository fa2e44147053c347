"""Modelos canônicos de requisição de ação (um por ação do provider).

Cada requisição é imutável, construída a partir dos parâmetros brutos
pelo normalizer e repassada por valor ao handler do provider.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar

from pydantic.alias_generators import to_camel

from app.constants.actions import TelegramApiAction

# Chat alvo: id numérico ou string (id, @username)
ChatTarget = str | int


@dataclass(frozen=True)
class ActionRequest:
    """Base das requisições canônicas."""

    action: ClassVar[TelegramApiAction]

    def to_payload(self) -> dict[str, Any]:
        """Renderiza o formato de fio do provider.

        Chaves em camelCase, discriminador `action` e opcionais ausentes omitidos.
        """
        payload: dict[str, Any] = {"action": self.action.value}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            if isinstance(value, tuple):
                value = list(value)
            payload[to_camel(item.name)] = value
        return payload


@dataclass(frozen=True)
class SendMessageRequest(ActionRequest):
    action: ClassVar[TelegramApiAction] = TelegramApiAction.SEND_MESSAGE

    to: ChatTarget
    content: str
    media_url: str | None = None
    reply_to_message_id: str | None = None
    message_thread_id: str | None = None
    buttons: Any = None
    as_voice: bool | None = None
    silent: bool | None = None
    quote_text: str | None = None
    account_id: str | None = None


@dataclass(frozen=True)
class ReactRequest(ActionRequest):
    action: ClassVar[TelegramApiAction] = TelegramApiAction.REACT

    chat_id: ChatTarget
    message_id: str | int
    emoji: str | None = None
    remove: bool | None = None
    account_id: str | None = None


@dataclass(frozen=True)
class DeleteMessageRequest(ActionRequest):
    action: ClassVar[TelegramApiAction] = TelegramApiAction.DELETE_MESSAGE

    chat_id: ChatTarget
    message_id: int
    account_id: str | None = None


@dataclass(frozen=True)
class EditMessageRequest(ActionRequest):
    action: ClassVar[TelegramApiAction] = TelegramApiAction.EDIT_MESSAGE

    chat_id: ChatTarget
    message_id: int
    content: str
    buttons: Any = None
    account_id: str | None = None


@dataclass(frozen=True)
class SendStickerRequest(ActionRequest):
    action: ClassVar[TelegramApiAction] = TelegramApiAction.SEND_STICKER

    to: ChatTarget
    file_id: str
    reply_to_message_id: int | None = None
    message_thread_id: int | None = None
    account_id: str | None = None


@dataclass(frozen=True)
class SearchStickerRequest(ActionRequest):
    action: ClassVar[TelegramApiAction] = TelegramApiAction.SEARCH_STICKER

    query: str
    limit: int | None = None
    account_id: str | None = None


@dataclass(frozen=True)
class CreateForumTopicRequest(ActionRequest):
    action: ClassVar[TelegramApiAction] = TelegramApiAction.CREATE_FORUM_TOPIC

    chat_id: ChatTarget
    name: str
    icon_color: int | None = None
    icon_custom_emoji_id: str | None = None
    account_id: str | None = None


@dataclass(frozen=True)
class SendPollRequest(ActionRequest):
    action: ClassVar[TelegramApiAction] = TelegramApiAction.SEND_POLL

    to: str
    question: str
    options: tuple[Any, ...] | None = None
    max_selections: int | None = None
    duration_seconds: int | None = None
    is_anonymous: bool | None = None
    silent: bool | None = None
    message_thread_id: str | None = None
    account_id: str | None = None


TelegramActionRequest = (
    SendMessageRequest
    | ReactRequest
    | DeleteMessageRequest
    | EditMessageRequest
    | SendStickerRequest
    | SearchStickerRequest
    | CreateForumTopicRequest
    | SendPollRequest
)


@dataclass(frozen=True)
class ToolSend:
    """Intenção de envio extraída de uma invocação de ferramenta."""

    to: str
    account_id: str | None = None
    thread_id: str | None = None
