"""Normalizer Telegram — converte parâmetros brutos em requisições canônicas.

Um normalizer por ação canônica; o dicionário _NORMALIZERS é o conjunto
fechado de ações suportadas pelo canal. Os parâmetros brutos não passam
daqui: o handler do provider só recebe a requisição tipada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.params import (
    read_bool_param,
    read_number_param,
    read_param_raw,
    read_string_array_param,
    read_string_or_number_param,
    read_string_param,
)
from api.normalizers.telegram.targets import (
    read_chat_target,
    read_message_id,
    read_poll_target,
)
from app.constants.actions import ActionName
from app.protocols.models import (
    CreateForumTopicRequest,
    DeleteMessageRequest,
    EditMessageRequest,
    ReactRequest,
    SearchStickerRequest,
    SendMessageRequest,
    SendPollRequest,
    SendStickerRequest,
    TelegramActionRequest,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    ActionNormalizer = Callable[[Mapping[str, Any], str | None], TelegramActionRequest]

# Seleção múltipla sem lista de opções conhecida
DEFAULT_POLL_MAX_SELECTIONS = 10


def _optional_str(value: str | int | float | None) -> str | None:
    return None if value is None else str(value)


def normalize_send(params: Mapping[str, Any], account_id: str | None) -> SendMessageRequest:
    """send: texto é obrigatório apenas quando não há mídia."""
    to = read_chat_target(params)
    media_url = read_string_param(params, "media", trim=False)
    message = read_string_param(params, "message", required=not media_url, allow_empty=True)
    caption = read_string_param(params, "caption", allow_empty=True)
    return SendMessageRequest(
        to=to,
        content=message or caption or "",
        media_url=media_url,
        reply_to_message_id=_optional_str(read_string_or_number_param(params, "replyTo")),
        message_thread_id=_optional_str(read_string_or_number_param(params, "threadId")),
        buttons=read_param_raw(params, "buttons"),
        as_voice=read_bool_param(params, "asVoice"),
        silent=read_bool_param(params, "silent"),
        quote_text=read_string_param(params, "quoteText"),
        account_id=account_id,
    )


def normalize_react(params: Mapping[str, Any], account_id: str | None) -> ReactRequest:
    message_id = read_string_or_number_param(params, "messageId", required=True)
    return ReactRequest(
        chat_id=read_chat_target(params),
        message_id=message_id,
        emoji=read_string_param(params, "emoji", allow_empty=True),
        remove=read_bool_param(params, "remove"),
        account_id=account_id,
    )


def normalize_delete(params: Mapping[str, Any], account_id: str | None) -> DeleteMessageRequest:
    chat_id = read_chat_target(params)
    return DeleteMessageRequest(
        chat_id=chat_id,
        message_id=read_message_id(params),
        account_id=account_id,
    )


def normalize_edit(params: Mapping[str, Any], account_id: str | None) -> EditMessageRequest:
    chat_id = read_chat_target(params)
    message_id = read_message_id(params)
    content = read_string_param(params, "message", required=True)
    return EditMessageRequest(
        chat_id=chat_id,
        message_id=message_id,
        content=str(content),
        buttons=read_param_raw(params, "buttons"),
        account_id=account_id,
    )


def normalize_sticker(params: Mapping[str, Any], account_id: str | None) -> SendStickerRequest:
    """sticker: usa o primeiro stickerId; sem lista, fileId é obrigatório."""
    to = read_chat_target(params)
    sticker_ids = read_string_array_param(params, "stickerId")
    file_id = sticker_ids[0] if sticker_ids else read_string_param(params, "fileId", required=True)
    return SendStickerRequest(
        to=to,
        file_id=str(file_id),
        reply_to_message_id=read_number_param(params, "replyTo", integer=True),
        message_thread_id=read_number_param(params, "threadId", integer=True),
        account_id=account_id,
    )


def normalize_sticker_search(
    params: Mapping[str, Any], account_id: str | None
) -> SearchStickerRequest:
    query = read_string_param(params, "query", required=True)
    return SearchStickerRequest(
        query=str(query),
        limit=read_number_param(params, "limit", integer=True),
        account_id=account_id,
    )


def normalize_topic_create(
    params: Mapping[str, Any], account_id: str | None
) -> CreateForumTopicRequest:
    chat_id = read_chat_target(params)
    name = read_string_param(params, "name", required=True)
    return CreateForumTopicRequest(
        chat_id=chat_id,
        name=str(name),
        icon_color=read_number_param(params, "iconColor", integer=True),
        icon_custom_emoji_id=read_string_param(params, "iconCustomEmojiId"),
        account_id=account_id,
    )


def normalize_poll(params: Mapping[str, Any], account_id: str | None) -> SendPollRequest:
    """poll: pollMulti vira limite de seleção igual ao número de opções."""
    to = read_poll_target(params)
    question = read_string_param(params, "pollQuestion") or read_string_param(
        params, "question", required=True
    )
    options = _read_poll_options(params)
    poll_multi = read_bool_param(params, "pollMulti")
    max_selections = None
    if poll_multi:
        max_selections = len(options) if options is not None else DEFAULT_POLL_MAX_SELECTIONS
    return SendPollRequest(
        to=to,
        question=str(question),
        options=options,
        max_selections=max_selections,
        duration_seconds=read_number_param(params, "pollDurationSeconds", integer=True),
        is_anonymous=read_bool_param(params, "pollAnonymous"),
        silent=read_bool_param(params, "silent"),
        message_thread_id=_optional_str(read_string_or_number_param(params, "threadId")),
        account_id=account_id,
    )


def _read_poll_options(params: Mapping[str, Any]) -> tuple[Any, ...] | None:
    poll_options = read_string_array_param(params, "pollOption")
    if poll_options is not None:
        return tuple(poll_options)
    # Lista bruta (schema compartilhado) repassada sem validação por item
    raw = read_param_raw(params, "options")
    if isinstance(raw, (list, tuple)):
        return tuple(raw)
    return None


_NORMALIZERS: dict[ActionName, ActionNormalizer] = {
    ActionName.SEND: normalize_send,
    ActionName.REACT: normalize_react,
    ActionName.DELETE: normalize_delete,
    ActionName.EDIT: normalize_edit,
    ActionName.STICKER: normalize_sticker,
    ActionName.STICKER_SEARCH: normalize_sticker_search,
    ActionName.TOPIC_CREATE: normalize_topic_create,
    ActionName.POLL: normalize_poll,
}


def get_action_normalizer(action: ActionName) -> ActionNormalizer | None:
    """Retorna o normalizer da ação ou None se não suportada."""
    return _NORMALIZERS.get(action)
