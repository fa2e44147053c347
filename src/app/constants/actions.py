"""Enums de domínio para ações de canal."""

from __future__ import annotations

from enum import StrEnum


class ActionName(StrEnum):
    """Ações canônicas expostas à camada de orquestração."""

    SEND = "send"
    REACT = "react"
    DELETE = "delete"
    EDIT = "edit"
    STICKER = "sticker"
    STICKER_SEARCH = "sticker-search"
    POLL = "poll"
    TOPIC_CREATE = "topic-create"


class TelegramApiAction(StrEnum):
    """Ações aceitas pelo handler do provider Telegram."""

    SEND_MESSAGE = "sendMessage"
    REACT = "react"
    DELETE_MESSAGE = "deleteMessage"
    EDIT_MESSAGE = "editMessage"
    SEND_STICKER = "sendSticker"
    SEARCH_STICKER = "searchSticker"
    CREATE_FORUM_TOPIC = "createForumTopic"
    SEND_POLL = "sendPoll"


class TokenSource(StrEnum):
    """Origem do token de uma conta de bot."""

    CONFIG = "config"
    TOKEN_FILE = "tokenFile"
    ENV = "env"
    NONE = "none"
