"""Testes do normalizer de ações Telegram (parâmetros brutos → requisição canônica)."""

from __future__ import annotations

from typing import Any

import pytest

from api.normalizers.telegram import DEFAULT_POLL_MAX_SELECTIONS, get_action_normalizer
from app.constants.actions import ActionName, TelegramApiAction
from app.protocols.models import (
    CreateForumTopicRequest,
    DeleteMessageRequest,
    EditMessageRequest,
    ReactRequest,
    SearchStickerRequest,
    SendMessageRequest,
    SendPollRequest,
    SendStickerRequest,
)
from utils.errors import ParameterError


def _normalize(action: ActionName, params: dict[str, Any], account_id: str | None = None):
    normalizer = get_action_normalizer(action)
    assert normalizer is not None
    return normalizer(params, account_id)


class TestNormalizerRegistry:
    """Conjunto fechado de ações."""

    def test_every_action_has_a_normalizer(self) -> None:
        for action in ActionName:
            assert get_action_normalizer(action) is not None


class TestSend:
    """Testes da ação send."""

    def test_message_becomes_content(self) -> None:
        request = _normalize(ActionName.SEND, {"to": "@chan", "message": " Olá "}, "ops")
        assert isinstance(request, SendMessageRequest)
        assert request.to == "@chan"
        assert request.content == "Olá"
        assert request.account_id == "ops"

    def test_media_without_text_has_empty_content(self) -> None:
        """Mídia sem texto é válida."""
        request = _normalize(ActionName.SEND, {"to": "x", "media": "https://cdn/x.png"})
        assert request.content == ""
        assert request.media_url == "https://cdn/x.png"

    def test_caption_used_when_message_absent(self) -> None:
        request = _normalize(ActionName.SEND, {"to": "x", "media": "a.png", "caption": "legenda"})
        assert request.content == "legenda"

    def test_no_message_caption_or_media_fails(self) -> None:
        with pytest.raises(ParameterError, match="message"):
            _normalize(ActionName.SEND, {"to": "x"})

    def test_missing_target_fails(self) -> None:
        with pytest.raises(ParameterError):
            _normalize(ActionName.SEND, {"message": "oi"})

    def test_optional_fields(self) -> None:
        buttons = [[{"text": "Ok", "callback_data": "ok"}]]
        request = _normalize(
            ActionName.SEND,
            {
                "chatId": 99,
                "message": "oi",
                "replyTo": 12,
                "threadId": "5",
                "buttons": buttons,
                "asVoice": True,
                "silent": False,
                "quoteText": "citação",
            },
        )
        assert request.to == 99
        assert request.reply_to_message_id == "12"
        assert request.message_thread_id == "5"
        assert request.buttons is buttons
        assert request.as_voice is True
        assert request.silent is False
        assert request.quote_text == "citação"

    def test_non_boolean_flags_ignored(self) -> None:
        request = _normalize(ActionName.SEND, {"to": "x", "message": "m", "silent": "yes"})
        assert request.silent is None


class TestReact:
    """Testes da ação react."""

    def test_builds_reaction(self) -> None:
        request = _normalize(
            ActionName.REACT,
            {"chatId": "1", "messageId": 10, "emoji": "👍", "remove": True},
        )
        assert isinstance(request, ReactRequest)
        assert request.chat_id == "1"
        assert request.message_id == 10
        assert request.emoji == "👍"
        assert request.remove is True

    def test_empty_emoji_allowed(self) -> None:
        request = _normalize(ActionName.REACT, {"to": "1", "messageId": "10", "emoji": ""})
        assert request.emoji == ""
        assert request.message_id == "10"

    def test_message_id_required(self) -> None:
        with pytest.raises(ParameterError, match="messageId"):
            _normalize(ActionName.REACT, {"to": "1"})


class TestDeleteAndEdit:
    """Testes de delete e edit."""

    def test_delete(self) -> None:
        request = _normalize(ActionName.DELETE, {"channelId": "2", "messageId": "33"})
        assert request == DeleteMessageRequest(chat_id="2", message_id=33)

    def test_delete_requires_integer_message_id(self) -> None:
        with pytest.raises(ParameterError, match="integer"):
            _normalize(ActionName.DELETE, {"to": "2", "messageId": 3.3})

    def test_edit(self) -> None:
        request = _normalize(
            ActionName.EDIT,
            {"to": "2", "messageId": 3, "message": "novo", "buttons": []},
        )
        assert isinstance(request, EditMessageRequest)
        assert request.content == "novo"
        assert request.buttons == []

    def test_edit_requires_non_empty_message(self) -> None:
        with pytest.raises(ParameterError, match="message"):
            _normalize(ActionName.EDIT, {"to": "2", "messageId": 3, "message": "  "})


class TestSticker:
    """Testes de sticker e sticker-search."""

    def test_first_sticker_id_wins(self) -> None:
        request = _normalize(ActionName.STICKER, {"to": "x", "stickerId": ["s1", "s2"]})
        assert isinstance(request, SendStickerRequest)
        assert request.file_id == "s1"

    def test_file_id_fallback(self) -> None:
        request = _normalize(ActionName.STICKER, {"to": "x", "fileId": "f1"})
        assert request.file_id == "f1"

    def test_missing_sticker_fails(self) -> None:
        with pytest.raises(ParameterError, match="fileId"):
            _normalize(ActionName.STICKER, {"to": "x"})

    def test_reply_and_thread_are_integers(self) -> None:
        request = _normalize(
            ActionName.STICKER,
            {"to": "x", "fileId": "f1", "replyTo": "8", "threadId": 9},
        )
        assert request.reply_to_message_id == 8
        assert request.message_thread_id == 9

    def test_search(self) -> None:
        request = _normalize(ActionName.STICKER_SEARCH, {"query": " gato ", "limit": 3})
        assert request == SearchStickerRequest(query="gato", limit=3)

    def test_search_requires_query(self) -> None:
        with pytest.raises(ParameterError, match="query"):
            _normalize(ActionName.STICKER_SEARCH, {"query": ""})


class TestTopicCreate:
    """Testes de topic-create."""

    def test_builds_topic(self) -> None:
        request = _normalize(
            ActionName.TOPIC_CREATE,
            {"chatId": -100, "name": "Suporte", "iconColor": 7322096, "iconCustomEmojiId": "e1"},
        )
        assert request == CreateForumTopicRequest(
            chat_id=-100,
            name="Suporte",
            icon_color=7322096,
            icon_custom_emoji_id="e1",
        )

    def test_requires_name(self) -> None:
        with pytest.raises(ParameterError, match="name"):
            _normalize(ActionName.TOPIC_CREATE, {"chatId": -100})


class TestPoll:
    """Testes de poll."""

    def test_multi_select_uses_option_count(self) -> None:
        """pollMulti vira limite igual ao número de opções."""
        request = _normalize(
            ActionName.POLL,
            {"to": "x", "question": "q", "options": ["a", "b", "c"], "pollMulti": True},
        )
        assert isinstance(request, SendPollRequest)
        assert request.max_selections == 3
        assert request.options == ("a", "b", "c")

    def test_multi_select_without_options_uses_default(self) -> None:
        request = _normalize(ActionName.POLL, {"to": "x", "question": "q", "pollMulti": True})
        assert request.max_selections == DEFAULT_POLL_MAX_SELECTIONS

    def test_single_select_has_no_limit(self) -> None:
        request = _normalize(ActionName.POLL, {"to": "x", "question": "q", "pollMulti": False})
        assert request.max_selections is None

    def test_poll_fields_preferred(self) -> None:
        request = _normalize(
            ActionName.POLL,
            {
                "chatId": 55,
                "pollQuestion": "Qual?",
                "question": "ignorada",
                "pollOption": ["x", "y"],
                "options": ["a"],
                "pollDurationSeconds": 60,
                "pollAnonymous": False,
                "silent": True,
                "threadId": 4,
            },
        )
        assert request.to == "55"
        assert request.question == "Qual?"
        assert request.options == ("x", "y")
        assert request.duration_seconds == 60
        assert request.is_anonymous is False
        assert request.silent is True
        assert request.message_thread_id == "4"

    def test_requires_question(self) -> None:
        with pytest.raises(ParameterError, match="question"):
            _normalize(ActionName.POLL, {"to": "x"})

    def test_payload_action(self) -> None:
        request = _normalize(ActionName.POLL, {"to": "x", "question": "q"})
        assert request.to_payload()["action"] == TelegramApiAction.SEND_POLL
