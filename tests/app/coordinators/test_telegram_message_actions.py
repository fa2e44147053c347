"""Testes do adaptador de ações Telegram (listagem, botões e dispatch)."""

from __future__ import annotations

from typing import Any

import pytest

from app.constants.actions import ActionName, TokenSource
from app.coordinators.telegram import PROVIDER_ID, create_telegram_message_actions
from app.protocols.accounts import ResolvedTelegramAccount
from app.protocols.models import (
    SendMessageRequest,
    SendPollRequest,
    SendStickerRequest,
    ToolSend,
)
from app.services.action_gate import create_action_gate
from config.settings import ChannelsConfig, TelegramAccountConfig, TelegramActionConfig
from utils.errors import ParameterError, UnsupportedActionError

EMPTY_CFG = ChannelsConfig()


class FakeHandler:
    """Handler que registra chamadas e devolve um resultado fixo."""

    def __init__(self, result: Any = None) -> None:
        self.result = result if result is not None else {"ok": True, "messageId": 1}
        self.calls: list[tuple[Any, Any, Any]] = []

    async def handle(self, request, cfg, *, media_local_roots=None):
        self.calls.append((request, cfg, media_local_roots))
        return self.result


class FailingHandler:
    """Handler que sempre falha (erro do provider)."""

    async def handle(self, request, cfg, *, media_local_roots=None):
        raise RuntimeError("telegram api unavailable")


class FakeAccountSource:
    """Contas em memória com actions por conta."""

    def __init__(self, accounts: dict[str, tuple[TokenSource, TelegramActionConfig | None]]) -> None:
        self._accounts = accounts

    def list_enabled_accounts(self, cfg: ChannelsConfig) -> list[ResolvedTelegramAccount]:
        return [
            ResolvedTelegramAccount(
                account_id=account_id,
                enabled=True,
                token="t" if source != TokenSource.NONE else "",
                token_source=source,
                config=TelegramAccountConfig(),
            )
            for account_id, (source, _) in self._accounts.items()
        ]

    def create_action_gate(self, cfg: ChannelsConfig, account_id: str | None):
        return create_action_gate(self._accounts[account_id or "default"][1])


class FakeButtonsProbe:
    def __init__(self, enabled: set[str]) -> None:
        self._enabled = enabled

    def is_enabled(self, cfg: ChannelsConfig, account_id: str | None) -> bool:
        return account_id in self._enabled


def _adapter(handler=None, accounts=None, buttons=None):
    return create_telegram_message_actions(
        handler or FakeHandler(),
        account_source=FakeAccountSource(
            accounts if accounts is not None else {"default": (TokenSource.CONFIG, None)}
        ),
        buttons_probe=FakeButtonsProbe(buttons or set()),
    )


class TestListActions:
    """Listagem de ações disponíveis."""

    def test_defaults_exclude_sticker(self) -> None:
        actions = _adapter().list_actions(EMPTY_CFG)
        assert actions == [
            ActionName.SEND,
            ActionName.REACT,
            ActionName.DELETE,
            ActionName.EDIT,
            ActionName.POLL,
            ActionName.TOPIC_CREATE,
        ]

    def test_union_across_accounts(self) -> None:
        """Uma conta com sticker habilitado libera sticker e sticker-search."""
        adapter = _adapter(
            accounts={
                "a": (TokenSource.CONFIG, TelegramActionConfig(sticker=False)),
                "b": (TokenSource.ENV, TelegramActionConfig(sticker=True)),
            }
        )
        actions = adapter.list_actions(EMPTY_CFG)
        assert ActionName.STICKER in actions
        assert ActionName.STICKER_SEARCH in actions

    def test_disabled_everywhere_is_hidden(self) -> None:
        adapter = _adapter(
            accounts={
                "a": (TokenSource.CONFIG, TelegramActionConfig(reactions=False, send_poll=False)),
                "b": (TokenSource.CONFIG, TelegramActionConfig(reactions=False)),
            }
        )
        actions = adapter.list_actions(EMPTY_CFG)
        assert ActionName.REACT not in actions
        assert ActionName.POLL in actions

    def test_no_accounts_lists_nothing(self) -> None:
        assert _adapter(accounts={}).list_actions(EMPTY_CFG) == []

    def test_accounts_without_token_are_ignored(self) -> None:
        adapter = _adapter(accounts={"a": (TokenSource.NONE, TelegramActionConfig(sticker=True))})
        assert adapter.list_actions(EMPTY_CFG) == []

    def test_send_disabled_key_still_lists_send(self) -> None:
        adapter = _adapter(
            accounts={"a": (TokenSource.CONFIG, TelegramActionConfig(send_message=False))}
        )
        assert adapter.list_actions(EMPTY_CFG)[0] == ActionName.SEND


class TestSupportsButtons:
    """Suporte a inline buttons."""

    def test_any_account_enables(self) -> None:
        adapter = _adapter(
            accounts={"a": (TokenSource.CONFIG, None), "b": (TokenSource.CONFIG, None)},
            buttons={"b"},
        )
        assert adapter.supports_buttons(EMPTY_CFG) is True

    def test_no_account_enables(self) -> None:
        adapter = _adapter(accounts={"a": (TokenSource.CONFIG, None)})
        assert adapter.supports_buttons(EMPTY_CFG) is False

    def test_no_accounts(self) -> None:
        assert _adapter(accounts={}, buttons={"a"}).supports_buttons(EMPTY_CFG) is False

    def test_tokenless_account_not_considered(self) -> None:
        adapter = _adapter(accounts={"a": (TokenSource.NONE, None)}, buttons={"a"})
        assert adapter.supports_buttons(EMPTY_CFG) is False


def test_extract_tool_send_uses_send_message_action() -> None:
    adapter = _adapter()
    assert adapter.extract_tool_send({"action": "sendMessage", "to": "x"}) == ToolSend(to="x")
    assert adapter.extract_tool_send({"action": "send", "to": "x"}) is None


class TestHandleAction:
    """Dispatch de ações ao handler."""

    @pytest.mark.asyncio
    async def test_send_dispatch(self) -> None:
        handler = FakeHandler(result={"ok": True, "messageId": 99})
        adapter = _adapter(handler)

        result = await adapter.handle_action(
            "send",
            {"to": "@chan", "message": "oi"},
            EMPTY_CFG,
            account_id="ops",
            media_local_roots=["/tmp/media"],
        )

        assert result == {"ok": True, "messageId": 99}
        request, cfg, roots = handler.calls[0]
        assert request == SendMessageRequest(to="@chan", content="oi", account_id="ops")
        assert cfg is EMPTY_CFG
        assert roots == ["/tmp/media"]

    @pytest.mark.asyncio
    async def test_result_returned_unchanged(self) -> None:
        sentinel = object()
        adapter = _adapter(FakeHandler(result=sentinel))
        result = await adapter.handle_action("delete", {"to": "1", "messageId": 2}, EMPTY_CFG)
        assert result is sentinel

    @pytest.mark.asyncio
    async def test_poll_has_no_media_roots(self) -> None:
        handler = FakeHandler()
        adapter = _adapter(handler)
        await adapter.handle_action(
            "poll",
            {"to": "1", "question": "q"},
            EMPTY_CFG,
            media_local_roots=["/tmp/media"],
        )
        request, _, roots = handler.calls[0]
        assert isinstance(request, SendPollRequest)
        assert roots is None

    @pytest.mark.asyncio
    async def test_sticker_dispatch_not_gated(self) -> None:
        """Gate só afeta a listagem; dispatch não reavalia."""
        handler = FakeHandler()
        adapter = _adapter(handler)
        await adapter.handle_action("sticker", {"to": "1", "fileId": "f"}, EMPTY_CFG)
        assert isinstance(handler.calls[0][0], SendStickerRequest)

    @pytest.mark.asyncio
    async def test_unsupported_action(self) -> None:
        handler = FakeHandler()
        adapter = _adapter(handler)
        with pytest.raises(UnsupportedActionError) as exc_info:
            await adapter.handle_action("unknown", {}, EMPTY_CFG)
        assert "unknown" in str(exc_info.value)
        assert PROVIDER_ID in str(exc_info.value)
        assert exc_info.value.action == "unknown"
        assert handler.calls == []

    @pytest.mark.asyncio
    async def test_parameter_error_not_dispatched(self) -> None:
        handler = FakeHandler()
        adapter = _adapter(handler)
        with pytest.raises(ParameterError) as exc_info:
            await adapter.handle_action("send", {"to": "x"}, EMPTY_CFG)
        assert exc_info.value.field == "message"
        assert handler.calls == []

    @pytest.mark.asyncio
    async def test_handler_error_propagates(self) -> None:
        adapter = _adapter(FailingHandler())
        with pytest.raises(RuntimeError, match="unavailable"):
            await adapter.handle_action("send", {"to": "x", "message": "m"}, EMPTY_CFG)

    @pytest.mark.asyncio
    async def test_handler_error_records_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Falha do provider entra na métrica de falhas antes de propagar."""
        failures: list[tuple[str, str, str]] = []
        monkeypatch.setattr(
            "app.coordinators.telegram.actions.record_action_failure",
            lambda component, operation, error_type, correlation_id=None: failures.append(
                (component, operation, error_type)
            ),
        )
        adapter = _adapter(FailingHandler())

        with pytest.raises(RuntimeError):
            await adapter.handle_action("send", {"to": "x", "message": "m"}, EMPTY_CFG)

        assert failures == [("telegram_actions", "send", "RuntimeError")]
