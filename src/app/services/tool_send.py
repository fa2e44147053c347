"""Extração de intenção de envio a partir de argumentos de ferramenta."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.protocols.models import ToolSend

if TYPE_CHECKING:
    from collections.abc import Mapping


def extract_tool_send(
    args: Mapping[str, Any],
    expected_action: str = "sendMessage",
) -> ToolSend | None:
    """Extrai destino/conta/thread de uma invocação de envio.

    Args:
        args: Argumentos brutos da ferramenta
        expected_action: Valor de `action` que caracteriza envio

    Returns:
        ToolSend ou None se a ação não for de envio ou `to` estiver ausente
    """
    action = args.get("action")
    if not isinstance(action, str) or action.strip() != expected_action:
        return None

    to = args.get("to")
    if not isinstance(to, str) or not to:
        return None

    raw_account = args.get("accountId")
    account_id = raw_account.strip() if isinstance(raw_account, str) else ""

    raw_thread = args.get("threadId")
    thread_id = ""
    if isinstance(raw_thread, str):
        thread_id = raw_thread.strip()
    elif isinstance(raw_thread, (int, float)) and not isinstance(raw_thread, bool):
        thread_id = str(raw_thread)

    return ToolSend(to=to, account_id=account_id or None, thread_id=thread_id or None)
