"""Resolução de destino e ids de mensagem para ações Telegram.

Precedência de destino (primeiro presente vence):
chatId → channelId → target → to. `to` é o último recurso e obrigatório.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.params import (
    read_number_param,
    read_string_or_number_param,
    read_string_param,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import ChatTarget

_TARGET_KEYS = ("chatId", "channelId", "target")


def read_chat_target(params: Mapping[str, Any]) -> ChatTarget:
    """Resolve o chat alvo; ids numéricos são preservados como número.

    Raises:
        ParameterError: Se nenhum campo de destino estiver presente
    """
    for key in _TARGET_KEYS:
        value = read_string_or_number_param(params, key)
        if value is not None:
            return _as_target(value)
    return _as_target(read_string_or_number_param(params, "to", required=True))


def read_poll_target(params: Mapping[str, Any]) -> str:
    """Resolve o destino de enquete; `target` e `to` só aceitam string.

    O resultado é sempre string, como exige o envio de enquetes.
    """
    for key in ("chatId", "channelId"):
        value = read_string_or_number_param(params, key)
        if value is not None:
            return str(_as_target(value))
    target = read_string_param(params, "target")
    if target is not None:
        return target
    return str(read_string_param(params, "to", required=True))


def read_message_id(params: Mapping[str, Any]) -> int:
    """Lê messageId inteiro obrigatório."""
    return int(read_number_param(params, "messageId", required=True, integer=True))


def _as_target(value: Any) -> ChatTarget:
    # 123.0 vindo de JSON vira 123
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
