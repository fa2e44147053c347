"""Gerenciamento de correlation_id para rastreamento de chamadas de ação.

Cada chamada de ação roda com um correlation_id (herdado do chamador ou
gerado), injetado em todos os logs. Usa ContextVar para ser async-safe.

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope() as correlation_id:
        # normalizar e despachar
        ...
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope() -> Iterator[str]:
    """Escopo com correlation_id: reaproveita o atual ou gera um novo."""
    token = set_correlation_id(get_correlation_id() or None)
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
