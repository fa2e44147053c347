"""Protocolo do handler de ações do provider (única fronteira de IO)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config.settings import ChannelsConfig

    from .models import TelegramActionRequest


class TelegramActionHandlerProtocol(Protocol):
    """Contrato mínimo para executar uma requisição canônica no provider."""

    async def handle(
        self,
        request: TelegramActionRequest,
        cfg: ChannelsConfig,
        *,
        media_local_roots: Sequence[str] | None = None,
    ) -> Any: ...
