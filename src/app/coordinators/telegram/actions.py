"""Adaptador de ações de mensagem do canal Telegram.

Fica entre a camada de agentes e o handler do provider:
- list_actions: ações canônicas disponíveis (união entre contas)
- supports_buttons: alguma conta suporta inline buttons
- extract_tool_send: intenção de envio a partir de argumentos de ferramenta
- handle_action: normaliza parâmetros brutos e despacha ao provider

Sem retry, sem estado entre chamadas: o handler é aguardado uma única vez
e seu resultado (ou erro) volta inalterado ao chamador.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from api.normalizers.telegram import get_action_normalizer
from app.constants.actions import ActionName
from app.observability import correlation_scope, record_action_failure, record_latency
from app.services.action_gate import create_union_action_gate, list_token_sourced_accounts
from app.services.inline_buttons import ConfigInlineButtonsProbe
from app.services.telegram_accounts import ConfigTelegramAccountSource
from app.services.tool_send import extract_tool_send
from config.logging import get_logger, log_fallback
from utils.errors import ParameterError, UnsupportedActionError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from app.protocols.accounts import (
        InlineButtonsProbeProtocol,
        ResolvedTelegramAccount,
        TelegramAccountSourceProtocol,
    )
    from app.protocols.action_handler import TelegramActionHandlerProtocol
    from app.protocols.models import ToolSend
    from config.settings import ChannelsConfig

logger = get_logger(__name__)

PROVIDER_ID = "telegram"

_METRIC_COMPONENT = "telegram_actions"

# (chave de configuração, default, ações liberadas); `send` é sempre liberado
_GATED_ACTIONS: tuple[tuple[str, bool, tuple[ActionName, ...]], ...] = (
    ("reactions", True, (ActionName.REACT,)),
    ("deleteMessage", True, (ActionName.DELETE,)),
    ("editMessage", True, (ActionName.EDIT,)),
    ("sticker", False, (ActionName.STICKER, ActionName.STICKER_SEARCH)),
    ("sendPoll", True, (ActionName.POLL,)),
    ("createForumTopic", True, (ActionName.TOPIC_CREATE,)),
)


class TelegramMessageActions:
    """Adaptador de ações do provider Telegram.

    Args:
        handler: Executor das requisições canônicas (fronteira de IO)
        account_source: Fonte de contas habilitadas e gates de ação
        buttons_probe: Verificação de inline buttons por conta
    """

    provider_id = PROVIDER_ID

    def __init__(
        self,
        handler: TelegramActionHandlerProtocol,
        *,
        account_source: TelegramAccountSourceProtocol | None = None,
        buttons_probe: InlineButtonsProbeProtocol | None = None,
    ) -> None:
        self._handler = handler
        self._accounts = account_source or ConfigTelegramAccountSource()
        self._buttons = buttons_probe or ConfigInlineButtonsProbe()

    def _list_accounts(self, cfg: ChannelsConfig) -> list[ResolvedTelegramAccount]:
        return list_token_sourced_accounts(self._accounts.list_enabled_accounts(cfg))

    def list_actions(self, cfg: ChannelsConfig) -> list[ActionName]:
        """Ações canônicas disponíveis, em ordem estável.

        Sem contas com token a lista é vazia; caso contrário inclui `send`.
        """
        accounts = self._list_accounts(cfg)
        if not accounts:
            log_fallback(logger, "telegram.list_actions", reason="no_accounts")
            return []

        gate = create_union_action_gate(
            accounts,
            lambda account: self._accounts.create_action_gate(cfg, account.account_id),
        )
        actions = [ActionName.SEND]
        for key, default, unlocked in _GATED_ACTIONS:
            if gate(key, default):
                actions.extend(unlocked)
        return actions

    def supports_buttons(self, cfg: ChannelsConfig) -> bool:
        """True se alguma conta com token suporta inline buttons."""
        accounts = self._list_accounts(cfg)
        if not accounts:
            log_fallback(logger, "telegram.supports_buttons", reason="no_accounts")
            return False
        return any(self._buttons.is_enabled(cfg, account.account_id) for account in accounts)

    def extract_tool_send(self, args: Mapping[str, Any]) -> ToolSend | None:
        return extract_tool_send(args, "sendMessage")

    async def handle_action(
        self,
        action: str,
        params: Mapping[str, Any],
        cfg: ChannelsConfig,
        account_id: str | None = None,
        media_local_roots: Sequence[str] | None = None,
    ) -> Any:
        """Normaliza os parâmetros da ação e despacha ao handler.

        Args:
            action: Nome canônico da ação (ex: "send", "poll")
            params: Parâmetros brutos (somente leitura)
            cfg: Configuração de canais repassada ao handler
            account_id: Conta que deve executar a ação (opcional)
            media_local_roots: Diretórios locais permitidos para mídia

        Returns:
            Resultado do handler, inalterado

        Raises:
            UnsupportedActionError: Ação fora do conjunto suportado
            ParameterError: Parâmetro ausente ou malformado
        """
        with correlation_scope() as correlation_id:
            try:
                normalizer = get_action_normalizer(ActionName(action))
            except ValueError:
                normalizer = None
            if normalizer is None:
                logger.warning(
                    "Unsupported channel action",
                    extra={"action": str(action), "provider": PROVIDER_ID},
                )
                record_action_failure(
                    _METRIC_COMPONENT, str(action), "UnsupportedActionError", correlation_id
                )
                raise UnsupportedActionError(str(action), PROVIDER_ID)

            try:
                request = normalizer(params, account_id)
            except ParameterError as exc:
                logger.warning(
                    "Invalid action parameters",
                    extra={"action": action, "provider": PROVIDER_ID, "field": exc.field},
                )
                record_action_failure(_METRIC_COMPONENT, action, "ParameterError", correlation_id)
                raise

            logger.debug(
                "Dispatching channel action",
                extra={
                    "action": action,
                    "provider_action": request.action.value,
                    "provider": PROVIDER_ID,
                    "account_id": account_id,
                },
            )

            # Envio de enquete não usa mídia local
            roots = None if action == ActionName.POLL else media_local_roots
            start = time.perf_counter()
            try:
                result = await self._handler.handle(request, cfg, media_local_roots=roots)
            except Exception as exc:
                logger.warning(
                    "Provider action failed",
                    extra={
                        "action": action,
                        "provider": PROVIDER_ID,
                        "error_type": type(exc).__name__,
                    },
                )
                record_action_failure(
                    _METRIC_COMPONENT, action, type(exc).__name__, correlation_id
                )
                raise
            record_latency(
                _METRIC_COMPONENT,
                request.action.value,
                (time.perf_counter() - start) * 1000,
                correlation_id,
            )
            return result


def create_telegram_message_actions(
    handler: TelegramActionHandlerProtocol,
    *,
    account_source: TelegramAccountSourceProtocol | None = None,
    buttons_probe: InlineButtonsProbeProtocol | None = None,
) -> TelegramMessageActions:
    """Factory do adaptador Telegram com dependências opcionais injetadas."""
    return TelegramMessageActions(
        handler,
        account_source=account_source,
        buttons_probe=buttons_probe,
    )
