"""Capability gate — habilitação de ações por conta e união entre contas.

Um gate responde "a chave de ação X está habilitada?" com um default
fornecido pelo chamador quando a chave não está configurada.

União: uma ação fica disponível se QUALQUER conta a habilita. O
adaptador expõe o superconjunto do que as contas configuradas podem
fazer; qual conta executa cada chamada é decidido no dispatch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from app.constants.actions import TokenSource

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from app.protocols.accounts import ActionGate, ResolvedTelegramAccount
    from config.settings import TelegramActionConfig

AccountT = TypeVar("AccountT")


def create_action_gate(actions: TelegramActionConfig | None) -> ActionGate:
    """Gate sobre um único bloco `actions` da configuração."""

    def gate(key: str, default: bool = True) -> bool:
        value = actions.get(key) if actions is not None else None
        return default if value is None else value

    return gate


def create_account_action_gate(
    base_actions: TelegramActionConfig | None,
    account_actions: TelegramActionConfig | None,
) -> ActionGate:
    """Gate com fallback por chave: conta → canal → default."""
    base_gate = create_action_gate(base_actions)

    def gate(key: str, default: bool = True) -> bool:
        value = account_actions.get(key) if account_actions is not None else None
        if value is not None:
            return value
        return base_gate(key, default)

    return gate


def create_union_action_gate(
    accounts: Sequence[AccountT],
    gate_factory: Callable[[AccountT], ActionGate],
) -> ActionGate:
    """Gate que habilita a chave se ao menos uma conta a habilita.

    Sem contas, toda chave resolve para False.
    """
    gates = [gate_factory(account) for account in accounts]

    def gate(key: str, default: bool = True) -> bool:
        return any(account_gate(key, default) for account_gate in gates)

    return gate


def list_token_sourced_accounts(
    accounts: Iterable[ResolvedTelegramAccount],
) -> list[ResolvedTelegramAccount]:
    """Filtra contas que possuem alguma origem de token."""
    return [account for account in accounts if account.token_source != TokenSource.NONE]
