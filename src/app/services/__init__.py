"""Serviços de aplicação.

Unidades reutilizáveis sem IO de rede: gates de capacidade, resolução de
contas e extração de intenções.
"""

from app.services.action_gate import (
    create_account_action_gate,
    create_action_gate,
    create_union_action_gate,
    list_token_sourced_accounts,
)
from app.services.inline_buttons import ConfigInlineButtonsProbe, is_inline_buttons_enabled
from app.services.telegram_accounts import (
    ConfigTelegramAccountSource,
    create_telegram_action_gate,
    list_enabled_telegram_accounts,
    resolve_telegram_account,
)
from app.services.tool_send import extract_tool_send

__all__ = [
    "ConfigInlineButtonsProbe",
    "ConfigTelegramAccountSource",
    "create_account_action_gate",
    "create_action_gate",
    "create_telegram_action_gate",
    "create_union_action_gate",
    "extract_tool_send",
    "is_inline_buttons_enabled",
    "list_enabled_telegram_accounts",
    "list_token_sourced_accounts",
    "resolve_telegram_account",
]
