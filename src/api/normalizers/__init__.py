"""Normalizers por canal — conversão de parâmetros externos para modelos internos.

Estrutura:
- params: leitura tipada de parâmetros brutos (comum a todos os canais)
- telegram/: normalizer de ações Telegram

Cada canal tem seu próprio normalizer, mantendo SRP.
"""

from .params import (
    read_bool_param,
    read_number_param,
    read_param_raw,
    read_string_array_param,
    read_string_or_number_param,
    read_string_param,
)

__all__ = [
    "read_bool_param",
    "read_number_param",
    "read_param_raw",
    "read_string_array_param",
    "read_string_or_number_param",
    "read_string_param",
]
