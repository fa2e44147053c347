"""Leitura tipada de parâmetros brutos de ação.

Os parâmetros chegam como um mapeamento não tipado (chave → valor) vindo
da camada de agentes. Estas funções extraem escalares e listas com
política por campo e levantam ParameterError nomeando o campo violado.

Regras comuns:
- A chave exata tem precedência; na ausência, aceita a grafia snake_case
  (ex: chatId → chat_id).
- Valor de tipo primitivo incompatível é tratado como ausente.
- bool nunca é aceito como número.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any

from utils.errors import ParameterError

if TYPE_CHECKING:
    from collections.abc import Mapping

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def read_param_raw(params: Mapping[str, Any], key: str) -> Any:
    """Retorna o valor bruto da chave (ou da variante snake_case)."""
    if key in params:
        return params[key]
    snake = _snake_case(key)
    if snake != key and snake in params:
        return params[snake]
    return None


def read_string_param(
    params: Mapping[str, Any],
    key: str,
    *,
    required: bool = False,
    trim: bool = True,
    allow_empty: bool = False,
    label: str | None = None,
) -> str | None:
    """Lê um campo string.

    Args:
        params: Parâmetros brutos
        key: Nome do campo
        required: Falha se ausente (ou vazio, sem allow_empty)
        trim: Remove espaços nas pontas antes de validar
        allow_empty: Aceita string vazia mesmo quando required
        label: Nome usado na mensagem de erro (default: key)

    Returns:
        String (aparada) ou None se ausente e opcional

    Raises:
        ParameterError: Se obrigatório e ausente/vazio
    """
    name = label or key
    raw = read_param_raw(params, key)
    if not isinstance(raw, str):
        if required:
            raise ParameterError.missing(name)
        return None

    value = raw.strip() if trim else raw
    if not value and not allow_empty:
        if required:
            raise ParameterError.missing(name)
        return None
    return value


def read_string_or_number_param(
    params: Mapping[str, Any],
    key: str,
    *,
    required: bool = False,
    label: str | None = None,
) -> str | int | float | None:
    """Lê um identificador que pode ser numérico ou string.

    Números são devolvidos sem conversão para string (ids de chat).
    Strings são aparadas; string vazia conta como ausente.
    """
    name = label or key
    raw = read_param_raw(params, key)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, float) and math.isfinite(raw):
        return raw
    if isinstance(raw, str):
        value = raw.strip()
        if value:
            return value
    if required:
        raise ParameterError.missing(name)
    return None


def read_number_param(
    params: Mapping[str, Any],
    key: str,
    *,
    required: bool = False,
    integer: bool = False,
    label: str | None = None,
) -> int | float | None:
    """Lê um campo numérico (aceita strings numéricas).

    Raises:
        ParameterError: Se obrigatório e ausente, ou se `integer` e o
            valor tem parte fracionária
    """
    name = label or key
    raw = read_param_raw(params, key)
    value: int | float | None = None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str) and raw.strip():
        try:
            value = float(raw.strip())
        except ValueError:
            value = None

    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        if required:
            raise ParameterError.missing(name)
        return None

    if integer:
        if isinstance(value, float):
            if not value.is_integer():
                raise ParameterError(name, f"{name} must be an integer")
            return int(value)
        return value
    if isinstance(value, float) and isinstance(raw, str) and value.is_integer():
        return int(value)
    return value


def read_string_array_param(
    params: Mapping[str, Any],
    key: str,
    *,
    required: bool = False,
    label: str | None = None,
) -> list[str] | None:
    """Lê uma lista de strings.

    Uma string isolada vira lista de um elemento; elementos vazios são
    descartados e uma lista sem elementos úteis conta como ausente.

    Raises:
        ParameterError: Se algum elemento não for string, ou se obrigatório
            e ausente
    """
    name = label or key
    raw = read_param_raw(params, key)
    if isinstance(raw, (list, tuple)):
        if any(not isinstance(item, str) for item in raw):
            raise ParameterError(name, f"{name} must be a list of strings")
        values = [item.strip() for item in raw if item.strip()]
        if values:
            return values
    elif isinstance(raw, str) and raw.strip():
        return [raw.strip()]

    if required:
        raise ParameterError.missing(name)
    return None


def read_bool_param(params: Mapping[str, Any], key: str) -> bool | None:
    """Retorna o valor apenas se for um bool de fato."""
    raw = read_param_raw(params, key)
    return raw if isinstance(raw, bool) else None
