"""Exceções de domínio do adaptador de ações de canal."""

from __future__ import annotations


class ChannelActionError(RuntimeError):
    """Base para falhas do adaptador de ações de canal."""


class ParameterError(ChannelActionError, ValueError):
    """Parâmetro ausente ou malformado em uma requisição de ação.

    Attributes:
        field: Nome do parâmetro que violou a regra.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    @classmethod
    def missing(cls, field: str) -> ParameterError:
        """Erro padrão para campo obrigatório ausente."""
        return cls(field, f"missing required field '{field}'")


class UnsupportedActionError(ChannelActionError):
    """Ação fora do conjunto fechado suportado pelo provider."""

    def __init__(self, action: str, provider: str) -> None:
        super().__init__(f"Action {action} is not supported for provider {provider}.")
        self.action = action
        self.provider = provider


class ChannelConfigError(ChannelActionError):
    """Arquivo de configuração de canais inválido."""
