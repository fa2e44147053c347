"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, create_telegram_actions

    initialize_app()
    actions = create_telegram_actions(handler)
"""

from __future__ import annotations

import logging

from app.bootstrap.telegram_factory import create_telegram_actions
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_channels_config
from utils.errors import ChannelConfigError

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings e configuração de canais no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    settings = get_base_settings()
    strict_mode = not settings.is_development
    errors = [f"base: {error}" for error in settings.validate()]

    try:
        get_channels_config()
    except ChannelConfigError as exc:
        errors.append(f"channels: {exc}")

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": settings.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": settings.environment,
            "error_count": len(errors),
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {settings.environment}:\n{details}")


__all__ = [
    "create_telegram_actions",
    "initialize_app",
    "validate_runtime_settings",
]
