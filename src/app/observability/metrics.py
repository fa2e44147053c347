"""Registro de métricas via structured logging.

As métricas são logs estruturados agregáveis posteriormente
(ex: BigQuery, CloudWatch Insights).

Uso:
    from app.observability import record_latency

    start = time.perf_counter()
    # ... chamada ao provider ...
    record_latency("telegram_actions", "sendMessage", latency_ms, correlation_id)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "telegram_actions")
        operation: Nome da operação (ex: "sendMessage")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_action_failure(
    component: str,
    operation: str,
    error_type: str,
    correlation_id: str | None = None,
) -> None:
    """Registra falha de ação (sem mensagem do erro, que pode conter PII).

    Args:
        component: Nome do componente (ex: "telegram_actions")
        operation: Ação solicitada (ex: "send")
        error_type: Classe do erro (ex: "ParameterError")
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_action_failure",
        extra={
            "metric_type": "action_failure",
            "component": component,
            "operation": operation,
            "error_type": error_type,
            "correlation_id": correlation_id,
        },
    )
