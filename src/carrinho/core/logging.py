
"""Logging JSON (structlog) do carrinho, com id da sessão em todo evento.

A sessão dona do CartStore define o id via set_session_id (bootstrap_di faz
isso); cada módulo pega seu logger com get_logger("<componente>").
"""
from __future__ import annotations
import structlog
import sys
from uuid import uuid4
from contextvars import ContextVar
from typing import Any, MutableMapping

session_id_ctx: ContextVar[str] = ContextVar("session_id", default="-")

def set_session_id(value: str | None = None) -> str:
    """Define session_id no contexto atual e retorna o valor definido."""
    sid = value or uuid4().hex
    session_id_ctx.set(sid)
    return sid

def add_session_id(_: Any, __: str, event: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    event.setdefault("session_id", session_id_ctx.get())
    return event

def configure_logging(level: int = 20) -> None:
    """Configura structlog: nível mínimo, session_id, timestamp ISO e saída JSON em stdout."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            add_session_id,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )

configure_logging()

def get_logger(component: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger preguiçoso; reflete a configuração vigente no momento de cada chamada."""
    if component:
        return structlog.get_logger(component=component)
    return structlog.get_logger()
