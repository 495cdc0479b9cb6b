"""Audit logging utilities."""

from __future__ import annotations

import inspect
import json
import logging
from datetime import datetime
from functools import wraps
from typing import Any, Callable, Dict

logger = logging.getLogger("talent_compass.audit")


class AuditLogger:
    """Structured audit logger."""

    def record(self, action: str, actor: str, details: Dict[str, Any]) -> None:
        payload = {
            "timestamp": datetime.utcnow().isoformat(),
            "action": action,
            "actor": actor,
            "details": details,
        }
        logger.info(json.dumps(payload, default=str))


audit_logger = AuditLogger()


def audit_log(func: Callable) -> Callable:
    """Decorator that emits structured audit records around a service mutation."""

    signature = inspect.signature(func)

    @wraps(func)
    def wrapper(*args, **kwargs):
        arguments = _bind_arguments(signature, args, kwargs)
        context_logger = _resolve_logger(args)
        actor_id = _resolve_actor(arguments)
        metadata = _build_metadata(func, arguments)
        context_logger.record("start", actor_id, metadata)
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            context_logger.record("error", actor_id, metadata | {"error": str(exc)})
            raise
        context_logger.record("success", actor_id, metadata)
        return result

    return wrapper


def _bind_arguments(signature: inspect.Signature, args: tuple, kwargs: Dict[str, Any]) -> Dict[str, Any]:
    # Unbindable calls still reach func, which raises the real TypeError.
    try:
        return dict(signature.bind_partial(*args, **kwargs).arguments)
    except TypeError:
        return dict(kwargs)


def _resolve_logger(args: tuple) -> AuditLogger:
    service = args[0] if args else None
    return getattr(service, "audit_logger", None) or audit_logger


def _resolve_actor(arguments: Dict[str, Any]) -> str:
    actor = arguments.get("actor")
    if actor and getattr(actor, "id", None):
        return str(actor.id)
    return "anonymous"


def _build_metadata(func: Callable, arguments: Dict[str, Any]) -> Dict[str, Any]:
    metadata: Dict[str, Any] = {
        "action": func.__qualname__,
    }
    for key in ("employee_id", "user_id"):
        if key in arguments:
            metadata[key] = arguments[key]
    for key in ("payload", "changes", "submission"):
        if isinstance(arguments.get(key), dict):
            metadata[f"{key}_keys"] = sorted(arguments[key].keys())
    return metadata


__all__ = ["audit_logger", "audit_log", "AuditLogger"]
