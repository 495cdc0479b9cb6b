"""Shared plumbing for record services."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from talent_compass.core.exceptions import InvalidRecordError, PermissionDeniedError
from talent_compass.core.permissions import CapabilityLike, PermissionHolder, permits, resolve_capability
from talent_compass.core.store import RecordStore
from talent_compass.utils.audit import AuditLogger, audit_logger as default_audit_logger

Clock = Callable[[], datetime]
M = TypeVar("M", bound=BaseModel)


def ensure_permitted(actor: PermissionHolder, capability: CapabilityLike, section: Optional[str] = None) -> None:
    """Raise ``PermissionDeniedError`` unless ``actor`` holds ``capability`` for ``section``."""

    if permits(actor, capability, section):
        return
    details: Dict[str, Any] = {
        "actor": getattr(actor, "id", None),
        "capability": resolve_capability(capability).value,
    }
    if section is not None:
        details["section"] = getattr(section, "value", section)
    raise PermissionDeniedError(
        error_code="PERMISSION_DENIED",
        message="Actor is not allowed to perform this operation",
        details=details,
    )


def require_fields(payload: Dict[str, Any], fields: Iterable[str]) -> None:
    missing = [name for name in fields if payload.get(name) in (None, "")]
    if missing:
        raise InvalidRecordError(
            error_code="MISSING_FIELD",
            message=f"Missing required fields: {', '.join(missing)}",
            details={"fields": missing},
        )


def reject_fields(changes: Dict[str, Any], fields: Iterable[str]) -> None:
    blocked = sorted(set(changes) & set(fields))
    if blocked:
        raise InvalidRecordError(
            error_code="IMMUTABLE_FIELD",
            message=f"Fields cannot be changed here: {', '.join(blocked)}",
            details={"fields": blocked},
        )


def reject_unknown_fields(changes: Dict[str, Any], known: Iterable[str]) -> None:
    unknown = sorted(set(changes) - set(known))
    if unknown:
        raise InvalidRecordError(
            error_code="UNKNOWN_FIELD",
            message=f"Unknown fields: {', '.join(unknown)}",
            details={"fields": unknown},
        )


def validate_record(model: Type[M], data: Dict[str, Any]) -> M:
    """Build ``model`` from ``data``, reporting field errors as ``InvalidRecordError``."""

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        fields = _error_fields(exc)
        raise InvalidRecordError(
            error_code="INVALID_FIELD",
            message=f"Invalid {model.__name__} fields: {', '.join(fields)}",
            details={"fields": fields, "errors": exc.errors(include_url=False, include_context=False)},
        ) from exc


def _error_fields(exc: ValidationError) -> List[str]:
    return sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})


class RecordService:
    """Base for services that read and replace records in a ``RecordStore``."""

    def __init__(
        self,
        store: RecordStore,
        *,
        audit_logger: Optional[AuditLogger] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.store = store
        self.audit_logger = audit_logger or default_audit_logger
        self.clock: Clock = clock or datetime.utcnow


__all__ = [
    "Clock",
    "RecordService",
    "ensure_permitted",
    "reject_fields",
    "reject_unknown_fields",
    "require_fields",
    "validate_record",
]
