"""Input checks shared by the domain services."""

from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.jobtracker.core.errors import ValidationError

TModel = TypeVar("TModel", bound=BaseModel)


def require_user_id(user_id: UUID) -> UUID:
    if user_id is None or user_id.int == 0:
        raise ValidationError("User ID cannot be empty.")
    return user_id


def require_id(value: int, label: str) -> int:
    if value is None or value <= 0:
        raise ValidationError(f"{label} ID must be greater than zero.")
    return value


def require_text(value: str | None, message: str) -> str:
    """Return ``value`` trimmed, rejecting None and whitespace-only text."""
    if value is None or not value.strip():
        raise ValidationError(message)
    return value.strip()


def optional_text(value: str | None) -> str | None:
    return value.strip() if value is not None else None


def build(model_type: type[TModel], **data: Any) -> TModel:
    """Validate ``data`` into ``model_type``, reporting failures as ``ValidationError``."""
    try:
        return model_type.model_validate(data)
    except PydanticValidationError as exc:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or model_type.__name__}: {error['msg']}"
            for error in exc.errors()
        )
        raise ValidationError(messages) from exc
