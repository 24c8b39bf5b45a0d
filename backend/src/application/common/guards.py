"""Input guards shared by handlers."""

from typing import Optional

from src.domain.exceptions import ValidationCode, ValidationError


def require_fields(**fields: Optional[str]) -> None:
    """Raise ValidationError(REQUIRED) for the first missing or blank field."""
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(name, f"{name} is required", ValidationCode.REQUIRED)


def require_range(name: str, value: int, minimum: int, maximum: Optional[int] = None) -> None:
    if value < minimum or (maximum is not None and value > maximum):
        bound = f"between {minimum} and {maximum}" if maximum is not None else f"at least {minimum}"
        raise ValidationError(
            name, f"{name} must be {bound}", ValidationCode.OUT_OF_RANGE
        )
