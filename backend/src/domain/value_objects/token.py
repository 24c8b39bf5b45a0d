"""
Token Value Object - Bearer token presented by a client.

Only the structure is checked here (three base64url segments whose header and
payload decode to JSON objects). Signature verification belongs to the
transport layer, which knows the signing secret.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

import jwt

from src.domain.constants import ValidationRules
from src.domain.exceptions import ValidationCode, ValidationError
from src.domain.value_objects.user_id import UserId

_SEGMENTS = re.compile(r"^[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+$")
_USER_ID_CLAIMS = ("sub", "uid", "user_id")


@dataclass(frozen=True)
class Token:
    value: str
    _header: dict = field(init=False, repr=False, compare=False)
    _payload: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValidationError("token", "Token is required", ValidationCode.REQUIRED)
        if len(self.value) < ValidationRules.TOKEN_MIN_LENGTH:
            raise ValidationError(
                "token", "Token is too short", ValidationCode.TOO_SHORT
            )
        if len(self.value) > ValidationRules.TOKEN_MAX_LENGTH:
            raise ValidationError("token", "Token is too long", ValidationCode.TOO_LONG)
        if not _SEGMENTS.match(self.value):
            raise ValidationError("token", "Token must have three segments")

        try:
            header = jwt.get_unverified_header(self.value)
            payload = jwt.decode(self.value, options={"verify_signature": False})
        except jwt.PyJWTError as e:
            raise ValidationError("token", f"Token cannot be decoded: {e}") from e

        exp = payload.get("exp")
        if exp is not None and (isinstance(exp, bool) or not isinstance(exp, (int, float))):
            raise ValidationError("token", "Token exp claim must be a number")

        object.__setattr__(self, "_header", header)
        object.__setattr__(self, "_payload", payload)

    def get_header(self) -> dict[str, Any]:
        return dict(self._header)

    def get_payload(self) -> dict[str, Any]:
        return dict(self._payload)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        exp = self._payload.get("exp")
        if exp is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now.timestamp() >= float(exp)

    def get_user_id(self) -> Optional[UserId]:
        for claim in _USER_ID_CLAIMS:
            raw = self._payload.get(claim)
            if isinstance(raw, str) and raw.strip():
                return UserId(raw)
        return None

    def get_roles(self) -> list[str]:
        roles = self._payload.get("roles")
        if isinstance(roles, list):
            return [str(r) for r in roles]
        role = self._payload.get("role")
        if isinstance(role, str) and role:
            return [role]
        return []

    def __str__(self) -> str:
        # Never print the raw credential
        return f"Token({self.value[:8]}...)"
