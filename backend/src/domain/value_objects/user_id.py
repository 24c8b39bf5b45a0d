"""
UserId Value Object
"""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.value_objects.identifier import OpaqueId


@dataclass(frozen=True)
class UserId(OpaqueId):
    FIELD: ClassVar[str] = "userId"


UserId.EMPTY = UserId._sentinel("")
