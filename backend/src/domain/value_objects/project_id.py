"""
ProjectId Value Object
"""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.value_objects.identifier import OpaqueId


@dataclass(frozen=True)
class ProjectId(OpaqueId):
    FIELD: ClassVar[str] = "projectId"


ProjectId.EMPTY = ProjectId._sentinel("")
