"""
Result envelope - success/failure union returned instead of raising.

Expected business failures travel as Failure(error); only defects raise.

Usage:
    result = await user_repository.find_by_user_id(user_id)
    if isinstance(result, Failure):
        return result
    user = result.data
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from src.domain.exceptions import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T

    @property
    def success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True)
class Failure:
    error: DomainError

    @property
    def success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Success[T], Failure]
