"""Success/failure values returned by fetch and parse operations"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import ServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    ok = True


@dataclass(frozen=True)
class Failure:
    error: ServiceError
    ok = False

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def error_code(self) -> str:
        return self.error.error_code


Result = Union[Success[T], Failure]
