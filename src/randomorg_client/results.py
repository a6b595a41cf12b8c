"""Returned outcomes of the public operations.

Every public operation returns either :class:`Ok` carrying the typed payload
or :class:`Err` carrying one structured rejection. Rejections are resolved
locally and never thrown across the public boundary; call
:meth:`Err.unwrap` to opt into exception-style handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from randomorg_client.exceptions import RequestRejectedError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ValidationError:
    """An argument lies outside its documented bounds or has the wrong type.

    Detected before any network access.

    Attributes:
        field: Name of the failing parameter (e.g. ``"n"``, ``"max"``).
        value: The rejected value.
        expected: The bound or allowed set, as text (e.g. ``"[1, 10000]"``).
        message: Human-readable description.
    """

    field: str
    value: Any
    expected: str
    message: str


@dataclass(frozen=True, slots=True)
class QuotaExhaustedError:
    """The pre-flight quota check reported fewer bits than required.

    Attributes:
        minimum: The bit quota the check required.
        message: Human-readable description.
    """

    minimum: float
    message: str = "random.org suggests to wait until tomorrow"


RejectionError = Union[ValidationError, QuotaExhaustedError]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying the decoded payload."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Rejected outcome carrying a structured error value."""

    error: RejectionError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise :class:`RequestRejectedError` wrapping :attr:`error`."""
        raise RequestRejectedError(self.error)


Result = Union[Ok[T], Err]
