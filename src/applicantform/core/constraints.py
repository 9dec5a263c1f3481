"""Single-field constraints and their builders."""

from __future__ import annotations

import math
from collections.abc import Collection
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Iterable

import pendulum
from pendulum.parsing.exceptions import ParserError
from pydantic import AnyUrl, EmailStr, TypeAdapter, ValidationError

_EMAIL_ADAPTER = TypeAdapter(EmailStr)
_URL_SCHEMES = frozenset({"http", "https", "ftp"})
_URL_ADAPTER = TypeAdapter(AnyUrl)


@dataclass(frozen=True, slots=True)
class Check:
    """Predicate over a raw value paired with its failure message."""

    test: Callable[[Any], bool]
    message: str


@dataclass(frozen=True, slots=True)
class Constraint:
    """Ordered checks applied to one field value.

    Checks short-circuit: only the first failing message is reported.
    """

    name: str
    checks: tuple[Check, ...] = ()

    @property
    def is_noop(self) -> bool:
        return not self.checks

    def check(self, value: Any) -> str | None:
        """Return the first failure message for ``value`` or ``None``."""
        for item in self.checks:
            if not item.test(value):
                return item.message
        return None


ALWAYS_PASS = Constraint(name="always_pass")


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Collection):
        return len(value) == 0
    return False


def to_number(value: Any) -> float | None:
    """Coerce raw input to a finite float, ``None`` when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def to_datetime(value: Any) -> pendulum.DateTime | None:
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime):
        return pendulum.instance(value)
    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        try:
            parsed = pendulum.parse(value.strip())
        except (ValueError, ParserError):
            return None
        if isinstance(parsed, pendulum.DateTime):
            return parsed
        if isinstance(parsed, pendulum.Date):
            return pendulum.datetime(parsed.year, parsed.month, parsed.day)
    return None


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        _EMAIL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return False
    return True


def is_text(value: Any) -> bool:
    """Strings, or plain numbers that read back as text."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def is_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        url = _URL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return False
    return url.scheme in _URL_SCHEMES and bool(url.host)


def required(message: str) -> Check:
    return Check(test=lambda value: not is_blank(value), message=message)


def text(message: str) -> Check:
    return Check(test=is_text, message=message)


def numeric(message: str) -> Check:
    return Check(test=lambda value: to_number(value) is not None, message=message)


def min_value(minimum: float, message: str) -> Check:
    def _test(value: Any) -> bool:
        number = to_number(value)
        return number is not None and number >= minimum

    return Check(test=_test, message=message)


def email(message: str) -> Check:
    return Check(test=is_email, message=message)


def url(message: str) -> Check:
    return Check(test=is_url, message=message)


def datetime_value(message: str) -> Check:
    return Check(test=lambda value: to_datetime(value) is not None, message=message)


def one_of(options: Iterable[str], message: str) -> Check:
    allowed = frozenset(options)
    return Check(
        test=lambda value: isinstance(value, str) and value in allowed,
        message=message,
    )


def non_empty_set(message: str) -> Check:
    def _test(value: Any) -> bool:
        if isinstance(value, (str, bytes)) or not isinstance(value, Collection):
            return False
        return len(value) > 0

    return Check(test=_test, message=message)


def subset_of(options: Iterable[str], message: str) -> Check:
    allowed = frozenset(options)

    def _test(value: Any) -> bool:
        if isinstance(value, (str, bytes)) or not isinstance(value, Collection):
            return False
        return all(isinstance(item, str) and item in allowed for item in value)

    return Check(test=_test, message=message)


def constraint(name: str, *checks: Check) -> Constraint:
    return Constraint(name=name, checks=tuple(checks))


__all__ = [
    "ALWAYS_PASS",
    "Check",
    "Constraint",
    "constraint",
    "datetime_value",
    "email",
    "is_blank",
    "is_email",
    "is_text",
    "is_url",
    "min_value",
    "non_empty_set",
    "numeric",
    "one_of",
    "required",
    "subset_of",
    "text",
    "to_datetime",
    "to_number",
    "url",
]
