"""
temporal.py - contracts for ``datetime.datetime`` and ``datetime.timedelta``.

Key classes
-----------
DateTimeProvider
    Source of "now".  Pass a custom one to :class:`DateTimeContract` to pin
    the clock (tests, replays).

DateTimeContract
    Ordering checks plus calendar checks (past/future, today, month, year,
    weekday, leap year, UTC, daylight saving).

DurationContract
    Ordering checks phrased for durations (shorter / longer than).

Aware values are compared with "now" in their own timezone; naive values
with the provider's naive local time.
"""

from __future__ import annotations

import calendar
import datetime as _dt
from typing import Optional

from . import validator
from .contract import DEFAULT_ARGUMENT_NAME, ComparableContract
from .linker import Linker

__all__ = ["DateTimeProvider", "SystemDateTimeProvider", "DateTimeContract", "DurationContract"]

_ONE_DAY = _dt.timedelta(days=1)
_ZERO = _dt.timedelta(0)


def _is_local(value: _dt.datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() == value.astimezone().utcoffset()


class DateTimeProvider:
    """Interface: ``now(tz)`` returns the current time in *tz* (naive if None)."""

    def now(self, tz: Optional[_dt.tzinfo] = None) -> _dt.datetime:
        raise NotImplementedError


class SystemDateTimeProvider(DateTimeProvider):

    def now(self, tz: Optional[_dt.tzinfo] = None) -> _dt.datetime:
        return _dt.datetime.now(tz)


class DateTimeContract(ComparableContract):

    def __init__(
        self,
        value: Optional[_dt.datetime],
        name: str = DEFAULT_ARGUMENT_NAME,
        *,
        provider: Optional[DateTimeProvider] = None,
    ):
        super().__init__(value, name)
        self._provider = provider or SystemDateTimeProvider()

    def _now(self) -> _dt.datetime:
        return self._provider.now(self._value.tzinfo)

    def _today(self) -> _dt.date:
        return self._now().date()

    def _check(self, predicate, message: Optional[str]) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(predicate, self._value, self._name, message)
        return self.linker

    # ------------------------- relative to now ---------------------------- #

    def be_in_the_past(self, message: Optional[str] = None, *, reference: Optional[_dt.datetime] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_less_than(reference or self._now(), self._value, self._name, message)
        return self.linker

    def not_be_in_the_past(self, message: Optional[str] = None, *, reference: Optional[_dt.datetime] = None) -> Linker:
        return self.be_in_the_future(message, reference=reference)

    def be_in_the_future(self, message: Optional[str] = None, *, reference: Optional[_dt.datetime] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_greater_than(reference or self._now(), self._value, self._name, message)
        return self.linker

    def not_be_in_the_future(self, message: Optional[str] = None, *, reference: Optional[_dt.datetime] = None) -> Linker:
        return self.be_in_the_past(message, reference=reference)

    def be_today(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.date() == self._today(), message)

    def not_be_today(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.date() != self._today(), message)

    def be_tomorrow(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.date() == self._today() + _ONE_DAY, message)

    def not_be_tomorrow(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.date() != self._today() + _ONE_DAY, message)

    def be_yesterday(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.date() == self._today() - _ONE_DAY, message)

    def not_be_yesterday(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.date() != self._today() - _ONE_DAY, message)

    # ----------------------------- calendar ------------------------------- #

    def be_on_date(self, date: _dt.date, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.date() == date, message)

    def not_be_on_date(self, date: _dt.date, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.date() != date, message)

    def be_in_year(self, year: int, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.year == year, message)

    def not_be_in_year(self, year: int, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.year != year, message)

    def be_in_month(self, month: int, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.month == month, message)

    def not_be_in_month(self, month: int, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.month != month, message)

    def be_on_day(self, day: int, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.day == day, message)

    def not_be_on_day(self, day: int, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.day != day, message)

    def be_on_day_of_year(self, day_of_year: int, message: Optional[str] = None) -> Linker:
        """*day_of_year* runs from 1 to 366; anything else is a range error on ``day_of_year``."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_between(1, 366, day_of_year, "day_of_year")
        return self._check(lambda v: v.timetuple().tm_yday == day_of_year, message)

    def not_be_on_day_of_year(self, day_of_year: int, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_between(1, 366, day_of_year, "day_of_year")
        return self._check(lambda v: v.timetuple().tm_yday != day_of_year, message)

    def be_on_weekday(self, weekday: int, message: Optional[str] = None) -> Linker:
        """*weekday* follows :meth:`datetime.weekday` (Monday is 0)."""
        return self._check(lambda v: v.weekday() == weekday, message)

    def be_weekend(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.weekday() >= 5, message)

    def not_be_weekend(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.weekday() < 5, message)

    def be_weekday(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.weekday() < 5, message)

    def not_be_weekday(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.weekday() >= 5, message)

    def be_leap_year(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: calendar.isleap(v.year), message)

    def not_be_leap_year(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: not calendar.isleap(v.year), message)

    # ----------------------------- timezone ------------------------------- #

    def be_utc(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.tzinfo is not None and v.utcoffset() == _ZERO, message)

    def not_be_utc(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: v.tzinfo is None or v.utcoffset() != _ZERO, message)

    def be_local(self, message: Optional[str] = None) -> Linker:
        """Aware, with the offset the system timezone has at that instant."""
        return self._check(_is_local, message)

    def not_be_local(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: not _is_local(v), message)

    def be_in_daylight_saving(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: bool(v.dst()), message)

    def not_be_in_daylight_saving(self, message: Optional[str] = None) -> Linker:
        return self._check(lambda v: not v.dst(), message)


class DurationContract(ComparableContract):

    def be_shorter_than(self, duration: _dt.timedelta, message: Optional[str] = None) -> Linker:
        return self.be_less_than(duration, message)

    def not_be_shorter_than(self, duration: _dt.timedelta, message: Optional[str] = None) -> Linker:
        return self.be_greater_or_equal_to(duration, message)

    def be_longer_than(self, duration: _dt.timedelta, message: Optional[str] = None) -> Linker:
        return self.be_greater_than(duration, message)

    def not_be_longer_than(self, duration: _dt.timedelta, message: Optional[str] = None) -> Linker:
        return self.be_less_or_equal_to(duration, message)
