# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""Value types produced by the holiday calendar and the trading-day counter."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from tradingdays.core.calendar.date_math import date_key


class HolidayKind(Enum):
    """Whether the market is shut all day or closes early."""

    FULL_CLOSURE = "closed"
    HALF_DAY = "half-day"


@dataclass(frozen=True)
class HolidayEvent:
    """A named closure or early-close session on one calendar date."""

    date: date
    name: str
    kind: HolidayKind
    close_time: Optional[time] = None
    """Early-close time in market local time. Set iff kind is HALF_DAY."""

    def __post_init__(self) -> None:
        if self.kind is HolidayKind.HALF_DAY and self.close_time is None:
            raise ValueError(f"Half-day event {self.name!r} requires a close_time")
        if self.kind is HolidayKind.FULL_CLOSURE and self.close_time is not None:
            raise ValueError(f"Full closure {self.name!r} cannot carry a close_time")

    @property
    def is_half_day(self) -> bool:
        return self.kind is HolidayKind.HALF_DAY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": date_key(self.date),
            "name": self.name,
            "kind": self.kind.value,
            "close_time": self.close_time.strftime("%H:%M") if self.close_time else None,
        }


@dataclass(frozen=True)
class YearCalendar:
    """All closures and half-days of one calendar year, keyed by date.

    At most one event per date. ``events`` is exposed read-only.
    """

    year: int
    events: Mapping[date, HolidayEvent] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for d, event in self.events.items():
            if d.year != self.year:
                raise ValueError(f"{event.name} on {date_key(d)} is outside {self.year}")
            if event.date != d:
                raise ValueError(f"{event.name} keyed under {date_key(d)} but dated {date_key(event.date)}")
        # frozen: bypass __setattr__ to swap in the read-only view
        object.__setattr__(self, "events", MappingProxyType(dict(self.events)))

    def get(self, d: date) -> Optional[HolidayEvent]:
        return self.events.get(d)

    def __contains__(self, d: object) -> bool:
        return d in self.events

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[HolidayEvent]:
        return iter(self.sorted_events())

    def sorted_events(self) -> Tuple[HolidayEvent, ...]:
        return tuple(self.events[d] for d in sorted(self.events))

    def full_closures(self) -> Tuple[HolidayEvent, ...]:
        return tuple(e for e in self.sorted_events() if e.kind is HolidayKind.FULL_CLOSURE)

    def half_days(self) -> Tuple[HolidayEvent, ...]:
        return tuple(e for e in self.sorted_events() if e.kind is HolidayKind.HALF_DAY)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "full_closure_count": len(self.full_closures()),
            "half_day_count": len(self.half_days()),
            "events": [e.to_dict() for e in self.sorted_events()],
        }


@dataclass(frozen=True)
class TradingDayReport:
    """Trading sessions left in ``year`` as seen from one observation instant."""

    year: int
    total_trading_days: float
    """full_day_count + 0.5 * half_day_count."""

    full_day_count: int
    half_day_count: int
    upcoming_events: Tuple[HolidayEvent, ...] = ()
    """Closures and half-days from the observation date to Dec 31, ascending by date."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the API / CLI."""
        return {
            "year": self.year,
            "total_trading_days": self.total_trading_days,
            "full_day_count": self.full_day_count,
            "half_day_count": self.half_day_count,
            "upcoming_events": [e.to_dict() for e in self.upcoming_events],
        }


__all__ = ["HolidayKind", "HolidayEvent", "YearCalendar", "TradingDayReport"]
