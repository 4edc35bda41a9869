"""Enumerations, API code mappings and value formatting for Ergani payloads."""

from __future__ import annotations

import datetime as _dt
from enum import Enum, IntEnum
from typing import Mapping, TypeVar, Union

__all__ = [
    "WorkCardMovementType",
    "LateDeclarationJustificationType",
    "OvertimeJustificationType",
    "ScheduleWorkType",
    "Weekday",
    "map_work_card_movement_type",
    "map_late_declaration_justification",
    "map_overtime_justification",
    "map_schedule_work_type",
    "format_time",
    "format_date",
    "format_datetime",
    "format_bool",
]


class WorkCardMovementType(str, Enum):
    """Whether an employee is clocking in or out."""

    ARRIVAL = "ARRIVAL"
    DEPARTURE = "DEPARTURE"


class LateDeclarationJustificationType(str, Enum):
    """Official reason for a late work card declaration."""

    POWER_OUTAGE = "POWER_OUTAGE"
    EMPLOYER_SYSTEMS_UNAVAILABLE = "EMPLOYER_SYSTEMS_UNAVAILABLE"
    ERGANI_SYSTEMS_UNAVAILABLE = "ERGANI_SYSTEMS_UNAVAILABLE"


class OvertimeJustificationType(str, Enum):
    """Official reason for an employee working overtime."""

    ACCIDENT_PREVENTION_OR_DAMAGE_RESTORATION = "ACCIDENT_PREVENTION_OR_DAMAGE_RESTORATION"
    URGENT_SEASONAL_TASKS = "URGENT_SEASONAL_TASKS"
    EXCEPTIONAL_WORKLOAD = "EXCEPTIONAL_WORKLOAD"
    SUPPLEMENTARY_TASKS = "SUPPLEMENTARY_TASKS"
    LOST_HOURS_SUDDEN_CAUSES = "LOST_HOURS_SUDDEN_CAUSES"
    LOST_HOURS_OFFICIAL_HOLIDAYS = "LOST_HOURS_OFFICIAL_HOLIDAYS"
    LOST_HOURS_WEATHER_CONDITIONS = "LOST_HOURS_WEATHER_CONDITIONS"
    EMERGENCY_CLOSURE_DAY = "EMERGENCY_CLOSURE_DAY"
    NON_WORKDAY_TASKS = "NON_WORKDAY_TASKS"


class ScheduleWorkType(str, Enum):
    """Kind of activity in a work schedule entry."""

    WORK_FROM_OFFICE = "WORK_FROM_OFFICE"
    WORK_FROM_HOME = "WORK_FROM_HOME"
    REST_DAY = "REST_DAY"
    ABSENT = "ABSENT"


class Weekday(IntEnum):
    """Day of the week as the API numbers it: Sunday is 0, Saturday is 6."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_date(cls, value: _dt.date) -> "Weekday":
        """Return the weekday on which the given date falls."""
        return cls((value.weekday() + 1) % 7)


_MOVEMENT_CODES = {
    WorkCardMovementType.ARRIVAL: "0",
    WorkCardMovementType.DEPARTURE: "1",
}

_LATE_JUSTIFICATION_CODES = {
    LateDeclarationJustificationType.POWER_OUTAGE: "001",
    LateDeclarationJustificationType.EMPLOYER_SYSTEMS_UNAVAILABLE: "002",
    LateDeclarationJustificationType.ERGANI_SYSTEMS_UNAVAILABLE: "003",
}

_OVERTIME_JUSTIFICATION_CODES = {
    OvertimeJustificationType.ACCIDENT_PREVENTION_OR_DAMAGE_RESTORATION: "001",
    OvertimeJustificationType.URGENT_SEASONAL_TASKS: "002",
    OvertimeJustificationType.EXCEPTIONAL_WORKLOAD: "003",
    OvertimeJustificationType.SUPPLEMENTARY_TASKS: "004",
    OvertimeJustificationType.LOST_HOURS_SUDDEN_CAUSES: "005",
    OvertimeJustificationType.LOST_HOURS_OFFICIAL_HOLIDAYS: "006",
    OvertimeJustificationType.LOST_HOURS_WEATHER_CONDITIONS: "007",
    OvertimeJustificationType.EMERGENCY_CLOSURE_DAY: "008",
    OvertimeJustificationType.NON_WORKDAY_TASKS: "009",
}

_SCHEDULE_WORK_TYPE_CODES = {
    ScheduleWorkType.WORK_FROM_OFFICE: "ΕΡΓ",
    ScheduleWorkType.WORK_FROM_HOME: "ΤΗΛ",
    ScheduleWorkType.REST_DAY: "ΑΝ",
    ScheduleWorkType.ABSENT: "ΜΕ",
}

_BOOL_CODES = {False: "0", True: "1"}

_E = TypeVar("_E", bound=Enum)


def _lookup(enum_cls: type[_E], codes: Mapping[_E, str], value: Union[_E, str]) -> str:
    try:
        member = enum_cls(value)
    except ValueError:
        raise ValueError(f"invalid {enum_cls.__name__}: {value}") from None
    return codes[member]


def map_work_card_movement_type(value: Union[WorkCardMovementType, str]) -> str:
    """Return the API code of a work card movement ("0" arrival, "1" departure)."""
    return _lookup(WorkCardMovementType, _MOVEMENT_CODES, value)


def map_late_declaration_justification(
    value: Union[LateDeclarationJustificationType, str],
) -> str:
    """Return the API code of a late declaration justification."""
    return _lookup(LateDeclarationJustificationType, _LATE_JUSTIFICATION_CODES, value)


def map_overtime_justification(value: Union[OvertimeJustificationType, str]) -> str:
    """Return the API code of an overtime justification."""
    return _lookup(OvertimeJustificationType, _OVERTIME_JUSTIFICATION_CODES, value)


def map_schedule_work_type(value: Union[ScheduleWorkType, str]) -> str:
    """Return the API code of a schedule work type."""
    return _lookup(ScheduleWorkType, _SCHEDULE_WORK_TYPE_CODES, value)


def format_time(value: Union[_dt.time, _dt.datetime]) -> str:
    """Format a time of day as HH:MM."""
    return f"{value.hour:02d}:{value.minute:02d}"


def format_date(value: _dt.date) -> str:
    """Format a date as DD/MM/YYYY."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def format_datetime(value: _dt.datetime) -> str:
    """Format a datetime as ISO 8601 with milliseconds trimmed of trailing zeros.

    Naive datetimes are taken to be in local time.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.astimezone()

    millis = f"{value.microsecond // 1000:03d}".rstrip("0")
    fraction = f".{millis}" if millis else ""

    offset = value.utcoffset() or _dt.timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60 if offset >= _dt.timedelta(0) else -(
        int(-offset.total_seconds()) // 60
    )
    if total_minutes == 0:
        zone = "Z"
    else:
        sign = "+" if total_minutes > 0 else "-"
        hours, minutes = divmod(abs(total_minutes), 60)
        zone = f"{sign}{hours:02d}:{minutes:02d}"

    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{fraction}{zone}"
    )


def format_bool(value: bool) -> str:
    """Format a flag as "1" for true and "0" for false."""
    flag = bool(value)
    return _BOOL_CODES[flag]