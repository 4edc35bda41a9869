import datetime as dt

import pytest

from ergani.types import (
    LateDeclarationJustificationType,
    OvertimeJustificationType,
    ScheduleWorkType,
    Weekday,
    WorkCardMovementType,
    format_bool,
    format_date,
    format_datetime,
    format_time,
    map_late_declaration_justification,
    map_overtime_justification,
    map_schedule_work_type,
    map_work_card_movement_type,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (WorkCardMovementType.ARRIVAL, "0"),
        (WorkCardMovementType.DEPARTURE, "1"),
    ],
)
def test_map_work_card_movement_type(value, expected):
    assert map_work_card_movement_type(value) == expected


def test_map_work_card_movement_type_accepts_plain_value():
    assert map_work_card_movement_type("DEPARTURE") == "1"


def test_map_work_card_movement_type_invalid():
    with pytest.raises(ValueError, match="invalid WorkCardMovementType"):
        map_work_card_movement_type("INVALID")


@pytest.mark.parametrize(
    "value, expected",
    [
        (LateDeclarationJustificationType.POWER_OUTAGE, "001"),
        (LateDeclarationJustificationType.EMPLOYER_SYSTEMS_UNAVAILABLE, "002"),
        (LateDeclarationJustificationType.ERGANI_SYSTEMS_UNAVAILABLE, "003"),
    ],
)
def test_map_late_declaration_justification(value, expected):
    assert map_late_declaration_justification(value) == expected


def test_map_late_declaration_justification_invalid():
    with pytest.raises(ValueError, match="invalid LateDeclarationJustificationType"):
        map_late_declaration_justification("INVALID")


@pytest.mark.parametrize(
    "value, expected",
    [
        (OvertimeJustificationType.ACCIDENT_PREVENTION_OR_DAMAGE_RESTORATION, "001"),
        (OvertimeJustificationType.URGENT_SEASONAL_TASKS, "002"),
        (OvertimeJustificationType.EXCEPTIONAL_WORKLOAD, "003"),
        (OvertimeJustificationType.SUPPLEMENTARY_TASKS, "004"),
        (OvertimeJustificationType.LOST_HOURS_SUDDEN_CAUSES, "005"),
        (OvertimeJustificationType.LOST_HOURS_OFFICIAL_HOLIDAYS, "006"),
        (OvertimeJustificationType.LOST_HOURS_WEATHER_CONDITIONS, "007"),
        (OvertimeJustificationType.EMERGENCY_CLOSURE_DAY, "008"),
        (OvertimeJustificationType.NON_WORKDAY_TASKS, "009"),
    ],
)
def test_map_overtime_justification(value, expected):
    assert map_overtime_justification(value) == expected


def test_map_overtime_justification_invalid():
    with pytest.raises(ValueError, match="invalid OvertimeJustificationType"):
        map_overtime_justification("INVALID")


@pytest.mark.parametrize(
    "value, expected",
    [
        (ScheduleWorkType.WORK_FROM_OFFICE, "ΕΡΓ"),
        (ScheduleWorkType.WORK_FROM_HOME, "ΤΗΛ"),
        (ScheduleWorkType.REST_DAY, "ΑΝ"),
        (ScheduleWorkType.ABSENT, "ΜΕ"),
    ],
)
def test_map_schedule_work_type(value, expected):
    assert map_schedule_work_type(value) == expected


def test_map_schedule_work_type_invalid():
    with pytest.raises(ValueError, match="invalid ScheduleWorkType"):
        map_schedule_work_type("INVALID")


def test_mapping_rejects_member_of_other_enum():
    with pytest.raises(ValueError):
        map_schedule_work_type(WorkCardMovementType.ARRIVAL)


def test_format_time():
    assert format_time(dt.time(14, 30)) == "14:30"


def test_format_time_from_datetime():
    assert format_time(dt.datetime(2025, 7, 10, 14, 30, 59)) == "14:30"


def test_format_date():
    assert format_date(dt.date(2025, 7, 10)) == "10/07/2025"


def test_format_date_from_datetime():
    value = dt.datetime(2025, 7, 10, 0, 0, tzinfo=dt.timezone.utc)
    assert format_date(value) == "10/07/2025"


def test_format_bool():
    assert format_bool(True) == "1"
    assert format_bool(False) == "0"


def test_format_datetime_utc_whole_seconds():
    value = dt.datetime(2025, 7, 10, 14, 56, tzinfo=dt.timezone.utc)
    assert format_datetime(value) == "2025-07-10T14:56:00Z"


def test_format_datetime_trims_trailing_zeros_of_milliseconds():
    value = dt.datetime(2025, 7, 10, 9, 0, 0, 500000, tzinfo=dt.timezone.utc)
    assert format_datetime(value) == "2025-07-10T09:00:00.5Z"


def test_format_datetime_truncates_to_milliseconds():
    value = dt.datetime(2025, 7, 10, 9, 0, 0, 123999, tzinfo=dt.timezone.utc)
    assert format_datetime(value) == "2025-07-10T09:00:00.123Z"


def test_format_datetime_with_offset():
    tz = dt.timezone(dt.timedelta(hours=3))
    value = dt.datetime(2025, 7, 10, 9, 0, tzinfo=tz)
    assert format_datetime(value) == "2025-07-10T09:00:00+03:00"


def test_format_datetime_with_negative_offset():
    tz = dt.timezone(-dt.timedelta(hours=5, minutes=30))
    value = dt.datetime(2025, 7, 10, 9, 0, tzinfo=tz)
    assert format_datetime(value) == "2025-07-10T09:00:00-05:30"


def test_format_datetime_naive_uses_local_time():
    naive = dt.datetime(2025, 7, 10, 9, 15)
    result = format_datetime(naive)
    assert result.startswith("2025-07-10T09:15:00")
    assert result == format_datetime(naive.astimezone())


def test_weekday_from_date_sunday_is_zero():
    assert Weekday.from_date(dt.date(2025, 7, 13)) == 0


def test_weekday_from_date_covers_week():
    start = dt.date(2025, 7, 13)
    days = [Weekday.from_date(start + dt.timedelta(days=n)) for n in range(7)]
    assert [int(d) for d in days] == list(range(7))
    assert days[-1] is Weekday.SATURDAY