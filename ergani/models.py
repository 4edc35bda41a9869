"""Document models submitted to the Ergani API and the responses it returns."""

from __future__ import annotations

import datetime as _dt
import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from .types import (
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

__all__ = [
    "WorkCard",
    "CompanyWorkCard",
    "Overtime",
    "CompanyOvertime",
    "WorkdayDetails",
    "EmployeeDailySchedule",
    "CompanyDailySchedule",
    "EmployeeWeeklySchedule",
    "CompanyWeeklySchedule",
    "SubmissionResponse",
    "parse_submission_response",
    "parse_submission_responses",
]

_ZERO_DATE = _dt.date.min
_ZERO_TIME = _dt.time(0, 0)
_ZERO_DATETIME = _dt.datetime.min.replace(tzinfo=_dt.timezone.utc)
_SUBMIT_DATE_FORMAT = "%d/%m/%Y %H:%M"

Payload = dict[str, Any]


def _set_if(payload: Payload, key: str, value: Any) -> None:
    """Add a key only when its value is non-empty (JSON omitempty)."""
    if value:
        payload[key] = value


def _encode(kind: str, mapper, value) -> str:
    try:
        return mapper(value)
    except ValueError as exc:
        raise ValueError(f"failed to marshal {kind}: {exc}") from exc


@dataclass(kw_only=True)
class WorkCard:
    """A single arrival or departure event of an employee."""

    work_card_movement_type: Union[WorkCardMovementType, str]
    employee_tax_id: str = ""
    employee_last_name: str = ""
    employee_first_name: str = ""
    work_card_submission_date: _dt.date = _ZERO_DATE
    work_card_movement_datetime: _dt.datetime = _ZERO_DATETIME
    late_declaration_justification: Optional[Union[LateDeclarationJustificationType, str]] = None

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        payload: Payload = {
            "f_type": _encode("WorkCard", map_work_card_movement_type, self.work_card_movement_type),
            "f_afm": self.employee_tax_id,
            "f_eponymo": self.employee_last_name,
            "f_onoma": self.employee_first_name,
            "f_reference_date": format_date(self.work_card_submission_date),
            "f_date": format_datetime(self.work_card_movement_datetime),
        }
        if self.late_declaration_justification is not None:
            payload["f_aitiologia"] = _encode(
                "WorkCard",
                map_late_declaration_justification,
                self.late_declaration_justification,
            )
        return payload


@dataclass(kw_only=True)
class CompanyWorkCard:
    """Work card entries of a single business branch."""

    employer_tax_id: str = ""
    business_branch_number: int = 0
    comments: str = ""
    card_details: list[WorkCard] = field(default_factory=list)

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        payload: Payload = {
            "f_afm_ergodoti": self.employer_tax_id,
            "f_aa": self.business_branch_number,
        }
        _set_if(payload, "f_comments", self.comments)
        payload["Details>CardDetails"] = [card.to_payload() for card in self.card_details]
        return payload


@dataclass(kw_only=True)
class Overtime:
    """An overtime entry of an employee on a given date."""

    overtime_justification: Union[OvertimeJustificationType, str]
    employee_tax_id: str = ""
    employee_ssn: str = ""
    employee_last_name: str = ""
    employee_first_name: str = ""
    overtime_date: _dt.date = _ZERO_DATE
    overtime_start_time: Union[_dt.time, _dt.datetime] = _ZERO_TIME
    overtime_end_time: Union[_dt.time, _dt.datetime] = _ZERO_TIME
    overtime_cancellation: bool = False
    employee_profession_code: str = ""
    weekly_workdays_number: int = 0
    asee_approval: str = ""

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        payload: Payload = {
            "f_reason": _encode("Overtime", map_overtime_justification, self.overtime_justification),
            "f_afm": self.employee_tax_id,
            "f_amka": self.employee_ssn,
            "f_eponymo": self.employee_last_name,
            "f_onoma": self.employee_first_name,
            "f_date": format_date(self.overtime_date),
            "f_from": format_time(self.overtime_start_time),
            "f_to": format_time(self.overtime_end_time),
            "f_cancellation": format_bool(self.overtime_cancellation),
            "f_step": self.employee_profession_code,
            "f_weekdates": self.weekly_workdays_number,
        }
        _set_if(payload, "f_asee", self.asee_approval)
        return payload


@dataclass(kw_only=True)
class CompanyOvertime:
    """Overtime entries of a single business branch."""

    business_branch_number: int = 0
    sepe_service_code: str = ""
    primary_activity_code: str = ""
    branch_activity_code: str = ""
    kallikratis_code: str = ""
    legal_rep_tax_id: str = ""
    employee_overtimes: list[Overtime] = field(default_factory=list)
    related_protocol_id: str = ""
    related_protocol_date: Optional[_dt.date] = None
    employer_organization: str = ""
    secondary_activity_code_1: str = ""
    secondary_activity_code_2: str = ""
    secondary_activity_code_3: str = ""
    secondary_activity_code_4: str = ""
    comments: str = ""

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        payload: Payload = {
            "f_aa_pararthmatos": self.business_branch_number,
            "f_ypiresia_sepe": self.sepe_service_code,
            "f_kad_kyria": self.primary_activity_code,
            "f_kad_pararthmatos": self.branch_activity_code,
            "f_kallikratis_pararthmatos": self.kallikratis_code,
            "f_afm_proswpoy": self.legal_rep_tax_id,
            "Ergazomenoi>OvertimeErgazomenosDate": [
                overtime.to_payload() for overtime in self.employee_overtimes
            ],
        }
        _set_if(payload, "f_rel_protocol", self.related_protocol_id)
        if self.related_protocol_date is not None:
            payload["f_rel_date"] = format_date(self.related_protocol_date)
        _set_if(payload, "f_ergodotikh_organwsh", self.employer_organization)
        _set_if(payload, "f_kad_deyt_1", self.secondary_activity_code_1)
        _set_if(payload, "f_kad_deyt_2", self.secondary_activity_code_2)
        _set_if(payload, "f_kad_deyt_3", self.secondary_activity_code_3)
        _set_if(payload, "f_kad_deyt_4", self.secondary_activity_code_4)
        _set_if(payload, "f_comments", self.comments)
        return payload


@dataclass(kw_only=True)
class WorkdayDetails:
    """Working hours and work type for one part of a day."""

    work_type: Union[ScheduleWorkType, str]
    start_time: Union[_dt.time, _dt.datetime] = _ZERO_TIME
    end_time: Union[_dt.time, _dt.datetime] = _ZERO_TIME

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        return {
            "f_type": _encode("WorkdayDetails", map_schedule_work_type, self.work_type),
            "f_from": format_time(self.start_time),
            "f_to": format_time(self.end_time),
        }


@dataclass(kw_only=True)
class EmployeeDailySchedule:
    """The work schedule of an employee for one day."""

    employee_tax_id: str = ""
    employee_last_name: str = ""
    employee_first_name: str = ""
    schedule_date: _dt.date = _ZERO_DATE
    workday_details: list[WorkdayDetails] = field(default_factory=list)

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        return {
            "f_afm": self.employee_tax_id,
            "f_eponymo": self.employee_last_name,
            "f_onoma": self.employee_first_name,
            "f_date": format_date(self.schedule_date),
            "ErgazomenosAnalytics>ErgazomenosWTOAnalytics": [
                details.to_payload() for details in self.workday_details
            ],
        }


@dataclass(kw_only=True)
class CompanyDailySchedule:
    """Daily employee schedules of a business branch."""

    business_branch_number: int = 0
    start_date: Optional[_dt.date] = None
    end_date: Optional[_dt.date] = None
    employee_schedules: list[EmployeeDailySchedule] = field(default_factory=list)
    related_protocol_id: str = ""
    related_protocol_date: Optional[_dt.date] = None
    comments: str = ""

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        payload: Payload = {"f_aa_pararthmatos": self.business_branch_number}
        if self.start_date is not None:
            payload["f_from_date"] = format_date(self.start_date)
        if self.end_date is not None:
            payload["f_to_date"] = format_date(self.end_date)
        payload["Ergazomenoi>ErgazomenoiWTO"] = [
            schedule.to_payload() for schedule in self.employee_schedules
        ]
        _set_if(payload, "f_rel_protocol", self.related_protocol_id)
        if self.related_protocol_date is not None:
            payload["f_rel_date"] = format_date(self.related_protocol_date)
        _set_if(payload, "f_comments", self.comments)
        return payload


@dataclass(kw_only=True)
class EmployeeWeeklySchedule:
    """A weekly schedule entry of an employee for one weekday."""

    employee_tax_id: str = ""
    employee_last_name: str = ""
    employee_first_name: str = ""
    schedule_day: Union[Weekday, int] = Weekday.SUNDAY
    workday_details: list[WorkdayDetails] = field(default_factory=list)

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        return {
            "f_afm": self.employee_tax_id,
            "f_eponymo": self.employee_last_name,
            "f_onoma": self.employee_first_name,
            "f_day": int(Weekday(self.schedule_day)),
            "ErgazomenosAnalytics>ErgazomenosWTOAnalytics": [
                details.to_payload() for details in self.workday_details
            ],
        }


@dataclass(kw_only=True)
class CompanyWeeklySchedule:
    """Weekly employee schedules of a business branch over a date range."""

    business_branch_number: int = 0
    start_date: _dt.date = _ZERO_DATE
    end_date: _dt.date = _ZERO_DATE
    employee_schedules: list[EmployeeWeeklySchedule] = field(default_factory=list)
    related_protocol_id: str = ""
    related_protocol_date: Optional[_dt.date] = None
    comments: str = ""

    def to_payload(self) -> Payload:
        """Return the JSON-ready mapping the API expects."""
        payload: Payload = {
            "f_aa_pararthmatos": self.business_branch_number,
            "f_from_date": format_date(self.start_date),
            "f_to_date": format_date(self.end_date),
            "Ergazomenoi>ErgazomenoiWTO": [
                schedule.to_payload() for schedule in self.employee_schedules
            ],
        }
        _set_if(payload, "f_rel_protocol", self.related_protocol_id)
        if self.related_protocol_date is not None:
            payload["f_rel_date"] = format_date(self.related_protocol_date)
        _set_if(payload, "f_comments", self.comments)
        return payload


@dataclass(frozen=True)
class SubmissionResponse:
    """What the API returns for one accepted submission."""

    id: str
    protocol: str
    submission_date: _dt.datetime


def _decode(data: Any) -> Any:
    if isinstance(data, (bytes, bytearray, str)):
        return json.loads(data)
    return data


def _string_field(document: Mapping[str, Any], name: str) -> str:
    value = document.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} must be a string, got {type(value).__name__}")
    return value


def parse_submission_response(data: Union[Mapping[str, Any], str, bytes]) -> SubmissionResponse:
    """Build a SubmissionResponse from a decoded or raw JSON object."""
    document = _decode(data)
    if not isinstance(document, Mapping):
        raise ValueError("submission response must be a JSON object")
    submit_date = _string_field(document, "submitDate")
    try:
        parsed = _dt.datetime.strptime(submit_date, _SUBMIT_DATE_FORMAT)
    except ValueError as exc:
        raise ValueError(f"invalid submitDate {submit_date!r}: {exc}") from exc
    return SubmissionResponse(
        id=_string_field(document, "id"),
        protocol=_string_field(document, "protocol"),
        submission_date=parsed.replace(tzinfo=_dt.timezone.utc),
    )


def parse_submission_responses(
    data: Union[Iterable[Mapping[str, Any]], str, bytes, None],
) -> list[SubmissionResponse]:
    """Build the list of SubmissionResponse from a decoded or raw JSON array."""
    documents = _decode(data)
    if documents is None:
        return []
    if isinstance(documents, Mapping) or not isinstance(documents, Iterable):
        raise ValueError("failed to decode submission response: expected a JSON array")
    return [parse_submission_response(document) for document in documents]