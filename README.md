# ergani

A small Python client for the Ergani API, the Greek labour-declaration
service. It submits:

- work cards (employee arrivals and departures),
- overtime declarations,
- daily work schedules,
- weekly work schedules.

The client authenticates lazily: the first submission logs in with your
employer credentials, and the access token is reused for later requests.

## Installation

```
pip install ergani
```

## Quick start

```python
import os
from datetime import date, datetime

from ergani.client import Client
from ergani.errors import APIError
from ergani.models import CompanyWorkCard, WorkCard
from ergani.types import LateDeclarationJustificationType, WorkCardMovementType

with Client(os.environ["ERGANI_USERNAME"], os.environ["ERGANI_PASSWORD"]) as client:
    cards = [
        CompanyWorkCard(
            employer_tax_id="999999999",
            business_branch_number=1,
            comments="Submitted from Python.",
            card_details=[
                WorkCard(
                    employee_tax_id="111111111",
                    employee_last_name="Papadopoulos",
                    employee_first_name="Giorgos",
                    work_card_movement_type=WorkCardMovementType.ARRIVAL,
                    work_card_submission_date=date.today(),
                    work_card_movement_datetime=datetime.now(),
                    late_declaration_justification=LateDeclarationJustificationType.POWER_OUTAGE,
                ),
            ],
        ),
    ]

    try:
        results = client.submit_work_card(cards)
    except APIError as exc:
        print(exc.status_code, exc.message)
        raise

    for result in results:
        print(result.id, result.protocol, result.submission_date.isoformat())
```

A submission returns a list of `SubmissionResponse` objects (`id`,
`protocol`, `submission_date`). When the service answers `204 No Content`
the list is empty.

## Other submissions

- `Client.submit_overtime(...)` takes a list of `CompanyOvertime`, each
  holding `Overtime` entries.
- `Client.submit_daily_schedule(...)` takes a list of
  `CompanyDailySchedule`, each holding `EmployeeDailySchedule` entries
  with `WorkdayDetails`.
- `Client.submit_weekly_schedule(...)` takes a list of
  `CompanyWeeklySchedule`, each holding `EmployeeWeeklySchedule` entries
  with `WorkdayDetails`.

Every model has a `to_payload()` method that returns the JSON-ready
mapping sent to the service. The enumerations in `ergani.types`
(`WorkCardMovementType`, `LateDeclarationJustificationType`,
`OvertimeJustificationType`, `ScheduleWorkType`, `Weekday`) are converted
to the codes the service expects; an unknown value raises `ValueError`.
Dates, times, datetimes and flags are formatted by `format_date`
(`DD/MM/YYYY`), `format_time` (`HH:MM`), `format_datetime` (ISO 8601) and
`format_bool` (`"0"`/`"1"`). `Weekday.from_date(...)` gives the weekday a
date falls on, with Sunday as 0.

`parse_submission_responses(...)` in `ergani.models` turns a raw or
decoded JSON array from the service into `SubmissionResponse` objects.

## Configuration

`Client` targets the Ergani trial environment by default. Pass `base_url`
to point it elsewhere, `timeout` to change the request timeout (30 seconds
by default), or `session` to supply your own `requests.Session`. A client
used as a context manager, or closed with `close()`, closes the session
only if it created it.

## Errors

All errors derive from `ergani.errors.ErganiError`:

- `APIError` is raised for any unsuccessful HTTP status. It carries
  `status_code`, `message` (taken from the `message`, `msg` or `detail`
  field of a JSON body, or the raw body otherwise) and `response`, the raw
  body.
- `AuthenticationError` is raised when the login succeeds but no access
  token is returned.
- A plain `ErganiError` is raised when a request cannot be sent or a
  response cannot be decoded.

## Command line

The `ergani` command submits a sample arrival work card for two employees
and logs the submission IDs, protocol numbers and dates. It reads the
credentials from the `ERGANI_USERNAME` and `ERGANI_PASSWORD` environment
variables and exits with status 1 if either is missing or the submission
fails. `--base-url` selects another API address.

```
ergani
```

The command only sends this fixed sample; it does not read declarations
from files or arguments.

## Running the tests

```
pip install -e ".[test]"
pytest
```