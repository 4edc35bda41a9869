"""Command that submits a sample work card declaration to Ergani."""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import os
from typing import Optional, Sequence

from .client import DEFAULT_BASE_URL, Client
from .errors import APIError, ErganiError
from .models import CompanyWorkCard, WorkCard
from .types import LateDeclarationJustificationType, WorkCardMovementType, format_datetime

__all__ = ["main"]

log = logging.getLogger(__name__)


def _sample_work_cards(now: dt.datetime) -> list[CompanyWorkCard]:
    return [
        CompanyWorkCard(
            employer_tax_id="999999999",
            business_branch_number=1,
            comments="API submission from Python client.",
            card_details=[
                WorkCard(
                    employee_tax_id="123456789",
                    employee_last_name="Papadopoulos",
                    employee_first_name="Giorgos",
                    work_card_movement_type=WorkCardMovementType.ARRIVAL,
                    work_card_submission_date=now.date(),
                    work_card_movement_datetime=now,
                    late_declaration_justification=LateDeclarationJustificationType.POWER_OUTAGE,
                ),
                WorkCard(
                    employee_tax_id="987654321",
                    employee_last_name="Vassiliou",
                    employee_first_name="Maria",
                    work_card_movement_type=WorkCardMovementType.ARRIVAL,
                    work_card_submission_date=now.date(),
                    work_card_movement_datetime=now,
                ),
            ],
        )
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Submit sample work cards using credentials from the environment."""
    parser = argparse.ArgumentParser(
        prog="ergani", description="Submit a sample work card declaration to Ergani."
    )
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    username = os.environ.get("ERGANI_USERNAME", "")
    password = os.environ.get("ERGANI_PASSWORD", "")
    if not username or not password:
        log.error("ERGANI_USERNAME and ERGANI_PASSWORD environment variables must be set")
        return 1

    try:
        client = Client(username, password, args.base_url)
    except ValueError as exc:
        log.error("Failed to create Ergani client: %s", exc)
        return 1

    with client:
        log.info("Submitting work cards...")
        try:
            submissions = client.submit_work_card(_sample_work_cards(dt.datetime.now().astimezone()))
        except APIError as exc:
            log.error(
                "API Error occurred. Status: %d, Message: %s, Response: %s",
                exc.status_code,
                exc.message,
                exc.response,
            )
            return 1
        except (ErganiError, ValueError) as exc:
            log.error("Failed to submit work card: %s", exc)
            return 1

    if not submissions:
        log.info(
            "Submission was successful, but no submission response was returned "
            "(e.g., a 204 No Content response)."
        )
        return 0

    log.info("Successfully submitted work cards!")
    for submission in submissions:
        log.info(
            "-> Submission ID: %s, Protocol: %s, Date: %s",
            submission.id,
            submission.protocol,
            format_datetime(submission.submission_date),
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())