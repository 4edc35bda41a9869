"""HTTP client for submitting labour declarations to the Ergani API."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence
from urllib.parse import urlsplit

import requests

from .errors import AuthenticationError, ErganiError, api_error_from_response
from .models import (
    CompanyDailySchedule,
    CompanyOvertime,
    CompanyWeeklySchedule,
    CompanyWorkCard,
    SubmissionResponse,
    parse_submission_responses,
)

__all__ = ["Client", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "USER_TYPE_EMPLOYER"]

DEFAULT_BASE_URL = "https://trialeservices.yeka.gr/WebServicesAPI/api"
DEFAULT_TIMEOUT = 30.0
USER_TYPE_EMPLOYER = "01"

_NO_CONTENT = 204


def _access_token(document: Any) -> str:
    """Extract the access token from a decoded authentication response."""
    if document is None:
        return ""
    if not isinstance(document, dict):
        raise ValueError("expected a JSON object")
    value = document.get("accessToken")
    if value is None:
        value = next(
            (v for k, v in document.items() if isinstance(k, str) and k.lower() == "accesstoken"),
            None,
        )
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError("accessToken must be a string")
    return value


class Client:
    """A client for the Ergani API.

    Authentication happens lazily, on the first submission; the access token
    is then reused for every later request.
    """

    def __init__(
        self,
        username: str,
        password: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        url = base_url or DEFAULT_BASE_URL
        try:
            urlsplit(url)
        except ValueError as exc:
            raise ValueError(f"failed to parse base URL: {exc}") from exc
        self._base_url = url
        self._username = username
        self._password = password
        self._timeout = timeout or DEFAULT_TIMEOUT
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._token = ""

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def _url(self, path: str) -> str:
        return f"{self._base_url.rstrip('/')}/{path.lstrip('/')}"

    def _authenticate(self) -> None:
        payload = {
            "Username": self._username,
            "Password": self._password,
            "UserType": USER_TYPE_EMPLOYER,
        }
        try:
            response = self._session.post(
                self._url("/Authentication"), json=payload, timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise ErganiError(f"authentication request failed: {exc}") from exc

        with response:
            if response.status_code != 200:
                raise api_error_from_response(response.status_code, response.content)
            try:
                token = _access_token(response.json())
            except ValueError as exc:
                raise ErganiError(f"failed to decode auth response: {exc}") from exc

        if not token:
            raise AuthenticationError("authentication successful but no token was returned")
        self._token = token

    def _request(self, method: str, path: str, payload: Any = None) -> requests.Response:
        if not self._token:
            self._authenticate()
        try:
            response = self._session.request(
                method,
                self._url(path),
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self._token}",
                },
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise ErganiError(f"request to {path} failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            with response:
                raise api_error_from_response(response.status_code, response.content)
        return response

    def _submit(
        self, path: str, outer: str, inner: str, documents: Iterable[Any]
    ) -> list[SubmissionResponse]:
        payload = {outer: {inner: [document.to_payload() for document in documents]}}
        with self._request("POST", path, payload) as response:
            if response.status_code == _NO_CONTENT:
                return []
            try:
                return parse_submission_responses(response.content)
            except ValueError as exc:
                raise ErganiError(f"failed to decode submission response: {exc}") from exc

    def submit_work_card(
        self, company_work_cards: Sequence[CompanyWorkCard]
    ) -> list[SubmissionResponse]:
        """Submit work card records (check-in/check-out) per business branch."""
        return self._submit("/Documents/WRKCardSE", "Cards", "Card", company_work_cards)

    def submit_overtime(
        self, company_overtimes: Sequence[CompanyOvertime]
    ) -> list[SubmissionResponse]:
        """Submit overtime records per business branch."""
        return self._submit("/Documents/OvTime", "Overtimes", "Overtime", company_overtimes)

    def submit_daily_schedule(
        self, company_daily_schedules: Sequence[CompanyDailySchedule]
    ) -> list[SubmissionResponse]:
        """Submit daily work schedules per business branch."""
        return self._submit("/Documents/WTODaily", "WTOS", "WTO", company_daily_schedules)

    def submit_weekly_schedule(
        self, company_weekly_schedules: Sequence[CompanyWeeklySchedule]
    ) -> list[SubmissionResponse]:
        """Submit weekly work schedules per business branch."""
        return self._submit("/Documents/WTOWeek", "WTOS", "WTO", company_weekly_schedules)