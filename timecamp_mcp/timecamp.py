"""Utility client for interacting with the TimeCamp API.

Every public coroutine on :class:`TimeCampAPI` returns an envelope instead of
raising::

    {"success": True, "data": ..., "message": "...", "duration": 43}
    {"success": False, "error": "..."}

``duration`` (whole minutes) is only present on writes that changed times.
The one exception is a missing token, which fails in the constructor.
"""
import logging
import math
import re
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

import httpx
from dateutil import parser

from .config import BASE_URL, SERVICE_NAME, TIMEOUT

logger = logging.getLogger(__name__)

# "2025-06-22 13:28" -> the API wants "2025-06-22 13:28:00"
MINUTE_PRECISION = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")
CLOCK_TIME = re.compile(r"([01]?[0-9]|2[0-3]):[0-5][0-9]")
LEADING_INT = re.compile(r"\s*([+-]?\d+)")

DROPPED_ENTRY_FIELDS = frozenset({
    "task_note", "locked", "addons_external_id", "color",
    "description", "hasEntryLocationHistory", "name", "duration",
})
TASK_FIELDS = ("task_id", "parent_id", "name", "level", "note")
LOOKBACK_DAYS = 30


class TimeCampError(Exception):
    """Base class for errors raised inside the TimeCamp client."""


class MissingTokenError(TimeCampError, ValueError):
    """No bearer token was available when the client was built."""


class TimeCampAPIError(TimeCampError):
    """TimeCamp answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"TimeCamp API request failed with status {status_code}: {body}")


class EntryNotFoundError(TimeCampError):
    pass


def parse_int(value) -> int:
    """Parse the leading integer of ``value`` the lenient way; 0 when there is none."""
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 0
    if value is None:
        return 0
    match = LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def parse_id(value, label: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"Invalid {label}: {value}") from None


def format_datetime_for_api(value: str) -> str:
    if MINUTE_PRECISION.fullmatch(value):
        return value + ":00"
    return value


def with_seconds(clock: str) -> str:
    return f"{clock}:00" if len(clock.split(":")) == 2 else clock


def minutes_of_day(clock: str) -> int:
    hours, minutes = clock.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def today():
    return datetime.now(timezone.utc).date()


def clean_entry(entry: dict) -> dict:
    """Drop noisy fields and expose ``name``/``description`` under friendlier keys."""
    clean = {key: value for key, value in entry.items() if key not in DROPPED_ENTRY_FIELDS}
    seconds = parse_int(entry.get("duration"))
    clean["task_name"] = entry.get("name") or ""
    clean["duration_seconds"] = seconds
    # half-up, 0.125 h -> 0.13
    clean["duration_hours"] = float((Decimal(seconds) / 3600).quantize(Decimal("0.01"), ROUND_HALF_UP))
    clean["note"] = entry.get("description") or ""
    return clean


def is_active_task(task: dict) -> bool:
    archived = task.get("archived")
    return archived is not None and parse_int(archived) == 0


class TimeCampAPI:
    """Thin async wrapper around the ``/entries`` and ``/tasks`` endpoints.

    One instance serves one inbound tool call; the token is never shared
    between calls.
    """

    def __init__(self, bearer_token: str, base_url: str = BASE_URL,
                 timeout: float = TIMEOUT, transport: httpx.AsyncBaseTransport | None = None):
        if not bearer_token:
            raise MissingTokenError(
                "No bearer token provided. Please set the TIMECAMP_TOKEN environment "
                "variable or provide Authorization header."
            )
        self.bearer_token = bearer_token
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict:
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.bearer_token}",
            "Content-Type": "application/json",
        }

    async def _request(self, method: str, path: str, **kwargs):
        logger.debug("TimeCamp %s %s", method, path)
        async with httpx.AsyncClient(base_url=self.base_url, headers=self._headers(),
                                     timeout=self.timeout, transport=self._transport) as client:
            r = await client.request(method, path, **kwargs)
        if not r.is_success:
            raise TimeCampAPIError(r.status_code, r.text)
        return r.json()

    @staticmethod
    def _failure(action: str, exc: Exception) -> dict:
        logger.warning("%s failed: %s", action, exc)
        return {"success": False, "error": str(exc)}

    async def create_entry(self, start: str, end: str, note: str, task_id: str | None = None) -> dict:
        try:
            start_time = format_datetime_for_api(start)
            end_time = format_datetime_for_api(end)
            duration = math.floor((parser.parse(end_time) - parser.parse(start_time)).total_seconds())
            if duration <= 0:
                raise ValueError("End time must be after start time")

            body = {
                "get_entries": 0,
                "date": start.split(" ")[0],
                "start_time": start_time,
                "end_time": end_time,
                "duration": duration,
                "note": note,
                "service": SERVICE_NAME,
            }
            if task_id:
                body["task_id"] = task_id

            result = await self._request("POST", "/entries", json=body)
        except Exception as e:
            return self._failure("Creating time entry", e)

        minutes = duration // 60
        return {
            "success": True,
            "duration": minutes,
            "data": result,
            "message": f"Successfully created time entry from {start} to {end} ({minutes} minutes).",
        }

    async def list_entries(self, from_date: str, to_date: str, user_ids: str = "me",
                           fields: str = "tags") -> dict:
        try:
            params = {
                "from": from_date,
                "to": to_date,
                "user_ids": user_ids,
                "opt_fields": fields,
            }
            result = await self._request("GET", "/entries", params=params)
            if isinstance(result, list):
                result = [clean_entry(entry) for entry in result]
        except Exception as e:
            return self._failure("Fetching time entries", e)

        return {
            "success": True,
            "data": result,
            "message": f"Time entries from {from_date} to {to_date}",
        }

    async def list_tasks(self) -> dict:
        try:
            result = await self._request("GET", "/tasks", params={"ignoreAdminRights": "1"})
            # keyed by task id on the wire; keep the remote order
            records = result.values() if isinstance(result, dict) else result
            tasks = [
                {field: task.get(field) for field in TASK_FIELDS}
                for task in records
                if is_active_task(task)
            ]
        except Exception as e:
            return self._failure("Fetching tasks", e)

        return {
            "success": True,
            "data": tasks,
            "message": "Successfully fetched TimeCamp projects and tasks (non-archived only)",
        }

    async def get_entry_by_id(self, entry_id: str, date: str | None = None) -> dict:
        """Find one entry by id, on ``date`` or within the last 30 days."""
        try:
            wanted = parse_id(entry_id, "time entry ID")
            if date:
                from_date = to_date = date
            else:
                end = today()
                from_date = (end - timedelta(days=LOOKBACK_DAYS)).isoformat()
                to_date = end.isoformat()

            entries = await self.list_entries(from_date, to_date, "me", "tags")
            if not entries["success"]:
                raise TimeCampError(f"Could not fetch time entries: {entries['error']}")

            data = entries["data"] if isinstance(entries["data"], list) else []
            entry = next((e for e in data if parse_int(e.get("id")) == wanted), None)
            if entry is None:
                raise EntryNotFoundError(
                    f"Time entry with ID {entry_id} not found in the specified date range"
                )
        except Exception as e:
            return self._failure("Looking up time entry", e)

        return {
            "success": True,
            "data": entry,
            "message": f"Successfully found time entry with ID {entry_id}",
        }

    async def delete_entry(self, entry_id: str) -> dict:
        try:
            result = await self._request(
                "DELETE", "/entries",
                data={"id": entry_id, "service": SERVICE_NAME},
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except Exception as e:
            return self._failure("Deleting time entry", e)

        return {
            "success": True,
            "data": result,
            "message": f"Successfully deleted time entry with ID: {entry_id}",
        }

    async def update_entry(self, entry_id: str, start: str | None = None, end: str | None = None,
                           note: str | None = None, task_id: str | None = None) -> dict:
        """Partially update an entry.

        ``None`` means "leave unchanged" and the field is not sent at all.
        Times are ``HH:MM`` on the entry's own day; when only one side is
        given the other is read from the existing entry first.
        """
        try:
            body = {"id": parse_id(entry_id, "time entry ID"), "service": SERVICE_NAME}
            duration = 0
            time_updated = False
            final_start, final_end = start, end

            if start or end:
                if start and not CLOCK_TIME.fullmatch(start):
                    raise ValueError("Start time format must be HH:MM (e.g., 15:28)")
                if end and not CLOCK_TIME.fullmatch(end):
                    raise ValueError("End time format must be HH:MM (e.g., 15:28)")

                if not (start and end):
                    existing = await self.get_entry_by_id(entry_id)
                    if not existing["success"]:
                        raise TimeCampError(f"Could not fetch existing time entry: {existing['error']}")
                    entry = existing["data"]
                    # stored as HH:MM:SS
                    final_start = start or (entry.get("start_time") or "")[:5]
                    final_end = end or (entry.get("end_time") or "")[:5]
                    if not final_start or not final_end:
                        raise TimeCampError(
                            "Could not determine existing start or end time from the current entry"
                        )

                # same-day arithmetic, entries crossing midnight are rejected
                duration = (minutes_of_day(final_end) - minutes_of_day(final_start)) * 60
                if duration <= 0:
                    raise ValueError("End time must be after start time")

                body["start_time"] = with_seconds(final_start)
                body["end_time"] = with_seconds(final_end)
                body["duration"] = duration
                time_updated = True

            if note is not None:
                body["note"] = note
            if task_id:
                body["task_id"] = parse_id(task_id, "task ID")

            result = await self._request("PUT", "/entries", json=body)
        except Exception as e:
            return self._failure("Updating time entry", e)

        message = f"Successfully updated time entry ID {entry_id}"
        if time_updated:
            message += f" with time from {final_start} to {final_end} ({duration // 60} minutes)"
        message += "."

        envelope = {"success": True, "data": result, "message": message}
        if time_updated:
            envelope["duration"] = duration // 60
        return envelope
