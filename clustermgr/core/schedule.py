"""Resolution of the date and time an upgrade should run."""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from ..errors import InvalidScheduleFormatError
from .interactive import Prompter

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
DEFAULT_DELAY = timedelta(minutes=10)

# Zero-padded fields only
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
TIME_RE = re.compile(r"\d{2}:\d{2}")


def default_next_run(now: Optional[datetime] = None) -> datetime:
    """Return the default run time, ten minutes from now in UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(timezone.utc) + DEFAULT_DELAY


def parse_date(value: str) -> datetime:
    try:
        if not DATE_RE.fullmatch(value):
            raise ValueError(value)
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise InvalidScheduleFormatError(f"Date format '{value}' invalid, expected yyyy-mm-dd")


def parse_time(value: str) -> datetime:
    try:
        if not TIME_RE.fullmatch(value):
            raise ValueError(value)
        return datetime.strptime(value, TIME_FORMAT)
    except ValueError:
        raise InvalidScheduleFormatError(f"Time format '{value}' invalid, expected HH:mm")


def parse_next_run(schedule_date: str, schedule_time: str) -> datetime:
    """Combine a date and a time into a UTC timestamp."""
    if not DATE_RE.fullmatch(schedule_date) or not TIME_RE.fullmatch(schedule_time):
        raise InvalidScheduleFormatError(
            f"Time format invalid: '{schedule_date} {schedule_time}' is not 'yyyy-mm-dd HH:mm'"
        )
    try:
        parsed = datetime.strptime(f"{schedule_date} {schedule_time}", f"{DATE_FORMAT} {TIME_FORMAT}")
    except ValueError as e:
        raise InvalidScheduleFormatError(f"Time format invalid: {e}")
    return parsed.replace(tzinfo=timezone.utc)


def resolve_schedule(
    schedule_date: Optional[str],
    schedule_time: Optional[str],
    prompter: Prompter,
    now: Optional[datetime] = None,
) -> datetime:
    """Resolve the next run from flags, defaults and, when enabled, prompts."""
    default = default_next_run(now)
    date_value, time_value = _fill_defaults(schedule_date, schedule_time, default)

    if prompter.enabled:
        # Partial or malformed flags fall back to the default in the form
        try:
            reconciled = parse_next_run(date_value, time_value)
        except InvalidScheduleFormatError:
            reconciled = default
        date_value = reconciled.strftime(DATE_FORMAT)
        time_value = reconciled.strftime(TIME_FORMAT)

        date_value = prompter.ask(
            "Please input desired date in format yyyy-mm-dd",
            default=date_value,
            required=True,
        )
        parse_date(date_value)

        time_value = prompter.ask(
            "Please input desired UTC time in format HH:mm",
            default=time_value,
            required=True,
        )
        parse_time(time_value)

    return parse_next_run(date_value, time_value)


def _fill_defaults(
    schedule_date: Optional[str], schedule_time: Optional[str], default: datetime
) -> Tuple[str, str]:
    date_value = schedule_date or default.strftime(DATE_FORMAT)
    time_value = schedule_time or default.strftime(TIME_FORMAT)
    return date_value, time_value
