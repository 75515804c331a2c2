"""
Date calculation and manipulation service.
Handles the UTC clock, transaction timestamps and calendar-day keys.
"""
from datetime import datetime, timedelta, timezone, date
from typing import Optional

from dodocoin.constants import WEEK_DAYS


class DateService:
    """Service for date-related operations"""

    @staticmethod
    def now() -> datetime:
        """Current time, timezone-aware UTC"""
        return datetime.now(timezone.utc)

    @staticmethod
    def today(now: Optional[datetime] = None) -> date:
        """
        Get the current calendar day.

        Days are UTC days, so the bonus gates flip at midnight UTC and
        match the date portion of stored timestamps.

        Args:
            now: Reference time (defaults to the current time)

        Returns:
            UTC calendar date
        """
        now = DateService.as_utc(now or DateService.now())
        return now.date()

    @staticmethod
    def as_utc(dt: datetime) -> datetime:
        """Treat naive datetimes as UTC and convert aware ones to UTC"""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def to_timestamp(dt: Optional[datetime] = None) -> str:
        """
        Format a datetime as a transaction timestamp.

        Example: 2026-01-30T10:00:00.000Z

        Args:
            dt: Datetime to format (defaults to now)

        Returns:
            ISO-8601 UTC string with millisecond precision
        """
        dt = DateService.as_utc(dt or DateService.now())
        return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def parse_timestamp(value: str) -> datetime:
        """
        Parse a transaction timestamp into an aware UTC datetime.

        Raises:
            ValueError: If the string is not ISO-8601
        """
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return DateService.as_utc(datetime.fromisoformat(value))

    @staticmethod
    def date_key(timestamp: str) -> str:
        """Calendar-day bucket of a timestamp (its first 10 characters)"""
        return timestamp[:10]

    @staticmethod
    def week_start(now: datetime) -> datetime:
        """Start of the weekly summary window ending at now"""
        return DateService.as_utc(now) - timedelta(days=WEEK_DAYS)
