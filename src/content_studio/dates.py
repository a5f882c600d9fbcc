"""Locale-aware display dates for feed items."""

from datetime import datetime, timezone

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_time, get_timezone

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEZONE = "Asia/Jakarta"


def _from_millis(timestamp_ms: int | float) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def format_display_date(timestamp_ms: int | float, locale: str, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """
    Render a millisecond timestamp in the given locale and reference time zone.

    The rendering contains the weekday, the full date, the time as hour and
    minute and the short zone name, e.g. ``Tuesday, December 2, 2025 07:00 GMT+7``.
    Any formatting failure degrades to the ISO calendar date in UTC.

    Args:
        timestamp_ms: Milliseconds since the epoch
        locale: BCP 47 tag such as ``id-ID`` or ``en-US``
        tz_name: IANA time zone used for display

    Returns:
        Formatted date string
    """
    try:
        babel_locale = Locale.parse(locale, sep="-")
        tzinfo = get_timezone(tz_name)
        moment = _from_millis(timestamp_ms).astimezone(tzinfo)
        date_part = format_date(moment, format="full", locale=babel_locale)
        time_part = format_time(moment, format="HH:mm z", tzinfo=tzinfo, locale=babel_locale)
        return f"{date_part} {time_part}"
    except (UnknownLocaleError, LookupError, ValueError, TypeError, OverflowError, OSError) as e:
        logger.error(
            "Date formatting failed", extra={"timestamp": timestamp_ms, "locale": locale, "error": str(e)}
        )
        return fallback_date(timestamp_ms)


def fallback_date(timestamp_ms: int | float) -> str:
    try:
        return _from_millis(timestamp_ms).date().isoformat()
    except (ValueError, TypeError, OverflowError, OSError):
        return ""
