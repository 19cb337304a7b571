"""Format constraint checks for events, styles and whole subtitles."""

import logging
import re
import string

from .exceptions import ValidationError
from .models import Event, Style, Subtitle

logger = logging.getLogger(__name__)

# H:MM:SS:CS, single hour digit
TIME_PATTERN = re.compile(r"[0-9]:[0-6][0-9]:[0-6][0-9]:[0-9][0-9]")

ABGR_LENGTH = 8
STYLE_FLAG_VALUES = (0, -1)

_HEX_DIGITS = frozenset(string.hexdigits)


def is_valid_abgr(color: str) -> bool:
    """Returns True if color is exactly 8 hexadecimal characters (ABGR)."""
    if not isinstance(color, str) or len(color) != ABGR_LENGTH:
        return False
    return all(c in _HEX_DIGITS for c in color)


def _is_timestamp(value) -> bool:
    return isinstance(value, str) and TIME_PATTERN.fullmatch(value) is not None


def validate_event(event: Event) -> None:
    """
    Checks the start and end timestamps of an event.

    Raises:
        ValidationError: If start or end is not a H:MM:SS:CS timestamp.
    """
    if not _is_timestamp(event.start):
        raise ValidationError(f"Invalid start time: {event.start}")
    if not _is_timestamp(event.end):
        raise ValidationError(f"Invalid end time: {event.end}")


def validate_style(style: Style) -> None:
    """
    Checks the colors and on/off flags of a style.

    Colors are checked in the order primary, secondary, outline, back, then the
    flags bold, italic, underline, strikeout. Only the first problem is reported.
    An empty color counts as unset and is accepted.

    Raises:
        ValidationError: On the first malformed color or flag.
    """
    colors = (
        ("primary", style.primary_color),
        ("secondary", style.second_color),
        ("outline", style.outline_color),
        ("back", style.back_color),
    )
    for label, color in colors:
        if color != "" and not is_valid_abgr(color):
            raise ValidationError(f"Invalid {label} color: {color}")

    flags = (
        ("bold", style.bold),
        ("italic", style.italic),
        ("underline", style.underline),
        ("StrikeOut", style.strike_out),
    )
    for label, value in flags:
        if value not in STYLE_FLAG_VALUES:
            raise ValidationError(f"Invalid style {label}: {value}")


def validate_subtitle(subtitle: Subtitle) -> None:
    """
    Validates a whole subtitle, failing fast.

    The timer is checked first, then every style in order, then every event
    in order. Style references held by events are not resolved.

    Args:
        subtitle: The subtitle to check. It is not modified.

    Raises:
        ValidationError: The first constraint violation found.
    """
    if subtitle.timer < 0:
        raise ValidationError(f"Invalid timer: {subtitle.timer:f}")

    for style in subtitle.styles:
        if style is None:
            raise ValidationError("Style cannot be None")
        validate_style(style)

    for event in subtitle.events:
        if event is None:
            raise ValidationError("Event cannot be None")
        validate_event(event)

    logger.debug(f"Validated subtitle with {len(subtitle.styles)} styles and {len(subtitle.events)} events.")
