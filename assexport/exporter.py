"""Validates, fills in and writes a subtitle document to an output sink."""

import io
import logging
from typing import Optional

from .defaults import fulfill
from .exceptions import WriteError
from .models import Subtitle
from .subtitle_formatter import ASSFormatter, SubtitleFormatter
from .validation import validate_subtitle

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def _write_all(sink, document: str) -> int:
    """Hands the whole document to the sink in one write and flushes it."""
    data = document.encode(ENCODING)
    if isinstance(sink, io.TextIOBase):
        written = sink.write(document)
        expected = len(document)
    else:
        written = sink.write(data)
        expected = len(data)

    # Raw streams may accept fewer bytes than offered.
    if written is not None and written != expected:
        raise WriteError(f"Short write: sink accepted {written} of {expected}")

    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()
    return len(data)


def export(subtitle: Subtitle, sink, formatter: Optional[SubtitleFormatter] = None) -> int:
    """
    Writes a subtitle as an ASS v4.00+ document.

    The subtitle is validated first; nothing reaches the sink if it is invalid.
    Defaults are applied to a private copy, so the caller's subtitle is never
    modified. The rendered document is written in a single write followed by a
    flush. The sink is neither closed nor kept after the call.

    Args:
        subtitle: The document to export.
        sink: A writable binary stream, or a text stream (io.TextIOBase).
        formatter: Renderer to use. Defaults to ASSFormatter().

    Returns:
        The number of UTF-8 bytes written and flushed.

    Raises:
        ValidationError: If the subtitle breaks a format constraint.
        WriteError: If the sink rejects the write or the flush.
    """
    validate_subtitle(subtitle)

    working = fulfill(subtitle)
    formatter = formatter or ASSFormatter()
    document = formatter.format_subtitles(working)

    try:
        written = _write_all(sink, document)
    except WriteError:
        raise
    except Exception as e:
        # Whatever the sink raises, the caller sees a WriteError
        raise WriteError(f"Could not write subtitle to sink: {e}") from e

    logger.info(
        f"Exported '{working.title}' ({len(working.styles)} styles, {len(working.events)} events, {written} bytes)"
    )
    return written
