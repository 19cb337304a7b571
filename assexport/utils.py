"""Utility functions for assexport."""


def format_time_ass(seconds: float) -> str:
    """
    Formats seconds into the event time format H:MM:SS:CS.

    Only one hour digit is valid in an event, so anything from 10 hours on
    produces a timestamp that validation rejects.

    Args:
        seconds: Time in seconds.

    Returns:
        Formatted time string.
    """
    if seconds < 0:
        seconds = 0.0 # Ensure non-negative time
    centiseconds = round(seconds * 100)
    hrs = centiseconds // 360000
    centiseconds %= 360000
    mins = centiseconds // 6000
    centiseconds %= 6000
    secs = centiseconds // 100
    centiseconds %= 100
    return f"{hrs:d}:{mins:02d}:{secs:02d}:{centiseconds:02d}"
