"""Fills unset subtitle fields with fallback values before rendering."""

import copy
import logging

from .models import Subtitle

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_WIDTH = 1920
DEFAULT_PLAYER_HEIGHT = 1080
DEFAULT_FONT_NAME = "Arial"
DEFAULT_ORIGIN_SCRIPT = "unknown"


def fulfill(subtitle: Subtitle) -> Subtitle:
    """
    Returns a copy of an already validated subtitle with defaults applied.

    The caller's subtitle is left untouched. Rules, in order:
    an empty original script becomes "unknown"; a zero resolution becomes
    1920x1080, and a single zero side is scaled from the other one using
    integer division (so 720 high gives 0 wide); empty style fonts become Arial.

    Args:
        subtitle: A subtitle that passed validate_subtitle.

    Returns:
        A new Subtitle ready for rendering.
    """
    working = copy.deepcopy(subtitle)

    if working.origin_script == "":
        working.origin_script = DEFAULT_ORIGIN_SCRIPT

    if working.player_width == 0 and working.player_height == 0:
        working.player_width = DEFAULT_PLAYER_WIDTH
        working.player_height = DEFAULT_PLAYER_HEIGHT
    elif working.player_width == 0:
        working.player_width = DEFAULT_PLAYER_WIDTH * (working.player_height // DEFAULT_PLAYER_HEIGHT)
    elif working.player_height == 0:
        working.player_height = DEFAULT_PLAYER_HEIGHT * (working.player_width // DEFAULT_PLAYER_WIDTH)

    for style in working.styles:
        if style.font_name == "":
            style.font_name = DEFAULT_FONT_NAME

    logger.debug(f"Resolved resolution {working.player_width}x{working.player_height}")
    return working
