"""Handles rendering subtitle documents into ASS v4.00+ text."""

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, astuple
from typing import List

from .models import Event, Style, Subtitle

logger = logging.getLogger(__name__)

STYLE_FORMAT = (
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, "
    "BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, "
    "BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding"
)
EVENT_FORMAT = "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"


@dataclass(frozen=True)
class StyleLineConstants:
    """
    Fixed values written after the colors of every Style line.

    They are template literals, not taken from the Style being rendered: the
    defaults always produce 1,0,0,0,100,100,0,0,1,2,0,2,20,20,2,0.
    """
    bold: int = 1
    italic: int = 0
    underline: int = 0
    strike_out: int = 0
    scale_x: int = 100
    scale_y: int = 100
    spacing: int = 0
    angle: int = 0
    border_style: int = 1
    outline: int = 2
    shadow: int = 0
    alignment: int = 2
    margin_l: int = 20
    margin_r: int = 20
    margin_v: int = 2
    encoding: int = 0

    def render(self) -> str:
        return ",".join(str(value) for value in astuple(self))


DEFAULT_STYLE_CONSTANTS = StyleLineConstants()


class SubtitleFormatter(ABC):
    """Abstract base class for subtitle formatters."""

    @abstractmethod
    def format_subtitles(self, subtitle: Subtitle) -> str:
        """
        Renders a subtitle into its textual representation.

        Args:
            subtitle: A validated subtitle with defaults already applied.

        Returns:
            The complete document text.
        """
        pass


class ASSFormatter(SubtitleFormatter):
    """Formats subtitles into the ASS (Advanced SubStation Alpha) v4.00+ layout."""

    def __init__(self, style_constants: StyleLineConstants = DEFAULT_STYLE_CONSTANTS):
        self.style_constants = style_constants

    def format_style(self, style: Style) -> str:
        return (
            f"Style: {style.name},{style.font_name},{style.font_size},"
            f"&H{style.primary_color},&H{style.second_color},"
            f"&H{style.outline_color},&H{style.back_color},"
            f"{self.style_constants.render()}"
        )

    def format_event(self, event: Event) -> str:
        return (
            f"Dialogue: {event.layer},{event.start},{event.end},{event.style},{event.name},"
            f"{event.margin_l:04d},{event.margin_r:04d},{event.margin_v:04d},"
            f"{event.effect},{event.text}"
        )

    def _script_info(self, subtitle: Subtitle) -> List[str]:
        return [
            "[Script Info]",
            f"Title: {subtitle.title}",
            f"Original Script: {subtitle.origin_script}",
            "ScriptType: v4.00+",
            "Collisions: Normal",
            f"PlayResX: {subtitle.player_width}",
            f"PlayResY: {subtitle.player_height}",
            f"Timer: {subtitle.timer:.4f}",
        ]

    def format_subtitles(self, subtitle: Subtitle) -> str:
        """
        Renders the three ASS sections.

        The layout is fixed: a leading blank line, the [Script Info] block,
        one blank line, the [V4+ Styles] block, two blank lines, the [Events]
        block and a trailing blank line. Event text is written as given,
        override tags included.
        """
        buffer = io.StringIO()
        buffer.write("\n")
        for line in self._script_info(subtitle):
            buffer.write(f"{line}\n")

        buffer.write("\n[V4+ Styles]\n")
        buffer.write(f"{STYLE_FORMAT}\n")
        for style in subtitle.styles:
            buffer.write(f"{self.format_style(style)}\n")

        buffer.write("\n\n[Events]\n")
        buffer.write(f"{EVENT_FORMAT}\n")
        for event in subtitle.events:
            buffer.write(f"{self.format_event(event)}\n")
        buffer.write("\n")

        logger.debug(f"Rendered {len(subtitle.styles)} style lines and {len(subtitle.events)} dialogue lines.")
        return buffer.getvalue()
