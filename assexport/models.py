"""Data models for assexport."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from .exceptions import ConfigurationError


_ACCEPTED_TYPES = {
    str: (str,),
    int: (int,),
    float: (int, float),
}


def _coerce(data: Mapping[str, Any], key: str, kind: type, default: Any, non_negative: bool = False) -> Any:
    """Reads one scalar from a construction mapping, zero-valued when missing or null."""
    value = data.get(key)
    if value is None:
        return default
    # bool is an int subclass but never a sensible value for these fields
    if isinstance(value, bool) or not isinstance(value, _ACCEPTED_TYPES[kind]):
        hint = ""
        if kind is str and isinstance(value, int):
            # YAML 1.1 reads unquoted 1:00:00:00 as a base 60 integer
            hint = " (quote timestamps and numeric strings)"
        raise ConfigurationError(
            f"Invalid value for '{key}': expected {kind.__name__}, got {value!r}{hint}"
        )
    if non_negative and value < 0:
        raise ConfigurationError(f"Invalid value for '{key}': must not be negative, got {value!r}")
    return kind(value)


@dataclass
class Event:
    """A single dialogue line: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text."""
    layer: int = 0
    start: str = ""  # H:MM:SS:CS
    end: str = ""  # H:MM:SS:CS
    style: str = ""
    name: str = ""  # speaker name, a placeholder
    margin_l: int = 0
    margin_r: int = 0
    margin_v: int = 0
    effect: str = ""
    text: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        return cls(
            layer=_coerce(data, "layer", int, 0),
            start=_coerce(data, "start", str, ""),
            end=_coerce(data, "end", str, ""),
            style=_coerce(data, "style", str, ""),
            name=_coerce(data, "name", str, ""),
            margin_l=_coerce(data, "marginLeft", int, 0, non_negative=True),
            margin_r=_coerce(data, "marginRight", int, 0, non_negative=True),
            margin_v=_coerce(data, "marginV", int, 0, non_negative=True),
            effect=_coerce(data, "effect", str, ""),
            text=_coerce(data, "text", str, ""),
        )


@dataclass
class Style:
    """A named font/color/decoration bundle referenced by events."""
    name: str = ""
    font_name: str = ""
    font_size: int = 0
    primary_color: str = ""  # ABGR, 8 hex digits
    second_color: str = ""
    outline_color: str = ""
    back_color: str = ""
    bold: int = 0  # 0 off, -1 on
    italic: int = 0
    underline: int = 0
    strike_out: int = 0
    scale_x: int = 0
    scale_y: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Style":
        return cls(
            name=_coerce(data, "name", str, ""),
            font_name=_coerce(data, "font", str, ""),
            font_size=_coerce(data, "fontSize", int, 0),
            primary_color=_coerce(data, "primaryColor", str, ""),
            second_color=_coerce(data, "secondColor", str, ""),
            outline_color=_coerce(data, "outlineColor", str, ""),
            back_color=_coerce(data, "backColor", str, ""),
            bold=_coerce(data, "bold", int, 0),
            italic=_coerce(data, "italic", int, 0),
            underline=_coerce(data, "underline", int, 0),
            strike_out=_coerce(data, "strikeOut", int, 0),
            scale_x=_coerce(data, "scaleX", int, 0),
            scale_y=_coerce(data, "scaleY", int, 0),
        )


@dataclass
class Subtitle:
    """
    The whole ASS document.

    Styles are rendered in list order and are not deduplicated; events are
    rendered in list order. A None element is kept as-is so that validation
    can report it.
    """
    title: str = ""
    origin_script: str = ""
    player_width: int = 0
    player_height: int = 0
    play_depth: int = 0
    timer: float = 0.0
    styles: List[Optional[Style]] = field(default_factory=list)
    events: List[Optional[Event]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Subtitle":
        """
        Builds a Subtitle from a mapping using the camelCase document keys.

        Args:
            data: Mapping as loaded from a YAML or JSON document.

        Returns:
            A new Subtitle. Missing keys take their zero value, unknown keys are ignored.

        Raises:
            ConfigurationError: If a field holds a value of the wrong type, or a
                margin or resolution value is negative.
        """
        styles = data.get("styles") or []
        events = data.get("events") or []
        if not isinstance(styles, list):
            raise ConfigurationError(f"Invalid value for 'styles': expected a list, got {type(styles).__name__}")
        if not isinstance(events, list):
            raise ConfigurationError(f"Invalid value for 'events': expected a list, got {type(events).__name__}")

        for item in styles + events:
            if item is not None and not isinstance(item, Mapping):
                raise ConfigurationError(f"Invalid style or event entry: {item!r}")

        return cls(
            title=_coerce(data, "title", str, ""),
            origin_script=_coerce(data, "originScript", str, ""),
            player_width=_coerce(data, "playResX", int, 0, non_negative=True),
            player_height=_coerce(data, "playResY", int, 0, non_negative=True),
            play_depth=_coerce(data, "playDepth", int, 0, non_negative=True),
            timer=_coerce(data, "timer", float, 0.0),
            styles=[None if s is None else Style.from_dict(s) for s in styles],
            events=[None if e is None else Event.from_dict(e) for e in events],
        )
