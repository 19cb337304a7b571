import io
import json
from pathlib import Path
import sys

import pytest
import yaml

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from assexport.config_loader import ConfigLoader, load_subtitle
from assexport.exceptions import ConfigurationError, ValidationError
from assexport.exporter import export


DOCUMENT = {
    "title": "Episode 1",
    "originScript": "Fansub",
    "playResX": 1280,
    "playResY": 720,
    "timer": 100,
    "styles": [
        {
            "name": "Default",
            "font": "Verdana",
            "fontSize": 40,
            "primaryColor": "00FFFFFF",
            "secondColor": "000000FF",
            "outlineColor": "00000000",
            "backColor": "00000000",
            "bold": -1,
        }
    ],
    "events": [
        {
            "start": "0:00:01:00",
            "end": "0:00:03:50",
            "style": "Default",
            "marginV": 15,
            "text": "Hello there",
        }
    ],
}


def test_load_subtitle_from_yaml(tmp_path):
    path = tmp_path / "episode.yaml"
    path.write_text(yaml.safe_dump(DOCUMENT), encoding="utf-8")

    subtitle = load_subtitle(str(path))

    assert subtitle.title == "Episode 1"
    assert subtitle.styles[0].font_name == "Verdana"
    assert subtitle.styles[0].back_color == "00000000"
    assert subtitle.events[0].margin_v == 15

    sink = io.BytesIO()
    export(subtitle, sink)
    output = sink.getvalue().decode("utf-8")
    assert "Timer: 100.0000\n" in output
    assert "Dialogue: 0,0:00:01:00,0:00:03:50,Default,,0000,0000,0015,,Hello there\n" in output


def test_load_subtitle_from_json(tmp_path):
    path = tmp_path / "episode.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")

    subtitle = load_subtitle(str(path))

    assert subtitle.origin_script == "Fansub"
    assert (subtitle.player_width, subtitle.player_height) == (1280, 720)


def test_unquoted_timestamp_is_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(
        "events:\n"
        "  - start: 1:00:00:00\n"
        "    end: '1:00:01:00'\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigurationError, match="quote timestamps"):
        load_subtitle(str(path))


def test_loaded_document_is_not_validated(tmp_path):
    path = tmp_path / "invalid.yaml"
    path.write_text(yaml.safe_dump({"events": [{"start": "9:99:00:00", "end": "0:00:01:00"}]}), encoding="utf-8")

    subtitle = load_subtitle(str(path))

    with pytest.raises(ValidationError):
        export(subtitle, io.BytesIO())


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader().load_config(str(tmp_path / "nope.yaml"))


def test_directory_is_rejected(tmp_path):
    with pytest.raises(ConfigurationError, match="not a file"):
        ConfigLoader().load_config(str(tmp_path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("title: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid YAML format"):
        ConfigLoader().load_config(str(path))


@pytest.mark.parametrize("content", ["", "- a\n- b\n", "just a string\n"])
def test_root_must_be_a_mapping(tmp_path, content):
    path = tmp_path / "root.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Root must be a mapping"):
        ConfigLoader().load_config(str(path))
