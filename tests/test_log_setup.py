import io
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from assexport.exceptions import FileSystemError
from assexport.exporter import export
from assexport.log_setup import PACKAGE_LOGGER, setup_logging
from assexport.models import Event, Style, Subtitle


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if handler not in saved[0]:
            handler.close()
    for handler in saved[0]:
        logger.addHandler(handler)
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def _subtitle():
    return Subtitle(
        title="Demo",
        styles=[Style(name="Default")],
        events=[Event(start="0:00:01:00", end="0:00:02:00", style="Default", text="Hi")],
    )


def test_export_progress_reaches_stream(package_logger):
    stream = io.StringIO()
    setup_logging(log_level=logging.INFO, stream=stream)

    written = export(_subtitle(), io.BytesIO())

    output = stream.getvalue()
    assert f"Exported 'Demo' (1 styles, 1 events, {written} bytes)" in output
    assert "Validated subtitle" not in output


def test_debug_level_adds_pipeline_details(package_logger):
    stream = io.StringIO()
    setup_logging(log_level=logging.DEBUG, stream=stream)

    export(_subtitle(), io.BytesIO())

    output = stream.getvalue()
    assert "Validated subtitle with 1 styles and 1 events." in output
    assert "Resolved resolution 1920x1080" in output


def test_root_logger_is_left_alone(package_logger):
    root = logging.getLogger()
    root_handlers = root.handlers[:]

    logger = setup_logging(stream=io.StringIO())

    assert root.handlers == root_handlers
    assert logger is package_logger
    assert logger.propagate is False


def test_repeated_setup_replaces_own_handlers_only(package_logger):
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)

    setup_logging(stream=io.StringIO())
    setup_logging(stream=io.StringIO())

    assert foreign in package_logger.handlers
    assert len(package_logger.handlers) == 2


def test_log_file_is_created_with_parents(package_logger, tmp_path):
    log_path = tmp_path / "logs" / "nested" / "export.log"
    setup_logging(log_level=logging.INFO, log_path=str(log_path), stream=io.StringIO())

    export(_subtitle(), io.BytesIO())

    file_handlers = [h for h in package_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert "Exported 'Demo'" in log_path.read_text(encoding="utf-8")


def test_unusable_log_directory(package_logger, tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(FileSystemError):
        setup_logging(log_path=str(blocker / "export.log"), stream=io.StringIO())
