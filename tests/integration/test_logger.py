"""Integration tests for loguru setup."""

import io

import pytest
from loguru import logger

from internmatch.contexts.matching import compute_match
from internmatch.utils.logger import setup_logger


@pytest.mark.integration
def test_file_and_console(tmp_path):
    console = io.StringIO()
    log_file = setup_logger(
        "match", log_dir=tmp_path / "session", extra_provenance={"Resume": "cv.pdf"}, console=console
    )

    logger.debug("debug detail")
    logger.info("visible message")

    assert log_file == tmp_path / "session" / "match.log"
    log_text = log_file.read_text(encoding="utf-8")
    assert "Resume: cv.pdf" in log_text
    assert "debug detail" in log_text
    assert "visible message" in console.getvalue()
    assert "debug detail" not in console.getvalue()


@pytest.mark.integration
def test_console_only_verbose():
    console = io.StringIO()
    log_file = setup_logger("match", console=console, verbose=True)

    logger.debug("debug detail")

    assert log_file is None
    assert "debug detail" in console.getvalue()


@pytest.mark.integration
def test_library_silent_until_setup():
    logger.disable("internmatch")
    captured = io.StringIO()
    sink_id = logger.add(captured, level="DEBUG")
    try:
        compute_match("Python and React", "Python, Django, React")
    finally:
        logger.remove(sink_id)

    assert captured.getvalue() == ""


@pytest.mark.integration
def test_match_logs_only_debug():
    console = io.StringIO()
    setup_logger("match", console=console)

    compute_match("Python and React", "Python, Django, React")
    assert console.getvalue() == ""

    verbose_console = io.StringIO()
    setup_logger("match", console=verbose_console, verbose=True)

    compute_match("Python and React", "Python, Django, React")
    assert "[match] Match score: 67%" in verbose_console.getvalue()
