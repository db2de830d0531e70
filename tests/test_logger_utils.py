# tests/test_logger_utils.py
import io
import logging

from freq_trie.utils.logger_utils import LOGGER_NAME, ColorFormatter, Log, setup_logging


def teardown_function():
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_console_and_file(tmp_path):
    stream = io.StringIO()
    path = tmp_path / "trie.log"
    setup_logging("DEBUG", path=str(path), use_color=False, stream=stream)

    Log.info("hello there")
    Log.debug("details")

    out = stream.getvalue()
    assert "INFO    | hello there" in out
    assert "DEBUG   | details" in out
    assert "hello there" in path.read_text(encoding="utf-8")


def test_setup_logging_replaces_handlers():
    setup_logging("INFO", stream=io.StringIO())
    setup_logging("INFO", stream=io.StringIO())
    assert len(logging.getLogger(LOGGER_NAME).handlers) == 1


def test_color_formatter_wraps_levels():
    record = logging.LogRecord(LOGGER_NAME, logging.ERROR, __file__, 1, "boom", None, None)
    line = ColorFormatter("%(levelname)s %(message)s").format(record)
    assert line.startswith(ColorFormatter.COLORS["ERROR"])
    assert line.endswith(ColorFormatter.COLORS["RESET"])


def test_time_block_records_metric():
    stream = io.StringIO()
    setup_logging("INFO", use_color=False, stream=stream)
    with Log.time_block("load") as timer:
        pass
    assert timer.elapsed >= 0
    assert "load done:" in stream.getvalue()


def test_core_debug_records_reach_package_logger():
    from freq_trie.core import pop, put_words

    stream = io.StringIO()
    setup_logging("DEBUG", use_color=False, stream=stream)
    pop(put_words(["ab", "abc"]), "ab")
    assert "popped 'ab' (2 words)" in stream.getvalue()
