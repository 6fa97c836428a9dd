import io
import logging

from flappy_shield.log import setup_logging


def test_compact_lines_without_color():
    stream = io.StringIO()
    root = setup_logging("warning", stream=stream)
    try:
        logging.getLogger("flappy_shield.engine").info("hidden")
        logging.getLogger("flappy_shield.engine").warning("shown %d", 3)
    finally:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)

    output = stream.getvalue()
    assert "hidden" not in output
    assert "[W] engine: shown 3" in output
    assert "\033[" not in output
