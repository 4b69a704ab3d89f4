from __future__ import annotations

import logging

from rich.logging import RichHandler

from indigo.logging_utils import setup_logging


def test_setup_logging_installs_rich_handler() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        setup_logging("debug")

        assert root.level == logging.DEBUG
        assert any(isinstance(handler, RichHandler) for handler in root.handlers)

        setup_logging("nonsense")
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
