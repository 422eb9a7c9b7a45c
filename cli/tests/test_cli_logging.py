from __future__ import annotations

import logging

from timekit_cli.logging_ import setup_logging


def test_verbose_enables_client_debug_lines() -> None:
    setup_logging(True)
    assert logging.getLogger("timekit_client.transport").getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_default_keeps_client_quiet() -> None:
    setup_logging(False)
    assert logging.getLogger("timekit_client.transport").getEffectiveLevel() == logging.WARNING
