from __future__ import annotations

import logging

import pytest

from time_recorder.server import resolve_log_level


@pytest.mark.parametrize(
    ("name", "expected"),
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("Warning", logging.WARNING)],
)
def test_known_log_levels(name, expected):
    assert resolve_log_level(name) == expected


def test_unknown_log_level_falls_back_to_info(caplog):
    with caplog.at_level(logging.WARNING, logger="time_recorder"):
        level = resolve_log_level("verbose")

    assert level == logging.INFO
    assert "Unknown LOG_LEVEL 'verbose'" in caplog.text
