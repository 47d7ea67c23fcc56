from __future__ import annotations

import logging

import pytest

from gamemath import Vector3
from gamemath.logging import LOGGER_ID


@pytest.fixture(autouse=True)
def reset_gamemath_logger():
    yield
    logging.getLogger(LOGGER_ID).setLevel(logging.NOTSET)


@pytest.fixture
def origin() -> Vector3:
    return Vector3(0, 0, 0)


@pytest.fixture
def block_pos() -> Vector3:
    return Vector3(10, 64, -3)


@pytest.fixture
def float_pos() -> Vector3:
    return Vector3(1.5, -2.25, 3.75)
