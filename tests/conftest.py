"""Shared fixtures for the test suite."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from .documents import ARTICLE, INCLUDED


@pytest.fixture
def article() -> dict[str, Any]:
    return copy.deepcopy(ARTICLE)


@pytest.fixture
def included() -> list[dict[str, Any]]:
    return copy.deepcopy(INCLUDED)
