"""Shared grid fixtures."""

from __future__ import annotations

import pytest

from navgrid import NavGrid


@pytest.fixture
def grid10() -> NavGrid:
    return NavGrid(10, 10)


@pytest.fixture
def grid5() -> NavGrid:
    return NavGrid(5, 5)
