# tests/conftest.py
# ruff: noqa: E402
from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from infomark import InfoMarkClient, create_mock_transport


@pytest.fixture()
def make_client():
    """Build an :class:`InfoMarkClient` bound to a mock transport serving ``routes``."""

    def factory(routes=None, **kwargs):
        transport, calls = create_mock_transport(routes)
        return InfoMarkClient('infomark.local', 2020, False, transport=transport, **kwargs), calls

    return factory
