from __future__ import annotations

import pytest

from perfectroot.runtime import reset


@pytest.fixture(autouse=True)
def fresh_runtime():
    """Every test starts from default runtime flags (no debug)."""
    return reset()
