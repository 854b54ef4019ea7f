from __future__ import annotations

import pytest

from castle_kingdom.kingdom import Kingdom


@pytest.fixture(autouse=True)
def fresh_kingdom():
    Kingdom.reset_instance()
    yield
    Kingdom.reset_instance()
