"""pytest plugin exposing a ``tb`` fixture bound to the running test."""

from __future__ import annotations

from typing import Iterator

import pytest

from assertpack.handle.pytest_handle import PytestHandle


@pytest.fixture()
def tb(request: pytest.FixtureRequest) -> Iterator[PytestHandle]:
    """Handle for assertkit assertions; deferred failures are raised at teardown."""
    handle = PytestHandle(nodeid=request.node.nodeid)
    yield handle
    handle.finalize()
