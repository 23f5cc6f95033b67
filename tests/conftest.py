import io

import pytest

from quill import diagnostics
from quill.emit import CodeWriter


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def writer(out: io.StringIO) -> CodeWriter:
    return CodeWriter(out, newline="\n")


@pytest.fixture(autouse=True)
def restore_diagnostics():
    enabled = set(diagnostics.enabled_diagnostics)
    yield
    diagnostics.enabled_diagnostics.clear()
    diagnostics.enabled_diagnostics.update(enabled)
