import io

import pytest
from rich.console import Console


@pytest.fixture
def out():
    """Plain-text console capturing everything the demos print."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def printed(out):
    def _printed() -> str:
        return out.file.getvalue()

    return _printed
