import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import unitext_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def mixed_width_text() -> str:
    """Code points taking 1, 2, 3 and 4 bytes in UTF-8 (and 1-2 UTF-16 units)."""
    return "aé€\U0001F600bß中\U00010348"


@pytest.fixture
def sample_sentences() -> str:
    """Two English sentences."""
    return "Hello there. How are you?"
