import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gestures.settings import Fit, Settings  # noqa: E402
from gestures.state import State  # noqa: E402
from gestures.utils.gravity import Gravity  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """100x100 viewport, centered, INSIDE fit, no image yet."""
    return Settings().set_viewport(100, 100).set_gravity(Gravity.CENTER).set_fit_method(Fit.INSIDE)


@pytest.fixture
def state() -> State:
    return State()
