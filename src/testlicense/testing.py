from __future__ import annotations

from typing import Optional

import pytest

from .base import Scorer
from .check import DEFAULT_PERCENT, assert_license
from .errors import LicenseError


def check(want: str, scorer: Optional[Scorer] = None) -> None:
    """Fail the running test unless the cwd holds a want license covering 90%."""
    check_percent(want, DEFAULT_PERCENT, scorer)


def check_percent(want: str, percent: float, scorer: Optional[Scorer] = None) -> None:
    """Fail the running test unless the cwd holds a want license covering percent."""
    try:
        assert_license(want, percent, scorer)
    except (LicenseError, OSError) as e:
        pytest.fail(str(e), pytrace=False)
