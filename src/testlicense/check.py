from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple

from .base import CoverOptions, DirnamesReader, Scorer
from .errors import BelowThresholdError, LicenseNotFoundError, TypeMismatchError
from .scan import LocalDir, read_license_dir
from .scorer import default_scorer

log = logging.getLogger(__name__)

DEFAULT_PERCENT: float = 90.0


def _assert_contents(data: bytes, want: str, percent: float, scorer: Optional[Scorer]) -> None:
    cov = (scorer or default_scorer()).cover(data, CoverOptions())
    if cov is None:
        raise LicenseNotFoundError()
    if cov.percent < percent:
        raise BelowThresholdError(cov.percent, percent)

    found: List[Tuple[str, float]] = []
    for m in cov.matches:
        if m.type == want:
            return
        found.append((m.name, m.percent))
    raise TypeMismatchError(want, found)


def assert_license_dir(
    directory: DirnamesReader,
    want: str,
    percent: float,
    scorer: Optional[Scorer] = None,
) -> None:
    """
    Raise if the license file in directory is not of type want or covers less
    than percent of its text. Returns None when the license is acceptable.
    """
    lic = read_license_dir(directory)
    log.info("checking %s against %s (>= %.1f%%)", lic.filename, want, percent)
    _assert_contents(lic.contents, want, percent, scorer)


def assert_license(want: str, percent: float, scorer: Optional[Scorer] = None) -> None:
    """Same as assert_license_dir for the current working directory."""
    assert_license_dir(LocalDir(os.curdir), want, percent, scorer)
