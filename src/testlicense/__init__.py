from .base import Coverage, CoverOptions, DirnamesReader, LicenseFile, Match, Scorer
from .check import DEFAULT_PERCENT, assert_license, assert_license_dir
from .errors import (
    BelowThresholdError,
    LicenseError,
    LicenseNotFoundError,
    ScorerUnavailableError,
    TypeMismatchError,
)
from .filenames import FILENAMES, is_license_filename
from .scan import LocalDir, read_license, read_license_dir
from .scorer import ScancodeScorer, default_scorer

__all__ = [
    "BelowThresholdError",
    "Coverage",
    "CoverOptions",
    "DEFAULT_PERCENT",
    "DirnamesReader",
    "FILENAMES",
    "LicenseError",
    "LicenseFile",
    "LicenseNotFoundError",
    "LocalDir",
    "Match",
    "ScancodeScorer",
    "Scorer",
    "ScorerUnavailableError",
    "TypeMismatchError",
    "assert_license",
    "assert_license_dir",
    "default_scorer",
    "is_license_filename",
    "read_license",
    "read_license_dir",
]
