from __future__ import annotations

from typing import List, Tuple


class LicenseError(Exception):
    """Base class for every failed license check."""


class LicenseNotFoundError(LicenseError, FileNotFoundError):
    def __init__(self, message: str = "license not found") -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0] if self.args else "license not found"


class BelowThresholdError(LicenseError):
    def __init__(self, actual: float, wanted: float) -> None:
        self.actual = actual
        self.wanted = wanted
        super().__init__(f"percentage {actual:f} is less than wanted {wanted:f}")


class TypeMismatchError(LicenseError):
    def __init__(self, want: str, found: List[Tuple[str, float]]) -> None:
        self.want = want
        self.found = found
        listed = ",".join(f"{name}({percent:3.1f}%)" for name, percent in found)
        super().__init__(f"license does not match. found: {listed}")


class ScorerUnavailableError(LicenseError):
    pass
