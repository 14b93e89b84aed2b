from __future__ import annotations

import sys

from .check import DEFAULT_PERCENT, assert_license_dir
from .errors import LicenseError
from .logging_cfg import setup_logging
from .scan import LocalDir

USAGE = "Usage: testlicense WANT [PERCENT [DIR]]"


def main(argv=None) -> int:
    setup_logging()
    argv = sys.argv if argv is None else argv
    if not 2 <= len(argv) <= 4:
        print(USAGE, file=sys.stderr)
        return 1
    want = argv[1]
    try:
        percent = float(argv[2]) if len(argv) > 2 else DEFAULT_PERCENT
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1
    d = LocalDir(argv[3] if len(argv) > 3 else ".")
    try:
        assert_license_dir(d, want, percent)
        print(f"ok: {want} license in {d.path}")
        return 0
    except (LicenseError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
