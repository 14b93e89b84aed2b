from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional

from .base import DirnamesReader, LicenseFile
from .errors import LicenseNotFoundError
from .filenames import is_license_filename

log = logging.getLogger(__name__)


class LocalDir:
    """A directory on the local filesystem."""

    def __init__(self, path: str | os.PathLike[str] = os.curdir) -> None:
        self.path = os.fspath(path)

    def readdirnames(self, n: int) -> List[str]:
        with os.scandir(self.path) as it:
            names = [entry.name for entry in it]
        return names if n <= 0 else names[:n]

    def read_file(self, name: str) -> bytes:
        return _read_bytes(os.path.join(self.path, name))

    def __repr__(self) -> str:
        return f"LocalDir({self.path!r})"


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def read_license_dir(
    directory: DirnamesReader,
    read_file: Optional[Callable[[str], bytes]] = None,
) -> LicenseFile:
    """
    Find the first entry of directory whose name is a license filename and read it.

    Entries are scanned in listing order, which is whatever the directory
    reports. The file is read with read_file, else with directory.read_file when
    the reader has one, else relative to the current directory.
    Listing and read errors propagate unchanged; a directory with no
    license file raises LicenseNotFoundError.
    """
    names = directory.readdirnames(0)
    reader = read_file or getattr(directory, "read_file", None) or _read_bytes
    for name in names:
        if not is_license_filename(name):
            continue
        log.debug("license candidate %s in %r", name, directory)
        try:
            contents = reader(name)
        except OSError as e:
            if e.filename is None:
                e.filename = name
            raise
        return LicenseFile(filename=name, contents=contents)
    raise LicenseNotFoundError()


def read_license() -> LicenseFile:
    """Find and read the license file in the current working directory."""
    return read_license_dir(LocalDir(os.curdir))
