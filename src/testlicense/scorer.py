from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional, Set

from .base import CoverOptions, Coverage, Match, Scorer
from .errors import ScorerUnavailableError

log = logging.getLogger(__name__)


def _spdx(match: Any) -> str:
    rule = match.rule
    fn = getattr(rule, "spdx_license_expression", None)
    if callable(fn):
        return str(fn())
    return str(rule.license_expression)


def _document_tokens(query: Any) -> int:
    """Count every word of the query: dictionary tokens plus unknown words."""
    known = len(query.tokens)
    unknown = sum(query.unknowns_by_pos.values())
    return known + unknown


class ScancodeScorer:
    """
    Scores a document against the ScanCode license index.

    Coverage is the share of the document's words that fall inside any
    license match; each match reports its own share of the same total.
    Words missing from ScanCode's license dictionary count toward the
    total, so text that is not license text lowers coverage.
    """

    def __init__(self, index: Any = None) -> None:
        self._index = index
        self._lock = threading.Lock()

    def _get_index(self) -> Any:
        with self._lock:
            if self._index is None:
                try:
                    from licensedcode.cache import get_index
                except ImportError as e:
                    raise ScorerUnavailableError(
                        "scancode-toolkit is not installed; install testlicense[scancode] or pass a scorer"
                    ) from e
                log.info("loading scancode license index")
                self._index = get_index()
            return self._index

    def cover(self, data: bytes, options: CoverOptions) -> Optional[Coverage]:
        idx = self._get_index()
        text = data.decode("utf-8", errors="replace")
        found = idx.match(query_string=text, min_score=options.min_score)
        if not found:
            return None

        query = found[0].query
        total = _document_tokens(query) if query is not None else 0
        if total == 0:
            return None

        covered: Set[int] = set()
        matches: List[Match] = []
        for m in found:
            covered.update(m.qspan)
            spdx = _spdx(m)
            matches.append(Match(type=spdx, name=spdx, percent=100.0 * len(m.qspan) / total))

        percent = 100.0 * len(covered) / total
        log.debug("scancode coverage %.1f%% over %d words, %d match(es)", percent, total, len(matches))
        return Coverage(percent=percent, matches=tuple(matches))


# Built once at import; the index itself loads on first use.
_default: Scorer = ScancodeScorer()


def default_scorer() -> Scorer:
    return _default
