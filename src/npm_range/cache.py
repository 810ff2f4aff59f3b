"""Thread-safe memo of parsed and normalized formulas keyed by source text.

Manifests repeat the same handful of range strings many times, so callers
checking many candidates can keep one ``FormulaCache`` around instead of
re-parsing. Each key is computed at most once: concurrent callers asking for
the same uncached text wait on the first caller's result. Parse failures are
not stored.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from concurrent.futures import Future
from dataclasses import dataclass

from .config import DEFAULT_CACHE_SIZE, Settings
from .models.formula import Formula
from .models.version import Version
from .normalize import Normalized, normalize
from .parsers.formula import parse_formula
from .parsers.version import parse_version
from .satisfies import satisfies_normalized

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledFormula:
    """A parsed formula together with its normalized form."""

    text: str
    formula: Formula
    normalized: Normalized

    def satisfied_by(self, version: Version | str) -> bool:
        if isinstance(version, str):
            version = parse_version(version)
        return satisfies_normalized(self.normalized, version)


def compile_formula(text: str) -> CompiledFormula:
    formula = parse_formula(text)
    return CompiledFormula(text=text, formula=formula, normalized=normalize(formula))


class FormulaCache:
    """Bounded LRU cache of ``CompiledFormula`` values."""

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE, *, enabled: bool = True) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.enabled = enabled
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, Future[CompiledFormula]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> FormulaCache:
        return cls(settings.cache_size, enabled=settings.cache_enabled)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, text: object) -> bool:
        with self._lock:
            return text in self._entries

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get(self, text: str) -> CompiledFormula:
        """Return the compiled formula for ``text``, computing it if needed.

        Raises:
            SemverSyntaxError: if ``text`` is not a valid formula.
        """
        if not self.enabled:
            return compile_formula(text)

        with self._lock:
            future = self._entries.get(text)
            if future is not None:
                self._entries.move_to_end(text)
                self.hits += 1
                owner = False
            else:
                future = Future()
                self._entries[text] = future
                self.misses += 1
                owner = True
                self._evict()

        if not owner:
            return future.result()

        logger.debug("Compiling formula %r", text)
        try:
            compiled = compile_formula(text)
        except BaseException as exc:
            # Interrupts included, or waiters would block on this future forever.
            with self._lock:
                if self._entries.get(text) is future:
                    del self._entries[text]
            future.set_exception(exc)
            raise
        future.set_result(compiled)
        return compiled

    def _evict(self) -> None:
        while len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted formula %r from cache", evicted)

    def normalize(self, text: str) -> Normalized:
        return self.get(text).normalized

    def satisfies(self, text: str, version: Version | str) -> bool:
        return self.get(text).satisfied_by(version)
