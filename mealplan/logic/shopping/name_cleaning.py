"""Name-cleaning adapter around an external text-cleaning capability.

The capability receives N names and must answer with N cleaned names in
the same order. Whatever goes wrong (no capability configured, an
exception, a timeout, a wrong count or a non-string entry) the adapter
returns the input names unchanged and reports why.
"""
import asyncio
import logging
from typing import List, Optional, Protocol, Sequence

from mealplan.utilities.config import NAME_CLEANING_TIMEOUT

logger = logging.getLogger(__name__)

REASON_UNCONFIGURED = "unconfigured"
REASON_TIMEOUT = "timeout"
REASON_COUNT_MISMATCH = "count_mismatch"
REASON_INVALID_ENTRY = "invalid_entry"
REASON_ERROR = "error"


class NameCleaner(Protocol):
    async def clean_names(self, names: List[str], translate: bool = False) -> List[str]:
        ...


class CleaningResult:
    def __init__(self, names: List[str], degraded_reason: Optional[str] = None):
        self.names = names
        self.degraded_reason = degraded_reason

    @property
    def degraded(self) -> bool:
        return self.degraded_reason is not None

    def __repr__(self) -> str:
        return f"CleaningResult({len(self.names)} names, degraded={self.degraded_reason})"


class NoOpNameCleaner:
    """Capability stand-in that returns names untouched."""

    async def clean_names(self, names: List[str], translate: bool = False) -> List[str]:
        return list(names)


async def clean_names_with_fallback(names: Sequence[str], cleaner: Optional[NameCleaner],
                                    timeout: float = NAME_CLEANING_TIMEOUT,
                                    translate: bool = False) -> CleaningResult:
    original = list(names)
    if not original:
        return CleaningResult([])
    if cleaner is None:
        logger.warning("Name cleaning not configured; keeping %d original names", len(original))
        return CleaningResult(original, REASON_UNCONFIGURED)

    try:
        cleaned = await asyncio.wait_for(cleaner.clean_names(list(original), translate=translate), timeout)
    except asyncio.TimeoutError:
        logger.warning("Name cleaning timed out after %ss; keeping original names", timeout)
        return CleaningResult(original, REASON_TIMEOUT)
    except Exception:
        logger.exception("Name cleaning failed; keeping original names")
        return CleaningResult(original, REASON_ERROR)

    if not isinstance(cleaned, (list, tuple)) or len(cleaned) != len(original):
        got = len(cleaned) if isinstance(cleaned, (list, tuple)) else type(cleaned).__name__
        logger.warning("Name cleaning returned %s names for %d inputs; keeping original names", got, len(original))
        return CleaningResult(original, REASON_COUNT_MISMATCH)
    if not all(isinstance(n, str) and n.strip() for n in cleaned):
        logger.warning("Name cleaning returned blank or non-text entries; keeping original names")
        return CleaningResult(original, REASON_INVALID_ENTRY)

    return CleaningResult([n.strip() for n in cleaned])


__all__ = [
    'NameCleaner', 'NoOpNameCleaner', 'CleaningResult', 'clean_names_with_fallback',
    'REASON_UNCONFIGURED', 'REASON_TIMEOUT', 'REASON_COUNT_MISMATCH', 'REASON_INVALID_ENTRY', 'REASON_ERROR',
]
