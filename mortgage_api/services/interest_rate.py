# This project was developed with assistance from AI tools.
"""Process-wide default interest rate.

Calculations that omit an explicit rate read it from an ``InterestRateCell``.
The cell is created from ``settings.DEFAULT_INTEREST_RATE`` on first use and
only changes through ``set_rate()``, which validates before committing.
"""

import logging
import threading

from ..core.config import settings
from .mortgage_rules import is_valid_interest_rate

logger = logging.getLogger(__name__)


class InterestRateCell:
    """Lock-guarded annual interest rate in percent (2.5 means 2.5%)."""

    def __init__(self, initial_rate: float):
        if not is_valid_interest_rate(initial_rate):
            raise ValueError(f"Initial interest rate {initial_rate} is outside (0, 100]")
        self._rate = initial_rate
        self._lock = threading.Lock()

    def get_rate(self) -> float:
        with self._lock:
            return self._rate

    def set_rate(self, new_rate: float) -> bool:
        """Commit ``new_rate`` if it lies in (0, 100].

        Returns False and leaves the current rate untouched otherwise.
        """
        if not is_valid_interest_rate(new_rate):
            logger.warning("Rejected interest rate update to %s", new_rate)
            return False
        with self._lock:
            old_rate = self._rate
            self._rate = new_rate
        logger.info("Default interest rate changed %s -> %s", old_rate, new_rate)
        return True


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_cell: InterestRateCell | None = None
_cell_lock = threading.Lock()


def get_rate_cell() -> InterestRateCell:
    """Return the process-wide rate cell, creating it on first use."""
    global _cell  # noqa: PLW0603
    with _cell_lock:
        if _cell is None:
            _cell = InterestRateCell(settings.DEFAULT_INTEREST_RATE)
        return _cell


def reset_rate_cell() -> InterestRateCell:
    """Recreate the cell from settings (used by tests)."""
    global _cell  # noqa: PLW0603
    with _cell_lock:
        _cell = InterestRateCell(settings.DEFAULT_INTEREST_RATE)
        return _cell


def get_default_rate() -> float:
    return get_rate_cell().get_rate()


def set_default_rate(new_rate: float) -> bool:
    return get_rate_cell().set_rate(new_rate)


def log_rate_status() -> None:
    """Log the default interest rate at startup."""
    logger.info("Default interest rate: %s%%", get_default_rate())
