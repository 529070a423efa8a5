import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class PaginationController:
    """Tracks how much of an ordered result list has been revealed.

    ``advance`` is guarded so repeated triggers while an advance is in flight
    only reveal one page.
    """

    def __init__(self, page_size: int = 30):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        self.revealed_count = page_size
        self.is_advancing = False

    def visible_slice(self, results: Sequence) -> list:
        return list(results[:min(self.revealed_count, len(results))])

    def has_more(self, results: Sequence) -> bool:
        return self.revealed_count < len(results)

    def advance(self, results: Sequence) -> bool:
        """Reveal the next page. Returns False when nothing changed."""
        if self.is_advancing or not self.has_more(results):
            return False
        self.is_advancing = True
        try:
            self.revealed_count = min(self.revealed_count + self.page_size, len(results))
        finally:
            self.is_advancing = False
        logger.debug("Revealed %d of %d results", self.revealed_count, len(results))
        return True

    def reset(self) -> None:
        self.revealed_count = self.page_size
