"""PageFetcher port - cursor-based access to the upstream catalog."""

from abc import abstractmethod
from typing import Protocol

from orbit.domain.ingest.model.value import Cursor, Page
from orbit.domain.shared.port import Port


class PageFetcher(Port, Protocol):
    """Retrieves the upstream catalog one page at a time.

    Implementations raise UpstreamUnavailableError when the upstream cannot
    be reached or answers with something that is not a page. They do not
    retry.
    """

    @abstractmethod
    def start(self, name: str | None) -> Cursor:
        """Build the cursor of the first page for a name filter."""
        ...

    @abstractmethod
    async def fetch(self, cursor: Cursor) -> Page:
        """Fetch the page identified by ``cursor``."""
        ...
