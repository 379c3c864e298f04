"""Document Source Port Interface."""

from abc import ABC, abstractmethod

from ..domain import Document


class DocumentSourcePort(ABC):
    """Abstract interface for anything that can produce the document collection."""

    @abstractmethod
    async def load_collection(self) -> dict[str, Document]:
        """Build the full ``id -> Document`` mapping.

        Implementations absorb their own I/O failures and return fewer
        documents instead of raising.
        """
        ...
