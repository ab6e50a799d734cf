"""
Abstract base class for ledger clients.
Submits note transactions to the registry contract.
"""

from abc import ABC, abstractmethod

from chainnotes.models.events import TransactionReceipt


class LedgerClient(ABC):
    """
    Abstract base for note registry transactions.

    Each method submits exactly one transaction and waits for its receipt.
    Failures propagate as LedgerError; nothing is retried here.
    """

    async def connect(self) -> None:
        """Open the connection and signer. Called once before first use."""
        return None

    @abstractmethod
    async def post_note(self, profile_id: int | str, uri: str) -> TransactionReceipt:
        """
        Create a note.

        Args:
            profile_id: Owning profile handle
            uri: Content-store locator of the payload

        Returns:
            Receipt carrying the assigned note id
        """
        pass

    @abstractmethod
    async def post_note_for_any_uri(
        self, profile_id: int | str, uri: str, target_uri: str
    ) -> TransactionReceipt:
        """
        Create a note pointing at an external URI.

        Args:
            profile_id: Owning profile handle
            uri: Content-store locator of the payload
            target_uri: External URL the note refers to

        Returns:
            Receipt carrying the assigned note id
        """
        pass

    @abstractmethod
    async def delete_note(self, profile_id: int | str, note_id: int | str) -> TransactionReceipt:
        """Soft-delete a note."""
        pass

    @abstractmethod
    async def set_note_uri(
        self, profile_id: int | str, note_id: int | str, uri: str
    ) -> TransactionReceipt:
        """Point an existing note at a new payload."""
        pass

    async def close(self):
        """Close any open connections."""
        return None
