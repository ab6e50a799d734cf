"""
In-process content store.
"""

import hashlib
import json
from typing import Any

from chainnotes.core.content_store.base import ContentStore
from chainnotes.utils.exceptions import NotFoundError


class InMemoryContentStore(ContentStore):
    """
    Content-addressed dict store.

    The address is derived from the sha256 of the bytes, so identical
    uploads share one address.
    """

    def __init__(self):
        self.blobs: dict[str, bytes] = {}
        self.names: dict[str, str] = {}

    @staticmethod
    def address_for(data: bytes) -> str:
        return f"bafk{hashlib.sha256(data).hexdigest()[:52]}"

    async def put(
        self,
        data: bytes,
        name: str,
        max_retries: int | None = None,
        wrap_with_directory: bool | None = None,
    ) -> str:
        cid = self.address_for(data)
        self.blobs[cid] = data
        self.names[cid] = name
        return cid

    def get(self, address: str) -> bytes:
        """
        Fetch a blob by CID or "ipfs://" locator.

        Raises:
            NotFoundError: If nothing was stored under the address
        """
        cid = address.removeprefix("ipfs://")
        if cid not in self.blobs:
            raise NotFoundError(f"No content stored at {address}")
        return self.blobs[cid]

    def get_json(self, address: str) -> dict[str, Any]:
        return json.loads(self.get(address))
