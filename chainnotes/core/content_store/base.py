"""
Abstract base class for content stores.
Handles content-addressed uploads of note payloads.
"""

import json
from abc import ABC, abstractmethod
from typing import Any


class ContentStore(ABC):
    """
    Abstract base for content-addressed storage.

    Responsibilities:
    - Upload a named blob and return its content address (CID)
    - Bounded retry of uploads
    """

    @abstractmethod
    async def put(
        self,
        data: bytes,
        name: str,
        max_retries: int | None = None,
        wrap_with_directory: bool | None = None,
    ) -> str:
        """
        Upload a blob.

        Args:
            data: Raw bytes to store
            name: File name recorded with the upload
            max_retries: Upload attempts before giving up (provider default if None)
            wrap_with_directory: Whether to wrap the file in a directory

        Returns:
            Content address (CID) of the upload

        Raises:
            ContentStoreError: If every attempt fails
        """
        pass

    async def put_json(self, payload: dict[str, Any], name: str, **kwargs) -> str:
        """
        Serialize a payload to JSON and upload it as "{name}.json".

        Returns:
            "ipfs://<cid>" locator of the upload
        """
        data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        cid = await self.put(data, f"{name}.json", **kwargs)
        return f"ipfs://{cid}"

    async def close(self):
        """Close any open connections."""
        return None
