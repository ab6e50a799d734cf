"""
Content store backed by the web3.storage HTTP upload API.
"""

import asyncio

import httpx

from chainnotes.core.content_store.base import ContentStore
from chainnotes.utils.exceptions import ConfigurationError, ContentStoreError
from chainnotes.utils.logger import get_logger

logger = get_logger(__name__)


class Web3StorageContentStore(ContentStore):
    """
    Upload blobs through the web3.storage "/upload" endpoint.

    A raw request body is stored as a single file; a multipart body is
    wrapped in a directory named after the upload.
    """

    def __init__(
        self,
        api_token: str,
        endpoint: str = "https://api.web3.storage",
        max_retries: int = 3,
        retry_delay: float = 0.5,
        wrap_with_directory: bool = False,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize web3.storage content store.

        Args:
            api_token: Bearer token for the upload API
            endpoint: API base URL
            max_retries: Default upload attempts
            retry_delay: Base delay between attempts (doubles each retry)
            wrap_with_directory: Default directory wrapping
            timeout: Request timeout in seconds
            client: Optional preconfigured HTTP client
        """
        if not api_token:
            raise ConfigurationError("web3.storage API token is required")

        self.endpoint = endpoint.rstrip("/")
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.wrap_with_directory = wrap_with_directory

        self.client = client or httpx.AsyncClient(timeout=timeout)
        self._headers = {"Authorization": f"Bearer {api_token}"}

    async def _upload(self, data: bytes, name: str, wrap_with_directory: bool) -> str:
        url = f"{self.endpoint}/upload"
        headers = {**self._headers, "X-Name": name}

        if wrap_with_directory:
            response = await self.client.post(
                url,
                headers=headers,
                files={"file": (name, data, "application/json")},
            )
        else:
            response = await self.client.post(
                url,
                headers={**headers, "Content-Type": "application/octet-stream"},
                content=data,
            )

        response.raise_for_status()
        cid = response.json().get("cid")
        if not cid:
            raise ContentStoreError("Upload response has no cid", context={"name": name})
        return cid

    async def put(
        self,
        data: bytes,
        name: str,
        max_retries: int | None = None,
        wrap_with_directory: bool | None = None,
    ) -> str:
        attempts = max(1, max_retries if max_retries is not None else self.max_retries)
        wrap = self.wrap_with_directory if wrap_with_directory is None else wrap_with_directory

        last_error = None
        for attempt in range(attempts):
            try:
                cid = await self._upload(data, name, wrap)
                logger.debug(f"Uploaded {name} ({len(data)} bytes) as {cid}")
                return cid
            except (httpx.HTTPError, ContentStoreError, ValueError) as e:
                last_error = e
                if attempt < attempts - 1:
                    delay = self.retry_delay * (2**attempt)
                    logger.warning(
                        f"Upload of {name} failed (attempt {attempt + 1}/{attempts}): {e}. "
                        f"Retrying in {delay}s...",
                        extra={"name": name, "attempt": attempt + 1, "error_type": type(e).__name__},
                    )
                    await asyncio.sleep(delay)

        logger.error(
            f"Upload of {name} failed after {attempts} attempts",
            extra={"name": name, "error": str(last_error)},
        )
        raise ContentStoreError(
            f"Upload of {name} failed after {attempts} attempts: {last_error}",
            context={"name": name, "attempts": attempts},
        ) from last_error

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()
