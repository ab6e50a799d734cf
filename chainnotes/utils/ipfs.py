"""
Rewrite content-store locators into gateway URLs.

Handles "ipfs://<cid>/path" URIs and "/ipfs/<cid>/path" paths hosted on any
gateway. Anything else is returned unchanged.
"""

import re

DEFAULT_GATEWAY = "https://ipfs.io/ipfs/"

_IPFS_SCHEME = re.compile(r"^ipfs://(?:ipfs/)?(?P<path>.+)$", re.IGNORECASE)
_IPFS_PATH = re.compile(r"^https?://[^/]+/ipfs/(?P<path>.+)$", re.IGNORECASE)


def replace_ipfs(url: str, gateway: str = DEFAULT_GATEWAY) -> str:
    """
    Rewrite an IPFS locator to a dereferenceable gateway URL.

    Args:
        url: Locator such as "ipfs://bafy.../a.png"
        gateway: Gateway prefix ending with "/ipfs/"

    Returns:
        Gateway URL, or the input unchanged if it is not an IPFS locator
    """
    if not url:
        return url

    if not gateway.endswith("/"):
        gateway = f"{gateway}/"

    match = _IPFS_SCHEME.match(url) or _IPFS_PATH.match(url)
    if not match:
        return url
    return f"{gateway}{match.group('path')}"
