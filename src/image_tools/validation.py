"""Reachability check for resolved image URLs.

validate_image_url() HEAD-requests the URL and, optionally, sniffs the first
bytes with filetype to confirm the body really is an image.
"""

import aiohttp
import filetype

from src.utils.errors import safe_execute_async


# Enough bytes for filetype to recognise every supported format
SNIFF_BYTES = 261

ALLOWED_IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "webp", "gif")


def is_image_bytes(head: bytes) -> bool:
    """True if the leading bytes belong to a supported image format."""
    kind = filetype.guess(head)
    return kind is not None and kind.extension in ALLOWED_IMAGE_EXTENSIONS


async def _check_url(url: str, timeout: float, sniff: bool) -> bool:
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with aiohttp.ClientSession() as session:
        async with session.head(url, timeout=client_timeout, allow_redirects=True) as response:
            if response.status != 200:
                return False
        if not sniff:
            return True
        headers = {"Range": f"bytes=0-{SNIFF_BYTES - 1}"}
        async with session.get(url, headers=headers, timeout=client_timeout) as response:
            if response.status not in (200, 206):
                return False
            head = await response.content.read(SNIFF_BYTES)
            return is_image_bytes(head)


async def validate_image_url(url: str, timeout: float = 3.0, sniff: bool = False) -> bool:
    """Check that an image URL is reachable.

    Args:
        url: Image URL to check.
        timeout: Per-request timeout in seconds.
        sniff: Also download the first bytes and verify the image format.

    Returns:
        True if the URL answered 200 (and looked like an image when sniffing).
        False on any failure; never raises.
    """
    if not url or not url.startswith(("http://", "https://")):
        return False
    return await safe_execute_async(
        _check_url(url, timeout, sniff),
        f"Validate image URL {url}",
        log_level="debug",
        default_return=False,
    )
