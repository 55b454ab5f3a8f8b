"""
Asynchronous image loading over HTTP.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Optional, Set, Tuple

import aiohttp

from ..config import Settings
from ..errors import ErrorCode, ImageLoadError


logger = logging.getLogger(__name__)

ImageCallback = Callable[[Optional[ImageLoadError], Optional["LoadedImage"]], None]

READ_CHUNK_SIZE = 64 * 1024

_IMAGE_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", "png"),
    (b"\xff\xd8\xff", "jpeg"),
    (b"GIF87a", "gif"),
    (b"GIF89a", "gif"),
    (b"BM", "bmp"),
)

# Keeps fire-and-forget tasks alive until they finish
_pending_tasks: Set[asyncio.Task] = set()


@dataclass(frozen=True)
class LoadedImage:
    """Raw image bytes fetched from ``url`` with their detected format."""
    url: str
    data: bytes
    format: str
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)


def detect_image_format(data: bytes) -> Optional[str]:
    """Detect the image format from the file signature, or None."""
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "webp"
    for signature, image_format in _IMAGE_SIGNATURES:
        if data.startswith(signature):
            return image_format
    return None


def _resolve_limits(timeout: Optional[timedelta],
                    max_bytes: Optional[int]) -> Tuple[timedelta, int]:
    """Fill unset limits from the environment settings and check them."""
    try:
        if timeout is None or max_bytes is None:
            settings = Settings.from_env()
            settings.validate()
            if timeout is None:
                timeout = settings.image_timeout
            if max_bytes is None:
                max_bytes = settings.image_max_bytes
        if timeout.total_seconds() <= 0:
            raise ValueError("image timeout must be positive")
        if max_bytes <= 0:
            raise ValueError("image size limit must be positive")
    except ValueError as e:
        raise ImageLoadError(ErrorCode.INVALID_CONFIG, f"Invalid image settings: {e}",
                             cause=e) from e
    return timeout, max_bytes


async def _read_body(response: aiohttp.ClientResponse, url: str, max_bytes: int) -> bytes:
    """Read the response body, stopping as soon as it grows past ``max_bytes``."""
    data = bytearray()
    async for chunk in response.content.iter_chunked(READ_CHUNK_SIZE):
        data.extend(chunk)
        if len(data) > max_bytes:
            raise ImageLoadError(
                ErrorCode.PAYLOAD_TOO_LARGE,
                f"Image exceeds the {max_bytes} byte limit",
                url=url,
            )
    return bytes(data)


async def load_image(url: str,
                     session: Optional[aiohttp.ClientSession] = None,
                     timeout: Optional[timedelta] = None,
                     max_bytes: Optional[int] = None) -> Optional[LoadedImage]:
    """
    Fetch ``url`` and decode the response body as an image.

    Returns:
        The loaded image, or None when the body is not a recognised image.

    Raises:
        ImageLoadError: on network failures, timeouts, HTTP error statuses,
            bodies larger than ``max_bytes`` and invalid limits.
    """
    timeout, max_bytes = _resolve_limits(timeout, max_bytes)

    client_timeout = aiohttp.ClientTimeout(total=timeout.total_seconds())
    owns_session = session is None
    if owns_session:
        session = aiohttp.ClientSession(timeout=client_timeout)

    try:
        logger.info(f"Loading image from {url}")
        async with session.get(url, timeout=client_timeout) as response:
            if response.status >= 400:
                raise ImageLoadError(
                    ErrorCode.HTTP_ERROR,
                    f"Image request failed with status {response.status}",
                    url=url,
                    status=response.status,
                )

            if response.content_length is not None and response.content_length > max_bytes:
                raise ImageLoadError(
                    ErrorCode.PAYLOAD_TOO_LARGE,
                    f"Image is {response.content_length} bytes, limit is {max_bytes}",
                    url=url,
                )

            data = await _read_body(response, url, max_bytes)
            content_type = response.headers.get("Content-Type")
    except asyncio.TimeoutError as e:
        raise ImageLoadError(ErrorCode.TIMEOUT, f"Timed out loading image from {url}",
                             url=url, cause=e) from e
    except aiohttp.ClientError as e:
        raise ImageLoadError(ErrorCode.NETWORK_ERROR, f"Failed to load image from {url}: {e}",
                             url=url, cause=e) from e
    finally:
        if owns_session:
            await session.close()

    image_format = detect_image_format(data)
    if image_format is None:
        logger.warning(f"Response from {url} is not a recognised image ({content_type})")
        return None

    logger.info(f"Loaded {image_format} image from {url}: {len(data)} bytes")
    return LoadedImage(url=url, data=data, format=image_format, content_type=content_type)


def load_from_url_async(url: str, callback: ImageCallback,
                        callback_loop: Optional[asyncio.AbstractEventLoop] = None,
                        session: Optional[aiohttp.ClientSession] = None) -> asyncio.Task:
    """
    Start loading an image in the background and report through ``callback``.

    Must be called from a running event loop. The callback is invoked as
    ``callback(error, image)`` on ``callback_loop`` (the UI loop; defaults to
    the current loop). On success ``error`` is None; when the body did not
    decode as an image both arguments are None. No retry is attempted.
    """
    loop = asyncio.get_running_loop()
    target_loop = callback_loop or loop

    async def _fetch() -> None:
        try:
            image = await load_image(url, session=session)
        except ImageLoadError as e:
            logger.error(f"Image load failed: {e}")
            target_loop.call_soon_threadsafe(callback, e, None)
            return
        target_loop.call_soon_threadsafe(callback, None, image)

    task = loop.create_task(_fetch())
    _pending_tasks.add(task)
    task.add_done_callback(_pending_tasks.discard)
    return task
