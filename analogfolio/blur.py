"""Blur-up placeholders: a tiny rendition, re-encoded as a base64 data URI."""

import asyncio
import base64
import io
import logging
from typing import Awaitable, Callable

import httpx
from PIL import Image, ImageFilter, UnidentifiedImageError

from .config import BLUR_WIDTH
from .errors import ExternalServiceFailure
from .media import ImageRecord, blur_source_url

log = logging.getLogger(__name__)

BLUR_RADIUS = 1


def placeholder_from_bytes(data: bytes) -> str:
    """Downscale, soften and JPEG-encode image bytes into a data URI."""
    with Image.open(io.BytesIO(data)) as img:
        img = img.convert("RGB")
        if img.width > BLUR_WIDTH:
            height = max(1, round(img.height * BLUR_WIDTH / img.width))
            img = img.resize((BLUR_WIDTH, height), Image.LANCZOS)
        img = img.filter(ImageFilter.GaussianBlur(BLUR_RADIUS))
        out = io.BytesIO()
        img.save(out, "JPEG", quality=70)
    return "data:image/jpeg;base64," + base64.b64encode(out.getvalue()).decode("ascii")


async def fetch_placeholder(http: httpx.AsyncClient, cloud_name: str, image: ImageRecord) -> str:
    url = blur_source_url(cloud_name, image)
    try:
        resp = await http.get(url, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise ExternalServiceFailure(f"Blur fetch failed for {image.public_id}: {exc}") from exc
    try:
        return placeholder_from_bytes(resp.content)
    except (UnidentifiedImageError, OSError) as exc:
        raise ExternalServiceFailure(f"Blur decode failed for {image.public_id}: {exc}") from exc


async def enrich_all(
    images: list[ImageRecord],
    make_placeholder: Callable[[ImageRecord], Awaitable[str]],
    timeout: float | None = None,
) -> list[ImageRecord]:
    """Fill in ``blur_data_url`` on every image, all requests in flight at once.

    One failure fails the batch and no image is modified. ``timeout`` bounds
    the whole batch; expiry is reported as ExternalServiceFailure.
    """
    if not images:
        return images

    tasks = [asyncio.ensure_future(make_placeholder(img)) for img in images]
    batch = asyncio.gather(*tasks)
    try:
        if timeout is None:
            results = await batch
        else:
            results = await asyncio.wait_for(batch, timeout)
    except asyncio.TimeoutError as exc:
        raise ExternalServiceFailure(f"Blur placeholders timed out after {timeout}s") from exc
    finally:
        # siblings still in flight after a failure
        for task in tasks:
            if not task.done():
                task.cancel()

    for img, data_url in zip(images, results):
        img.blur_data_url = data_url
    log.debug("Enriched %d images with blur placeholders", len(images))
    return images
