"""Page assembly: turn the cached listing into what each page renders.

This is the only layer that catches errors. A missing folder or a failing
media service degrades to an empty grid, a missing photo, or no photo pages;
nothing raw reaches the visitor.
"""

import logging
from typing import Awaitable, Callable

from .blur import enrich_all
from .cache import ListingCache
from .config import Settings
from .errors import ConfigurationMissing, ExternalServiceFailure, PhotoNotFound
from .media import ImageRecord, to_records

log = logging.getLogger(__name__)


class PageAssembler:
    def __init__(
        self,
        settings: Settings,
        cache: ListingCache,
        make_placeholder: Callable[[ImageRecord], Awaitable[str]],
    ):
        self.settings = settings
        self.cache = cache
        self.make_placeholder = make_placeholder

    async def _records(self) -> list[ImageRecord]:
        if not self.settings.folder:
            raise ConfigurationMissing("CLOUDINARY_FOLDER")
        listing = await self.cache.get_listing()
        return to_records(listing.get("resources") or [])

    async def home_images(self) -> list[ImageRecord]:
        """All images in listing order with blur placeholders, or [] on any failure."""
        try:
            images = await self._records()
            return await enrich_all(images, self.make_placeholder, self.settings.blur_timeout)
        except ConfigurationMissing as exc:
            log.warning("%s; rendering an empty portfolio", exc)
            return []
        except ExternalServiceFailure:
            log.exception("Could not assemble home page images")
            return []

    async def photo_paths(self) -> list[int]:
        """Indices that get a detail page."""
        try:
            return [img.id for img in await self._records()]
        except ConfigurationMissing as exc:
            log.warning("%s; no photo pages", exc)
            return []
        except ExternalServiceFailure:
            log.exception("Could not list photo pages")
            return []

    async def photo_page(self, photo_id) -> ImageRecord:
        """The record for one detail page, with its placeholder.

        ``photo_id`` may be the raw path segment. Raises PhotoNotFound when the
        index does not exist or the listing cannot be fetched.
        """
        try:
            index = int(photo_id)
        except (TypeError, ValueError):
            raise PhotoNotFound(photo_id) from None

        try:
            images = await self._records()
            photo = next((img for img in images if img.id == index), None)
            if photo is None:
                raise PhotoNotFound(index)
            photo.blur_data_url = await self.make_placeholder(photo)
            return photo
        except ConfigurationMissing as exc:
            log.warning("%s; photo %s not found", exc, index)
            raise PhotoNotFound(index) from exc
        except ExternalServiceFailure as exc:
            log.exception("Could not assemble photo page %s", index)
            raise PhotoNotFound(index) from exc
