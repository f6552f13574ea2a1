"""Cloudinary search client and the ImageRecord shape built from its results."""

import logging
from dataclasses import dataclass, field

import httpx

from .config import BLUR_WIDTH, DETAIL_WIDTH, GRID_WIDTH, MAX_RESULTS, Settings
from .errors import ConfigurationMissing, ExternalServiceFailure

log = logging.getLogger(__name__)

API_BASE = "https://api.cloudinary.com/v1_1"
DELIVERY_BASE = "https://res.cloudinary.com"


@dataclass
class ImageRecord:
    id: int
    width: int
    height: int
    public_id: str
    format: str
    tags: list[str] = field(default_factory=list)
    context: dict[str, str] = field(default_factory=dict)
    blur_data_url: str | None = None

    @property
    def caption(self) -> str:
        return self.context.get("caption", "")

    @property
    def camera(self) -> str:
        return self.context.get("camera", "")

    @property
    def film(self) -> str:
        return self.context.get("film", "")

    @property
    def settings(self) -> str:
        return self.context.get("settings", "")


def flatten_context(context) -> dict[str, str]:
    """Cloudinary returns context as {"custom": {...}} from search; uploads echo it flat."""
    if not context:
        return {}
    if isinstance(context.get("custom"), dict):
        context = context["custom"]
    return {str(k): str(v) for k, v in context.items()}


def to_records(resources: list[dict]) -> list[ImageRecord]:
    """Number raw search resources 0..n-1 in listing order."""
    return [
        ImageRecord(
            id=i,
            width=int(r.get("width") or 0),
            height=int(r.get("height") or 0),
            public_id=r["public_id"],
            format=r.get("format", "jpg"),
            tags=list(r.get("tags") or []),
            context=flatten_context(r.get("context")),
        )
        for i, r in enumerate(resources)
    ]


def delivery_url(cloud_name: str, public_id: str, fmt: str, transform: str) -> str:
    return f"{DELIVERY_BASE}/{cloud_name}/image/upload/{transform}/{public_id}.{fmt}"


def grid_url(cloud_name: str, image: ImageRecord) -> str:
    return delivery_url(cloud_name, image.public_id, image.format, f"c_scale,w_{GRID_WIDTH}")


def detail_url(cloud_name: str, image: ImageRecord) -> str:
    return delivery_url(cloud_name, image.public_id, image.format, f"c_scale,w_{DETAIL_WIDTH}")


def blur_source_url(cloud_name: str, image: ImageRecord) -> str:
    return delivery_url(cloud_name, image.public_id, image.format, f"f_jpg,w_{BLUR_WIDTH},q_70")


class MediaClient:
    """Thin wrapper over the Cloudinary Search API.

    Only the folder listing query is implemented; uploads and admin calls are
    handled elsewhere.
    """

    def __init__(self, settings: Settings, http: httpx.AsyncClient):
        self.settings = settings
        self.http = http

    def search_body(self, with_fields=("tags", "context")) -> dict:
        if not self.settings.folder:
            raise ConfigurationMissing("CLOUDINARY_FOLDER")
        return {
            "expression": f"folder:{self.settings.folder}/*",
            "sort_by": [{"public_id": "desc"}],
            "with_field": list(with_fields),
            "max_results": MAX_RESULTS,
        }

    async def search_folder(self, with_fields=("tags", "context")) -> dict:
        """Run the folder listing query and return the decoded response."""
        body = self.search_body(with_fields)
        s = self.settings
        if not s.cloud_name:
            raise ConfigurationMissing("NEXT_PUBLIC_CLOUDINARY_CLOUD_NAME")
        if not (s.api_key and s.api_secret):
            raise ConfigurationMissing("CLOUDINARY_API_KEY/CLOUDINARY_API_SECRET")

        url = f"{API_BASE}/{s.cloud_name}/resources/search"
        log.debug("Searching %s with %s", url, body["expression"])
        try:
            resp = await self.http.post(url, json=body, auth=(s.api_key, s.api_secret))
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise ExternalServiceFailure(f"Cloudinary search failed: {exc}") from exc

        log.info("Cloudinary returned %d resources for %s", len(data.get("resources", [])), s.folder)
        return data
