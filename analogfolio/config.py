"""Settings read from the environment, plus the fixed site constants."""

import os
from dataclasses import dataclass
from pathlib import Path

# ---------------------------------------------------------------------------
# Fixed values
# ---------------------------------------------------------------------------

MAX_RESULTS = 400
FACET_PREFIXES = ("camera:", "film:", "theme:")

GRID_WIDTH = 720       # grid cells, c_scale
DETAIL_WIDTH = 2560    # detail page and og:image
BLUR_WIDTH = 8         # tiny rendition fetched for the placeholder

DEFAULT_SITE_DIR = "public_html"
DEFAULT_BLUR_TIMEOUT = 60.0

# Site copy
PHOTOGRAPHER = "Stephen Adei"
SITE_TITLE = f"{PHOTOGRAPHER} - Analog Photography Portfolio"
SITE_DESCRIPTION = (
    "Professional analog photography services. Book your session today for "
    "timeless, artistic portraits and events."
)
CONTACT_EMAIL = "stephen@stephenadei.nl"
CONTACT_PHONE = "+31 6 1234 5678"
BOOKING_SERVICES = [
    ("portrait", "Portretsessie"),
    ("event", "Eventfotografie"),
    ("artistic", "Artistiek project"),
]


@dataclass(frozen=True)
class Settings:
    folder: str | None
    cloud_name: str | None
    api_key: str | None
    api_secret: str | None
    site_dir: Path
    blur_timeout: float | None
    log_level: str = "INFO"


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings(environ=None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``).

    Missing Cloudinary values are kept as None; callers decide whether that
    is fatal. A blur timeout of 0 disables the timeout.
    """
    env = os.environ if environ is None else environ

    cloud_name = _blank_to_none(env.get("NEXT_PUBLIC_CLOUDINARY_CLOUD_NAME")) or _blank_to_none(
        env.get("CLOUDINARY_CLOUD_NAME")
    )

    raw_timeout = _blank_to_none(env.get("ANALOGFOLIO_BLUR_TIMEOUT"))
    try:
        blur_timeout = float(raw_timeout) if raw_timeout else DEFAULT_BLUR_TIMEOUT
    except ValueError as exc:
        raise ValueError(f"ANALOGFOLIO_BLUR_TIMEOUT must be a number, got {raw_timeout!r}") from exc
    if blur_timeout <= 0:
        blur_timeout = None

    return Settings(
        folder=_blank_to_none(env.get("CLOUDINARY_FOLDER")),
        cloud_name=cloud_name,
        api_key=_blank_to_none(env.get("CLOUDINARY_API_KEY")),
        api_secret=_blank_to_none(env.get("CLOUDINARY_API_SECRET")),
        site_dir=Path(env.get("ANALOGFOLIO_SITE_DIR") or DEFAULT_SITE_DIR),
        blur_timeout=blur_timeout,
        log_level=_blank_to_none(env.get("ANALOGFOLIO_LOG_LEVEL")) or "INFO",
    )
