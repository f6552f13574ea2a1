import io

import pytest
from PIL import Image

from analogfolio.config import Settings
from analogfolio.media import ImageRecord


def make_image(i, tags=(), **context) -> ImageRecord:
    return ImageRecord(
        id=i, width=1600, height=1067, public_id=f"portfolio/img{i}", format="jpg",
        tags=list(tags), context=context,
    )


def jpeg_bytes(size=(16, 10), color=(200, 120, 40)) -> bytes:
    out = io.BytesIO()
    Image.new("RGB", size, color).save(out, "JPEG")
    return out.getvalue()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        folder="portfolio",
        cloud_name="demo",
        api_key="key",
        api_secret="secret",
        site_dir=tmp_path / "public_html",
        blur_timeout=None,
    )


@pytest.fixture
def abc():
    """Three images: A camera:X, B camera:Y + Golden Hour, C Golden Hour."""
    return [
        make_image(0, ["camera:X"]),
        make_image(1, ["camera:Y", "theme:Golden Hour"]),
        make_image(2, ["theme:Golden Hour"]),
    ]


@pytest.fixture
def resources():
    return [
        {"public_id": "portfolio/c", "format": "jpg", "width": 1600, "height": 1067,
         "tags": ["camera:Mamiya 645", "film:Portra 400", "theme:Golden Hour"],
         "context": {"custom": {"caption": "Golden Hour Portrait", "camera": "Mamiya 645"}}},
        {"public_id": "portfolio/b", "format": "png", "width": 1200, "height": 1200,
         "tags": ["camera:Yashica D", "theme:Golden Hour"]},
        {"public_id": "portfolio/a", "format": "jpg", "width": 1600, "height": 1067},
    ]
