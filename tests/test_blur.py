import asyncio
import base64
import io

import httpx
import pytest
from PIL import Image

from analogfolio.blur import enrich_all, fetch_placeholder, placeholder_from_bytes
from analogfolio.errors import ExternalServiceFailure

from conftest import jpeg_bytes, make_image


def decode(data_url):
    assert data_url.startswith("data:image/jpeg;base64,")
    raw = base64.b64decode(data_url.split(",", 1)[1])
    return Image.open(io.BytesIO(raw))


def test_placeholder_is_tiny_jpeg():
    img = decode(placeholder_from_bytes(jpeg_bytes(size=(64, 32))))
    assert img.format == "JPEG"
    assert img.size == (8, 4)


def test_placeholder_from_png_with_alpha():
    out = io.BytesIO()
    Image.new("RGBA", (8, 8), (0, 0, 0, 0)).save(out, "PNG")
    assert decode(placeholder_from_bytes(out.getvalue())).mode == "RGB"


def test_fetch_placeholder_requests_tiny_rendition():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, content=jpeg_bytes())

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            return await fetch_placeholder(http, "demo", make_image(0))

    assert asyncio.run(run()).startswith("data:image/jpeg;base64,")
    assert seen == ["https://res.cloudinary.com/demo/image/upload/f_jpg,w_8,q_70/portfolio/img0.jpg"]


@pytest.mark.parametrize("response", [
    httpx.Response(404),
    httpx.Response(200, content=b"not an image"),
])
def test_fetch_placeholder_failures(response):
    async def run():
        transport = httpx.MockTransport(lambda request: response)
        async with httpx.AsyncClient(transport=transport) as http:
            await fetch_placeholder(http, "demo", make_image(0))

    with pytest.raises(ExternalServiceFailure):
        asyncio.run(run())


def test_enrich_all_matches_results_by_index():
    images = [make_image(i) for i in range(3)]

    async def placeholder(img):
        # finish in reverse order
        await asyncio.sleep(0.01 * (3 - img.id))
        return f"data:{img.id}"

    result = asyncio.run(enrich_all(images, placeholder))
    assert result is images
    assert [img.blur_data_url for img in images] == ["data:0", "data:1", "data:2"]


def test_enrich_all_one_failure_fails_batch():
    images = [make_image(i) for i in range(3)]

    async def placeholder(img):
        if img.id == 1:
            raise ExternalServiceFailure("boom")
        return "data:ok"

    with pytest.raises(ExternalServiceFailure):
        asyncio.run(enrich_all(images, placeholder))
    assert all(img.blur_data_url is None for img in images)


def test_enrich_all_timeout():
    async def slow(img):
        await asyncio.sleep(1)
        return "data:late"

    with pytest.raises(ExternalServiceFailure, match="timed out"):
        asyncio.run(enrich_all([make_image(0)], slow, timeout=0.01))


def test_enrich_all_empty():
    async def never(img):
        raise AssertionError("not called")

    assert asyncio.run(enrich_all([], never)) == []


def test_enrich_all_failure_stops_siblings():
    images = [make_image(i) for i in range(3)]
    finished = []

    async def placeholder(img):
        if img.id == 0:
            raise ExternalServiceFailure("boom")
        await asyncio.sleep(0.05)
        finished.append(img.id)
        return "data:ok"

    async def run():
        with pytest.raises(ExternalServiceFailure):
            await enrich_all(images, placeholder)
        await asyncio.sleep(0.2)

    asyncio.run(run())
    assert finished == []
