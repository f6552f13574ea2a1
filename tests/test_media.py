import asyncio
import base64
import json
from dataclasses import replace

import httpx
import pytest

from analogfolio.errors import ConfigurationMissing, ExternalServiceFailure
from analogfolio.media import (
    MediaClient,
    detail_url,
    flatten_context,
    grid_url,
    to_records,
)

from conftest import make_image


def search(settings, handler):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            return await MediaClient(settings, http).search_folder()

    return asyncio.run(run())


def test_search_request_shape(settings):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"resources": [{"public_id": "portfolio/x"}], "total_count": 1})

    data = search(settings, handler)
    assert data["resources"] == [{"public_id": "portfolio/x"}]

    (request,) = requests
    assert request.method == "POST"
    assert str(request.url) == "https://api.cloudinary.com/v1_1/demo/resources/search"
    assert request.headers["authorization"] == "Basic " + base64.b64encode(b"key:secret").decode()
    assert json.loads(request.content) == {
        "expression": "folder:portfolio/*",
        "sort_by": [{"public_id": "desc"}],
        "with_field": ["tags", "context"],
        "max_results": 400,
    }


def test_search_http_error_is_wrapped(settings):
    with pytest.raises(ExternalServiceFailure) as excinfo:
        search(settings, lambda request: httpx.Response(500))
    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


def test_search_network_error_is_wrapped(settings):
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(ExternalServiceFailure):
        search(settings, handler)


@pytest.mark.parametrize("field, setting", [
    ("folder", "CLOUDINARY_FOLDER"),
    ("cloud_name", "NEXT_PUBLIC_CLOUDINARY_CLOUD_NAME"),
    ("api_secret", "CLOUDINARY_API_KEY/CLOUDINARY_API_SECRET"),
])
def test_search_requires_configuration(settings, field, setting):
    with pytest.raises(ConfigurationMissing) as excinfo:
        search(replace(settings, **{field: None}), lambda request: httpx.Response(200, json={}))
    assert excinfo.value.setting == setting


def test_to_records_numbers_in_listing_order(resources):
    records = to_records(resources)
    assert [r.id for r in records] == [0, 1, 2]
    assert [r.public_id for r in records] == ["portfolio/c", "portfolio/b", "portfolio/a"]
    assert records[0].caption == "Golden Hour Portrait"
    assert records[0].camera == "Mamiya 645"
    assert records[0].film == ""
    assert records[2].tags == [] and records[2].context == {}
    assert records[1].blur_data_url is None


def test_flatten_context():
    assert flatten_context(None) == {}
    assert flatten_context({"caption": "Street"}) == {"caption": "Street"}
    assert flatten_context({"custom": {"caption": "Street", "iso": 400}}) == {"caption": "Street", "iso": "400"}


def test_delivery_urls():
    img = make_image(3)
    assert grid_url("demo", img) == "https://res.cloudinary.com/demo/image/upload/c_scale,w_720/portfolio/img3.jpg"
    assert detail_url("demo", img) == "https://res.cloudinary.com/demo/image/upload/c_scale,w_2560/portfolio/img3.jpg"
