"""
Tests for dataset fetching and parsing.

The network is replaced with httpx.MockTransport, so no request leaves
the process.
"""

import asyncio
import json

import httpx
import pytest

from app.engine.data_loader import DatasetLoadError, fetch_dataset, parse_dataset

URL = "https://example.test/global-temperature.json"

SAMPLE_PAYLOAD = {
    "baseTemperature": 8.66,
    "monthlyVariance": [
        {"year": 1753, "month": 1, "variance": -1.366},
        {"year": 1753, "month": 2, "variance": -2.223},
        {"year": 1900, "month": 7, "variance": 0.57},
    ],
}


def _fetch(handler):
    async def run():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as client:
            return await fetch_dataset(URL, client=client)
    return asyncio.run(run())


class TestParseDataset:
    def test_valid_payload(self):
        ds = parse_dataset(SAMPLE_PAYLOAD)
        assert ds.base_temperature == 8.66
        assert len(ds.monthly_variance) == 3
        assert ds.monthly_variance[2].year == 1900
        assert ds.monthly_variance[2].absolute_temp(ds.base_temperature) == pytest.approx(9.23)

    def test_year_span(self):
        assert parse_dataset(SAMPLE_PAYLOAD).year_span == (1753, 1900)

    def test_missing_base_temperature(self):
        with pytest.raises(DatasetLoadError):
            parse_dataset({"monthlyVariance": SAMPLE_PAYLOAD["monthlyVariance"]})

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_out_of_range(self, month):
        payload = {
            "baseTemperature": 8.66,
            "monthlyVariance": [{"year": 1900, "month": month, "variance": 0.1}],
        }
        with pytest.raises(DatasetLoadError):
            parse_dataset(payload)

    def test_empty_records(self):
        with pytest.raises(DatasetLoadError):
            parse_dataset({"baseTemperature": 8.66, "monthlyVariance": []})

    def test_dataset_is_immutable(self):
        ds = parse_dataset(SAMPLE_PAYLOAD)
        with pytest.raises(Exception):
            ds.base_temperature = 0.0


class TestFetchDataset:
    def test_success(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=SAMPLE_PAYLOAD)

        ds = _fetch(handler)
        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert str(requests[0].url) == URL
        assert len(ds.monthly_variance) == 3

    def test_http_error_status(self):
        def handler(request):
            return httpx.Response(500, text="boom")

        with pytest.raises(DatasetLoadError, match="Could not fetch"):
            _fetch(handler)

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DatasetLoadError):
            _fetch(handler)

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, text="<html>not json</html>")

        with pytest.raises(DatasetLoadError, match="not valid JSON"):
            _fetch(handler)

    def test_non_object_json(self):
        def handler(request):
            return httpx.Response(200, text=json.dumps([1, 2, 3]))

        with pytest.raises(DatasetLoadError, match="JSON object"):
            _fetch(handler)

    def test_malformed_shape(self):
        def handler(request):
            return httpx.Response(200, json={"baseTemperature": "warm"})

        with pytest.raises(DatasetLoadError, match="Malformed"):
            _fetch(handler)
