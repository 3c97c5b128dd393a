"""Unit tests for LibratoClient."""

import base64
import json

import pytest

from freckle_tools.api.librato import LibratoClient
from freckle_tools.exceptions import APIResponseError
from freckle_tools.kpi.metrics import Gauge


class TestPostMetrics:
    """Tests for LibratoClient.post_metrics()."""

    def test_posts_gauges_with_basic_auth(self, httpx_mock):
        httpx_mock.add_response(method="POST", url=LibratoClient.METRICS_URL, status_code=200, json={})

        with LibratoClient("ops@example.com", "secret") as librato:
            librato.post_metrics([Gauge("FreckleAPI.projects.BillableMinutes", "Alpha", 150.0)])

        request = httpx_mock.get_request()
        expected = base64.b64encode(b"ops@example.com:secret").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert json.loads(request.content) == {
            "gauges": [{"name": "FreckleAPI.projects.BillableMinutes", "source": "Alpha", "value": 150.0}]
        }

    def test_empty_batch_sends_nothing(self, httpx_mock):
        with LibratoClient("ops@example.com", "secret") as librato:
            librato.post_metrics([])

        assert httpx_mock.get_requests() == []

    def test_error_status_raises(self, httpx_mock):
        httpx_mock.add_response(method="POST", url=LibratoClient.METRICS_URL, status_code=400, text="bad gauge")

        with LibratoClient("ops@example.com", "secret") as librato:
            with pytest.raises(APIResponseError):
                librato.post_metrics([Gauge("x", "y", 1.0)])
