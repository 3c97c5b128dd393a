"""Librato metrics submission."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..kpi.metrics import Gauge
from .client import send

log = logging.getLogger(__name__)


class LibratoClient:
    """Posts gauge batches to the Librato metrics API."""

    METRICS_URL = "https://metrics-api.librato.com/v1/metrics"

    def __init__(self, account: str, token: str):
        self.account = account
        self.token = token
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=30.0, auth=(self.account, self.token))
        return self._client

    def post_metrics(self, gauges: list[Gauge]) -> None:
        """Submit all gauges in a single request. No retry."""
        if not gauges:
            return
        payload = {"gauges": [g.to_dict() for g in gauges]}
        log.debug("Posting %d gauges to Librato", len(gauges))
        send(self.client, "POST", self.METRICS_URL, json=payload)

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "LibratoClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
