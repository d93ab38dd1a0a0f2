"""Metric-data endpoint: build the GET request and decode into MetricData."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

import httpx

from observability.logger import get_logger
from schemas.metric_data import MetricData, MetricQueryOptions

if TYPE_CHECKING:
    from protocols.metrics_api import MetricsAPI

log = get_logger(__name__)

METRIC_PATH_V3 = "assets/btc/metricdata"


def build_metric_data_url(base_url: str, options: MetricQueryOptions) -> httpx.URL:
    """Append the metric-data path to base_url and encode the query.

    Keys are sorted, ``start``/``end`` are left out when empty.
    """
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        log.error("metric_data.url.malformed", base_url=base_url, error=str(e))
        raise

    query = urlencode(sorted(options.to_params().items()))
    return url.copy_with(path=url.path + METRIC_PATH_V3, query=query.encode("ascii"))


async def get_metric_data(api: MetricsAPI, options: MetricQueryOptions) -> MetricData:
    """Fetch one metric's time series for BTC.

    ``api`` is usually a ``CommunityClient("")``. Cancel the calling task to
    abort the request; errors from ``api.send_request`` propagate unchanged.
    """
    url = build_metric_data_url(api.base_url, options)
    request = httpx.Request("GET", url)
    return await api.send_request(request, MetricData)
