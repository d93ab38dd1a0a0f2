"""Schemas for the CoinMetrics v3 metric-data endpoint.

Sample response::

    {
        "metricData": {
            "metrics": ["CapRealUSD"],
            "series": [
                {
                    "time": "2021-04-22T00:00:00.000Z",
                    "values": ["357839722701.057414591381506310739636"]
                }
            ]
        }
    }

Values are arbitrary-precision decimal text and stay ``str`` on the models.
"""

from __future__ import annotations

import json
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class MetricQueryOptions(BaseModel):
    """Query parameters for ``get_metric_data``. Empty string means "omit"."""

    metrics: str
    start: str = ""
    end: str = ""

    def to_params(self) -> dict[str, str]:
        params = {"metrics": self.metrics}
        if self.start != "":
            params["start"] = self.start
        if self.end != "":
            params["end"] = self.end
        return params


class DataPoint(BaseModel):
    """One timestamp with one value per requested metric."""

    time: str = ""
    values: list[str] = Field(default_factory=list)

    def decimal_values(self) -> list[Decimal]:
        return [Decimal(v) for v in self.values]


class DataSeries(BaseModel):
    metrics: list[str] = Field(default_factory=list)
    series: list[DataPoint] = Field(default_factory=list)


class MetricData(BaseModel):
    """Success envelope returned by ``assets/btc/metricdata``."""

    model_config = ConfigDict(populate_by_name=True)

    data: DataSeries = Field(default_factory=DataSeries, alias="metricData")


class ErrorResponse(BaseModel):
    """Error envelope sent with a failure status."""

    code: int = 0
    message: str = ""

    @classmethod
    def from_body(cls, body: bytes) -> ErrorResponse | None:
        """Decode the first JSON value in body, or None if it is not an envelope.

        Trailing bytes after that value are ignored. ``null`` and null fields
        leave the defaults in place. Numbers must be integral for ``code``.
        """
        try:
            value, _ = json.JSONDecoder().raw_decode(body.decode("utf-8").lstrip())
        except (UnicodeDecodeError, json.JSONDecodeError):
            return None

        if value is None:
            return cls()
        if not isinstance(value, dict):
            return None

        fields = {k: v for k, v in value.items() if v is not None}
        try:
            return cls.model_validate(fields, strict=True)
        except ValidationError:
            return None
