"""Metrics API client protocol, structural subtyping with no ABC."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Type, TypeVar, runtime_checkable

if TYPE_CHECKING:
    import httpx

T = TypeVar("T")


@runtime_checkable
class MetricsAPI(Protocol):
    """Any class with a base URL and send_request() can serve metric data."""

    base_url: str

    async def send_request(self, request: httpx.Request, response_model: Type[T]) -> T:
        """Execute request, parse a success body into response_model."""
        ...
