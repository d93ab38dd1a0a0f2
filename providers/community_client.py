"""CoinMetrics community API client with bearer auth and typed JSON decoding."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from config.settings import COMMUNITY_BASE_URL_V3
from observability.logger import get_logger
from providers.exceptions import APIError, DecodeError, TransportError
from schemas.metric_data import ErrorResponse

if TYPE_CHECKING:
    from config.settings import Settings

log = get_logger(__name__)
T = TypeVar("T", bound=BaseModel)

REQUEST_TIMEOUT_SECONDS = 60.0
JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class CommunityClient:
    """HTTP client for the CoinMetrics API. Implements MetricsAPI protocol.

    As of API v3 the community endpoints need no key, pass ``""``.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = COMMUNITY_BASE_URL_V3,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._api_key = api_key
        self._http = httpx.AsyncClient(
            timeout=REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> CommunityClient:
        return cls(
            api_key=settings.coinmetrics_api_key,
            base_url=settings.coinmetrics_base_url,
            transport=transport,
        )

    async def __aenter__(self) -> CommunityClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def send_request(self, request: httpx.Request, response_model: Type[T]) -> T:
        """Send request and decode the body into response_model.

        Raises TransportError when no response arrives, APIError on a
        status outside 200..399 and DecodeError when the body cannot be
        content-decoded or a success body does not parse.
        """
        request.headers["Content-Type"] = JSON_CONTENT_TYPE
        request.headers["Accept"] = JSON_CONTENT_TYPE
        if self._api_key != "":
            request.headers["Authorization"] = f"Bearer {self._api_key}"
        request.extensions.setdefault("timeout", self._http.timeout.as_dict())

        start = time.perf_counter()
        try:
            response = await self._http.send(request)
        except httpx.DecodingError as e:
            log.error(
                "coinmetrics.decode.failed",
                path=request.url.path,
                model=response_model.__name__,
                error=str(e),
            )
            raise DecodeError(str(e)) from e
        except httpx.TransportError as e:
            log.error(
                "coinmetrics.request.failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise TransportError(str(e)) from e
        latency_ms = round((time.perf_counter() - start) * 1000, 2)

        status = response.status_code
        if status < 200 or status >= 400:
            err = ErrorResponse.from_body(response.content)
            if err is None:
                message = f"unknown error, status code: {status}"
            else:
                message = err.message
            log.warning(
                "coinmetrics.request.failed",
                method=request.method,
                path=request.url.path,
                status=status,
                error=message,
                latency_ms=latency_ms,
            )
            raise APIError(message, status_code=status)

        try:
            parsed = response_model.model_validate_json(response.content)
        except ValidationError as e:
            log.error(
                "coinmetrics.decode.failed",
                path=request.url.path,
                model=response_model.__name__,
                error=str(e),
            )
            raise DecodeError(str(e)) from e

        log.info(
            "coinmetrics.request.success",
            method=request.method,
            path=request.url.path,
            status=status,
            latency_ms=latency_ms,
        )
        return parsed
