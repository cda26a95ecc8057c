"""
Shared HTTP transport for the DigitalOcean API.

Every resource service builds its requests with Client.new_request and sends
them with Client.do. The client owns a single httpx.AsyncClient, so one
instance can be shared by any number of concurrent tasks.
"""

import json
from typing import Any, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from doclient.core.config import get_file_config, get_settings
from doclient.core.errors import (
    APIError,
    DecodeError,
    EncodeError,
    RequestTimeoutError,
    TransportError,
)
from doclient.core.response import Response
from doclient.services.one_click_service import OneClickService
from doclient.services.registry_service import RegistryService

MEDIA_TYPE_JSON = "application/json"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ErrorBody(BaseModel):
    """Error payload sent by the API with non-2xx responses."""

    id: str | None = None
    message: str | None = None
    request_id: str | None = None


class Client:
    """
    DigitalOcean API client.

    Settings are taken from the constructor arguments when given, otherwise
    from the environment (.env), otherwise from the doctl config file.

    Usage:
        async with Client(token="...") as client:
            registry, resp = await client.registry.get()
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()

        self.token = token or settings.access_token or get_file_config().access_token
        self.base_url = base_url or self._default_base_url()
        self.user_agent = user_agent or settings.user_agent
        self.timeout = timeout if timeout is not None else settings.request_timeout

        headers = {
            "Accept": MEDIA_TYPE_JSON,
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout,
            transport=transport,
        )

        # Resource services
        self.registry = RegistryService(self)
        self.one_click = OneClickService(self)

        logger.debug(f"Initialized client: base_url={self.base_url}, timeout={self.timeout}s")

    @staticmethod
    def _default_base_url() -> str:
        settings = get_settings()
        # An explicit environment value wins over the config file.
        if "api_url" in settings.model_fields_set:
            return settings.api_url
        return get_file_config().api_url or settings.api_url

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the connection pool."""
        if not self._http.is_closed:
            await self._http.aclose()
            logger.debug("Closed HTTP client")

    def new_request(
        self,
        method: str,
        path: str,
        body: BaseModel | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Request:
        """
        Build a request for an API path.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. "/v2/registry"
            body: Pydantic model or dict sent as JSON; None fields of models are dropped
            params: Query string parameters

        Raises:
            EncodeError: if the body cannot be serialized
        """
        headers = {}
        content = None
        if body is not None:
            try:
                if isinstance(body, BaseModel):
                    content = body.model_dump_json(by_alias=True, exclude_none=True)
                else:
                    content = json.dumps(body)
            except (TypeError, ValueError) as e:
                raise EncodeError(f"Cannot encode {method} {path} body: {e}") from e
            headers["Content-Type"] = MEDIA_TYPE_JSON

        return self._http.build_request(
            method,
            path,
            content=content,
            params=params,
            headers=headers,
        )

    async def do(
        self,
        request: httpx.Request,
        model: type[ModelT] | None = None,
    ) -> tuple[ModelT | None, Response]:
        """
        Send a request and decode its JSON body into model.

        Cancelling the awaiting task aborts the call; asyncio.CancelledError
        propagates untouched.

        Returns:
            (decoded model or None, Response). The decoded value is None when
            no model is given or the body is empty.

        Raises:
            RequestTimeoutError: the configured timeout expired
            TransportError: the connection failed
            APIError: the API answered with a non-2xx status
            DecodeError: the body does not match model
        """
        try:
            http_response = await self._http.send(request)
        except httpx.TimeoutException as e:
            logger.error(f"{request.method} {request.url} timed out after {self.timeout}s")
            raise RequestTimeoutError(
                self.timeout,
                {"method": request.method, "url": str(request.url)},
            ) from e
        except httpx.RequestError as e:
            logger.error(f"{request.method} {request.url} failed: {e}")
            raise TransportError(
                f"{request.method} {request.url}: {e}",
                {"method": request.method, "url": str(request.url), "error_type": type(e).__name__},
            ) from e

        response = Response.from_http(http_response)
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        check_response(response)

        if model is None or not response.content:
            return None, response

        try:
            return model.model_validate_json(response.content), response
        except ValidationError as e:
            logger.error(f"{request.method} {request.url}: cannot decode {model.__name__}: {e}")
            raise DecodeError(
                f"Cannot decode {model.__name__} from {request.method} {request.url}",
                response,
                {"errors": e.errors(include_url=False)},
            ) from e


def check_response(response: Response) -> None:
    """Raise APIError unless the response status is 2xx."""
    if response.is_success:
        return

    body = ErrorBody()
    if response.content:
        try:
            body = ErrorBody.model_validate_json(response.content)
        except ValidationError:
            # Not the documented error shape; keep the raw text as the message.
            body = ErrorBody(message=response.http_response.text[:500])

    logger.warning(
        f"API error {response.status_code}: id={body.id} "
        f"request_id={body.request_id} message={body.message}"
    )
    raise APIError(
        response,
        message=body.message,
        error_id=body.id,
        request_id=body.request_id,
    )
