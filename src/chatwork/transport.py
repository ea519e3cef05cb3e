"""
Request Pipeline for the ChatWork API

This module builds outbound requests, dispatches them through the
configured ``httpx.AsyncClient`` and turns the responses into typed values
or structured errors.

Architecture:
    - Transport.new_request / new_form_request build an ``httpx.Request``
      with a JSON or form-encoded body and the standard headers
    - Transport.do sends it, classifies the status with check_response and
      decodes the body with process_response_body
    - The HTTP response is closed on every exit path

Decoding shapes:
    - None: the body is drained and discarded
    - an object with a ``write`` method: the body is streamed into it
    - a BaseResponse subclass, or ``List[...]`` of one: the body is decoded
      from JSON into that schema
"""

import inspect
import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple, get_args, get_origin

import httpx

from .config import TOKEN_HEADER, ClientConfig
from .errors import APIError, DecodeError, RequestBuildError
from .schemas.common import RateLimit
from .utils.encoding import encode_form, encode_json

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class Response:
    """
    Envelope around an HTTP response from the ChatWork API.

    Attributes:
        http_response: The underlying ``httpx.Response``
        rate_limit: Rate limit information, always zero-valued since the
            API does not document rate limit headers
    """

    http_response: httpx.Response
    rate_limit: RateLimit = field(default_factory=RateLimit)

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers


def new_response(http_response: httpx.Response) -> Response:
    """Wrap an ``httpx.Response`` in a Response envelope."""
    return Response(http_response=http_response)


def join_url(base_url: str, path: str) -> str:
    """
    Join a relative endpoint path to the base URL.

    Trailing slashes on the base and leading slashes on the path are
    collapsed so exactly one slash separates them.
    """
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def parse_error_messages(body: bytes) -> List[str]:
    """
    Extract the ``errors`` list from an error response body.

    Args:
        body: Raw response body

    Returns:
        The server's error messages. An empty body gives an empty list; a
        body that is not a JSON object gives a single message describing
        the parse failure.
    """
    if not body.strip():
        return []
    try:
        payload = json.loads(body)
    except ValueError as e:
        return [f"Failed to parse error response: {e}"]
    if not isinstance(payload, dict):
        return [
            "Failed to parse error response: expected a JSON object, "
            f"got {type(payload).__name__}"
        ]

    errors = payload.get("errors") or []
    if isinstance(errors, str):
        return [errors]
    if not isinstance(errors, list):
        return [
            "Failed to parse error response: expected a list of errors, "
            f"got {type(errors).__name__}"
        ]
    return [str(message) for message in errors]


async def check_response(
    response: Response, request: Optional[httpx.Request] = None
) -> None:
    """
    Check a response for an API error.

    Status codes 200-299 are success. Any other status reads the body and
    raises an APIError.

    Args:
        response: Response envelope to check
        request: Original outbound request; defaults to the request the
            response is attached to. Without either, the APIError has an
            empty method and URL.

    Raises:
        APIError: If the status code is outside 200-299
    """
    http_response = response.http_response
    status_code = http_response.status_code
    if 200 <= status_code <= 299:
        return

    if request is None:
        try:
            request = http_response.request
        except RuntimeError:
            # Response built by hand, without a request attached.
            request = None
    method = request.method if request is not None else ""
    url = str(request.url) if request is not None else ""

    body = await http_response.aread()
    errors = parse_error_messages(body)
    raise APIError(method, url, status_code, errors, response)


def is_raw_sink(shape: Any) -> bool:
    """Return True if the shape receives the raw body instead of JSON."""
    return not isinstance(shape, type) and callable(getattr(shape, "write", None))


def zero_value(shape: Any) -> Any:
    """Return the value an empty body decodes to for the given shape."""
    if get_origin(shape) is list:
        return []
    return shape()


def decode_payload(shape: Any, payload: Any) -> Any:
    """
    Convert decoded JSON into the given shape.

    Raises:
        TypeError: If the payload does not match the shape
    """
    if get_origin(shape) is list:
        (item_shape,) = get_args(shape)
        if not isinstance(payload, list):
            raise TypeError(f"Expected a JSON array, got {type(payload).__name__}")
        return [decode_payload(item_shape, item) for item in payload]
    return shape.from_dict(payload)


async def process_response_body(response: Response, shape: Any = None) -> Any:
    """
    Decode the body of a successful response.

    Args:
        response: Response envelope with an unread body
        shape: Destination shape (see module docstring)

    Returns:
        The decoded value, the raw sink itself, or None when no shape is
        given.

    Raises:
        DecodeError: If the body cannot be decoded into the shape or the
            raw sink fails to accept it
    """
    http_response = response.http_response

    if shape is None:
        await http_response.aread()
        return None

    if is_raw_sink(shape):
        async for chunk in http_response.aiter_bytes():
            try:
                written = shape.write(chunk)
                if inspect.isawaitable(written):
                    await written
            except (OSError, ValueError, TypeError) as e:
                raise DecodeError(
                    f"Failed to copy response body: {e}", response
                ) from e
        return shape

    body = await http_response.aread()
    if not body.strip():
        return zero_value(shape)
    try:
        return decode_payload(shape, json.loads(body))
    except (ValueError, TypeError, KeyError) as e:
        raise DecodeError(f"Failed to decode response body: {e}", response) from e


class Transport:
    """
    Builds, sends and decodes ChatWork API requests.

    A Transport is shared by every service of a client. It holds only the
    frozen ClientConfig and the HTTP client handle, neither of which is
    changed after construction.

    Attributes:
        config: Client configuration
        http_client: The ``httpx.AsyncClient`` every request is sent through
    """

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient):
        self._config = config
        self._http_client = http_client

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Request:
        """
        Build a request with a JSON body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            body: Mapping or parameter object to send as JSON, if any
            params: Query parameters to add to the URL

        Raises:
            RequestBuildError: If the URL or the body cannot be encoded
        """
        content = None
        if body is not None:
            try:
                content = encode_json(body)
            except (TypeError, ValueError) as e:
                raise RequestBuildError(f"Cannot encode JSON body: {e}") from e
        return self._build(method, path, content, JSON_CONTENT_TYPE, params)

    def new_form_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Request:
        """
        Build a request with an ``application/x-www-form-urlencoded`` body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            body: Mapping or parameter object to send as form values, if any
            params: Query parameters to add to the URL

        Raises:
            RequestBuildError: If the URL or the body cannot be encoded
        """
        content = None
        if body is not None:
            try:
                content = encode_form(body)
            except (TypeError, ValueError) as e:
                raise RequestBuildError(f"Cannot encode form body: {e}") from e
        return self._build(method, path, content, FORM_CONTENT_TYPE, params)

    def _build(
        self,
        method: str,
        path: str,
        content: Optional[bytes],
        content_type: str,
        params: Optional[Mapping[str, Any]],
    ) -> httpx.Request:
        try:
            url = httpx.URL(join_url(self._config.base_url, path))
            if params:
                url = url.copy_merge_params(params)
        except (httpx.InvalidURL, TypeError) as e:
            raise RequestBuildError(f"Invalid request URL for {path!r}: {e}") from e

        headers = {
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": self._config.user_agent,
            TOKEN_HEADER: self._config.token,
        }
        if content is not None:
            headers["Content-Type"] = content_type

        return httpx.Request(method, url, headers=headers, content=content)

    async def do(
        self, request: httpx.Request, shape: Any = None
    ) -> Tuple[Any, Response]:
        """
        Send a request and decode the response.

        Args:
            request: Request built by new_request or new_form_request
            shape: Destination shape for the body (see module docstring)

        Returns:
            tuple: (value, response) where value is the decoded body, the
            raw sink, or None for 204 responses and when no shape is given

        Raises:
            httpx.TransportError: On network failures, unwrapped
            APIError: If the API answers with a non-2xx status
            DecodeError: If the body cannot be decoded into the shape
        """
        if self._config.debug:
            logger.debug("Sending %s %s", request.method, request.url)

        http_response = await self._http_client.send(request, stream=True)
        try:
            response = new_response(http_response)
            if self._config.debug:
                logger.debug(
                    "Received %d for %s %s",
                    http_response.status_code,
                    request.method,
                    request.url,
                )

            try:
                await check_response(response, request)
            except APIError as e:
                if self._config.debug:
                    logger.debug("API error: %s", e)
                raise

            if http_response.status_code == httpx.codes.NO_CONTENT:
                return None, response

            value = await process_response_body(response, shape)
            return value, response
        finally:
            await http_response.aclose()
