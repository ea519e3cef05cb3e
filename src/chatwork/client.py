"""
ChatWork API Client

This module provides the main client class. It builds the shared
configuration and request pipeline once and exposes one service per group
of API endpoints.

Usage:
    async with ChatworkClient("YOUR_API_TOKEN") as client:
        rooms, _ = await client.rooms.list()
        created, _ = await client.messages.send_message(rooms[0].room_id, "Hello!")

Cancellation:
    Calls are plain coroutines. Wrap them in ``asyncio.wait_for`` (or cancel
    the awaiting task) to bound them; cancellation propagates unchanged.
"""

import logging
from typing import Any, Mapping, Optional, Tuple

import httpx

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ClientConfig,
)
from .services import (
    ContactsService,
    IncomingRequestsService,
    MeService,
    MessagesService,
    MyTasksService,
    RoomsService,
    TasksService,
)
from .transport import Response, Transport

logger = logging.getLogger(__name__)


class ChatworkClient:
    """
    Client for the ChatWork API.

    Attributes:
        config: Frozen client configuration
        rooms: Room endpoints
        messages: Message endpoints
        tasks: Room task endpoints
        my_tasks: Endpoints for tasks assigned to the authenticated user
        me: Authenticated user endpoints
        contacts: Contact list endpoints
        incoming_requests: Contact request endpoints
    """

    def __init__(
        self,
        token: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        debug: bool = False,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            token: ChatWork API token
            http_client: Optional ``httpx.AsyncClient`` every request is
                sent through instead of a client created here. It is not
                closed by ``aclose``.
            debug: Log each request and response status at DEBUG level
            base_url: API root URL
            user_agent: User-Agent header value
            timeout: Timeout in seconds for the client created here

        Raises:
            ValueError: If base_url is not an absolute http(s) URL
        """
        config = ClientConfig(
            token=token, base_url=base_url, user_agent=user_agent, debug=debug
        )
        self.config = config
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=timeout)
        self._transport = Transport(config, http_client)

        self.rooms = RoomsService(self._transport)
        self.messages = MessagesService(self._transport, rooms=self.rooms)
        self.tasks = TasksService(self._transport)
        self.my_tasks = MyTasksService(self._transport, tasks=self.tasks)
        self.me = MeService(self._transport)
        self.contacts = ContactsService(self._transport)
        self.incoming_requests = IncomingRequestsService(self._transport)

        logger.debug("ChatworkClient initialized for %s", config.base_url)

    @classmethod
    def from_env(
        cls,
        http_client: Optional[httpx.AsyncClient] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ChatworkClient":
        """
        Create a client configured from environment variables.

        See ``ClientConfig.from_env`` for the variables read.
        """
        config = ClientConfig.from_env(environ)
        return cls(
            config.token,
            http_client=http_client,
            debug=config.debug,
            base_url=config.base_url,
            user_agent=config.user_agent,
        )

    @property
    def transport(self) -> Transport:
        """Shared request pipeline, for sending custom requests."""
        return self._transport

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._transport.http_client

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Request:
        """Build a request with a JSON body. See Transport.new_request."""
        return self._transport.new_request(method, path, body, params)

    def new_form_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Request:
        """Build a form-encoded request. See Transport.new_form_request."""
        return self._transport.new_form_request(method, path, body, params)

    async def do(
        self, request: httpx.Request, shape: Any = None
    ) -> Tuple[Any, Response]:
        """Send a request and decode the response. See Transport.do."""
        return await self._transport.do(request, shape)

    async def aclose(self) -> None:
        """Close the HTTP client if it was created by this client."""
        if self._owns_http_client:
            await self._transport.http_client.aclose()

    async def __aenter__(self) -> "ChatworkClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
