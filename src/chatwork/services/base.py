"""
Base Service Class

Every resource service holds a read-only handle to the shared Transport
and nothing else.
"""

from typing import Any, Tuple

import httpx

from ..transport import Response, Transport, zero_value


class BaseService:
    """
    Base class for the ChatWork API resource services.

    Attributes:
        _transport: Shared request pipeline of the owning client
    """

    def __init__(self, transport: Transport):
        self._transport = transport

    async def _send(
        self, request: httpx.Request, shape: Any = None
    ) -> Tuple[Any, Response]:
        """
        Dispatch a request through the transport.

        A 204 answer decodes to the zero value of the shape, so endpoint
        methods always return the type they declare.
        """
        value, response = await self._transport.do(request, shape)
        if value is None and shape is not None:
            value = zero_value(shape)
        return value, response
