"""
Me Service

Profile and unread status of the authenticated user.

ChatWork API docs: https://developer.chatwork.com/reference/me
"""

from typing import Tuple

from ..schemas import Me, MyStatus
from ..transport import Response
from .base import BaseService


class MeService(BaseService):
    """Methods about the authenticated user."""

    async def get(self) -> Tuple[Me, Response]:
        """Get the authenticated user's profile, private fields included."""
        request = self._transport.new_request("GET", "me")
        return await self._send(request, Me)

    async def get_status(self) -> Tuple[MyStatus, Response]:
        """Get unread, mention and task counts across all rooms."""
        request = self._transport.new_request("GET", "my/status")
        return await self._send(request, MyStatus)
