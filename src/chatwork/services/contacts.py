"""
Contacts Services

The contact list and pending contact requests.

ChatWork API docs: https://developer.chatwork.com/reference/contacts
"""

import logging
from typing import List, Tuple

from ..schemas import Contact, IncomingRequest, IncomingRequestActionResponse
from ..transport import Response
from .base import BaseService

logger = logging.getLogger(__name__)


class ContactsService(BaseService):
    """Contact list methods of the ChatWork API."""

    async def list(self) -> Tuple[List[Contact], Response]:
        """List the authenticated user's contacts."""
        request = self._transport.new_request("GET", "contacts")
        return await self._send(request, List[Contact])


class IncomingRequestsService(BaseService):
    """Methods for pending contact requests."""

    async def list(self) -> Tuple[List[IncomingRequest], Response]:
        """List pending contact requests."""
        request = self._transport.new_request("GET", "incoming_requests")
        return await self._send(request, List[IncomingRequest])

    async def approve(
        self, request_id: int
    ) -> Tuple[IncomingRequestActionResponse, Response]:
        """
        Approve a contact request.

        Returns:
            tuple: (the new contact, response)
        """
        logger.debug("Approving contact request %s", request_id)
        request = self._transport.new_request("PUT", f"incoming_requests/{request_id}")
        return await self._send(request, IncomingRequestActionResponse)

    async def reject(self, request_id: int) -> Response:
        """Reject a contact request."""
        logger.debug("Rejecting contact request %s", request_id)
        request = self._transport.new_request(
            "DELETE", f"incoming_requests/{request_id}"
        )
        _, response = await self._send(request)
        return response
