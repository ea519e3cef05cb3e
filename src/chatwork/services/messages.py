"""
Messages Service

Endpoints under ``/rooms/{room_id}/messages`` plus convenience methods
for posting messages in ChatWork notation (mentions, replies, quotes and
information blocks).

ChatWork API docs: https://developer.chatwork.com/reference/messages
"""

from typing import Iterable, List, Optional, Tuple

from ..schemas import (
    Message,
    MessageCreateParams,
    MessageCreatedResponse,
    MessageListParams,
    MessageUpdateParams,
)
from ..transport import Response, Transport
from ..utils import notation
from .base import BaseService
from .rooms import RoomsService


class MessagesService(BaseService):
    """
    Message related methods of the ChatWork API.

    The unread counter and read marker live under the rooms endpoints, so
    the service is composed with the client's RoomsService for those.
    """

    def __init__(self, transport: Transport, rooms: RoomsService):
        super().__init__(transport)
        self._rooms = rooms

    async def list(
        self, room_id: int, params: Optional[MessageListParams] = None
    ) -> Tuple[List[Message], Response]:
        """
        List messages in a room.

        Without ``force`` only messages not fetched before are returned (up
        to 100); with ``MessageListParams(force=True)`` the latest 100 are
        returned, older ones included.

        Returns:
            tuple: (messages, response); an empty list when the API answers
            204 because there is nothing new
        """
        request = self._transport.new_request(
            "GET",
            f"rooms/{room_id}/messages",
            params=params.to_form() if params is not None else None,
        )
        return await self._send(request, List[Message])

    async def create(
        self, room_id: int, params: MessageCreateParams
    ) -> Tuple[MessageCreatedResponse, Response]:
        """Post a message to a room."""
        request = self._transport.new_form_request(
            "POST", f"rooms/{room_id}/messages", params
        )
        return await self._send(request, MessageCreatedResponse)

    async def get(self, room_id: int, message_id: str) -> Tuple[Message, Response]:
        """Get a single message."""
        request = self._transport.new_request(
            "GET", f"rooms/{room_id}/messages/{message_id}"
        )
        return await self._send(request, Message)

    async def update(
        self, room_id: int, message_id: str, params: MessageUpdateParams
    ) -> Tuple[Message, Response]:
        """
        Edit a message. Only the author can edit, for a limited time.

        The returned Message only has ``message_id`` set.
        """
        request = self._transport.new_form_request(
            "PUT", f"rooms/{room_id}/messages/{message_id}", params
        )
        return await self._send(request, Message)

    async def delete(
        self, room_id: int, message_id: str
    ) -> Tuple[Message, Response]:
        """
        Delete a message. Only the author can delete, for a limited time.

        The returned Message only has ``message_id`` set.
        """
        request = self._transport.new_request(
            "DELETE", f"rooms/{room_id}/messages/{message_id}"
        )
        return await self._send(request, Message)

    async def send_message(
        self, room_id: int, body: str, self_unread: bool = False
    ) -> Tuple[MessageCreatedResponse, Response]:
        """Post a plain text message."""
        return await self.create(
            room_id, MessageCreateParams(body=body, self_unread=self_unread)
        )

    async def send_to(
        self, room_id: int, account_ids: Iterable[int], body: str
    ) -> Tuple[MessageCreatedResponse, Response]:
        """Post a message that mentions each of the given accounts."""
        return await self.create(
            room_id, MessageCreateParams(body=notation.mention(account_ids) + body)
        )

    async def reply(
        self, room_id: int, message_id: str, body: str
    ) -> Tuple[MessageCreatedResponse, Response]:
        """
        Post a reply to a message.

        The original message is fetched first to address the reply to its
        author.
        """
        original, _ = await self.get(room_id, message_id)
        tag = notation.reply_tag(original.account.account_id, room_id, message_id)
        return await self.create(room_id, MessageCreateParams(body=f"{tag}\n{body}"))

    async def quote(
        self, room_id: int, message_id: str, body: str
    ) -> Tuple[MessageCreatedResponse, Response]:
        """
        Post a message quoting another message.

        The original message is fetched first and placed in a quote block
        before the new text.
        """
        original, _ = await self.get(room_id, message_id)
        quoted = notation.quote(
            original.account.account_id, original.send_time, original.body
        )
        return await self.create(
            room_id, MessageCreateParams(body=f"{quoted}\n{body}")
        )

    async def send_info(
        self, room_id: int, title: str, body: str
    ) -> Tuple[MessageCreatedResponse, Response]:
        """Post an information block with a title."""
        return await self.create(
            room_id, MessageCreateParams(body=notation.info(title, body))
        )

    async def get_unread_count(self, room_id: int) -> Tuple[int, Response]:
        """Get the number of unread messages in a room."""
        counts, response = await self._rooms.get_messages_unread_count(room_id)
        return counts.unread_num, response

    async def mark_as_read(self, room_id: int, message_id: str) -> Response:
        """Mark every message up to and including ``message_id`` as read."""
        _, response = await self._rooms.mark_messages_as_read(room_id, message_id)
        return response
