"""
ChatWork Message Notation

Builders for the tag notation ChatWork renders inside message bodies:
mentions, replies, quotes and information blocks.
"""

from typing import Iterable


def mention(account_ids: Iterable[int]) -> str:
    """
    Build mention tags for the given accounts.

    Args:
        account_ids: Account IDs to notify

    Returns:
        str: e.g. ``"[To:1] [To:2] "``, or ``""`` when no IDs are given
    """
    return "".join(f"[To:{account_id}] " for account_id in account_ids)


def reply_tag(account_id: int, room_id: int, message_id: str) -> str:
    """Build the tag that links a message as a reply to another message."""
    return f"[rp aid={account_id} to={room_id}-{message_id}]"


def quote(account_id: int, send_time: int, body: str) -> str:
    """Wrap a message body in a quote block attributed to its author."""
    return f"[qt][qtmeta aid={account_id} time={int(send_time)}]{body}[/qt]"


def info(title: str, body: str) -> str:
    """Build an information block with a title."""
    return f"[info][title]{title}[/title]{body}[/info]"
