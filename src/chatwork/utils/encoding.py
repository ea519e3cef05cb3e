"""
Request Body Encoding

Converts request parameter objects into the two body encodings the
ChatWork API accepts: ``application/json`` and
``application/x-www-form-urlencoded``.

Parameter objects are dataclasses. A field declared with
``form_field(omitempty=True)`` is left out of the encoded body when its
value is empty or zero. List values are comma-joined (``[1, 2, 3]`` becomes
``"1,2,3"``) and booleans are sent as ``1``/``0``.
"""

import json
from dataclasses import MISSING, field, fields, is_dataclass
from typing import Any, Dict, List, Mapping, Tuple
from urllib.parse import urlencode

OMITEMPTY = "omitempty"


def form_field(
    *, default: Any = MISSING, default_factory: Any = MISSING, omitempty: bool = False
) -> Any:
    """
    Declare a dataclass field of a request parameter object.

    Args:
        default: Default value of the field
        default_factory: Factory for mutable defaults such as lists
        omitempty: Drop the field from the encoded body when empty or zero
    """
    return field(
        default=default,
        default_factory=default_factory,
        metadata={OMITEMPTY: omitempty},
    )


def is_empty(value: Any) -> bool:
    """Return True for None, "", 0, False and empty sequences."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, bool, int, float)):
        return not value
    return False


def encode_form_value(value: Any) -> str:
    """Encode a single value the way the ChatWork form endpoints expect."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return ",".join(encode_form_value(item) for item in value)
    return str(value)


def body_items(body: Any) -> List[Tuple[str, Any]]:
    """
    List the (name, value) pairs of a body that should be encoded.

    Args:
        body: A parameter dataclass instance or a mapping

    Returns:
        Ordered name/value pairs with omitted and None values removed

    Raises:
        TypeError: If the body is neither a dataclass instance nor a mapping
    """
    if is_dataclass(body) and not isinstance(body, type):
        items = []
        for f in fields(body):
            value = getattr(body, f.name)
            if value is None:
                continue
            if f.metadata.get(OMITEMPTY) and is_empty(value):
                continue
            items.append((f.name, value))
        return items

    if isinstance(body, Mapping):
        return [(key, value) for key, value in body.items() if value is not None]

    raise TypeError(
        f"Cannot encode request body of type {type(body).__name__}"
    )


def form_values(body: Any) -> Dict[str, str]:
    """Encode a body into string form values, e.g. for query parameters."""
    return {name: encode_form_value(value) for name, value in body_items(body)}


def encode_form(body: Any) -> bytes:
    """Encode a body as ``application/x-www-form-urlencoded`` bytes."""
    return urlencode(list(form_values(body).items())).encode("ascii")


def encode_json(body: Any) -> bytes:
    """
    Encode a body as UTF-8 JSON.

    Non-ASCII text is written verbatim and ``<``, ``>`` and ``&`` are never
    escaped.
    """
    if isinstance(body, (Mapping, list)):
        payload = body
    else:
        payload = dict(body_items(body))
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")
