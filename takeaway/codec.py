"""Order file import/export."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import yaml

from takeaway.errors import OrderDecodeError, OrderEncodeError, OrderFormatError
from takeaway.models import Order

logger = logging.getLogger(__name__)


_NULL_TAG = "tag:yaml.org,2002:null"


class _OrderLoader(yaml.SafeLoader):
    """Safe loader that keeps plain scalars as written text; only null is resolved."""


_OrderLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _load_yaml(payload: bytes) -> Any:
    try:
        return yaml.load(payload, Loader=_OrderLoader)
    except yaml.YAMLError as exc:
        raise OrderDecodeError(f"invalid YAML: {exc}") from exc


def _load_json(payload: bytes) -> Any:
    try:
        return json.loads(payload)
    except ValueError as exc:
        raise OrderDecodeError(f"invalid JSON: {exc}") from exc


# Keyed by file extension. New formats go here.
DECODERS: dict[str, Callable[[bytes], Any]] = {
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".json": _load_json,
}


def format_for_path(path: str | Path) -> str:
    """Return the format hint (file extension) for an order file."""
    return Path(path).suffix


def decode_order(payload: bytes, format_hint: str) -> Order:
    """Decode an order payload using the decoder registered for format_hint."""
    loader = DECODERS.get(format_hint)
    if loader is None:
        raise OrderFormatError(f"failed to determine file type from extension {format_hint!r}")

    order = Order.from_dict(loader(payload))
    logger.debug("decoded order format=%s order=%r", format_hint, order)
    return order


def encode_order(order: Order) -> bytes:
    """Encode an order as YAML, leaving out unset fields."""
    try:
        text = yaml.safe_dump(order.to_dict(), sort_keys=False, default_flow_style=False, allow_unicode=True)
    except yaml.YAMLError as exc:
        raise OrderEncodeError(f"failed to encode order: {exc}") from exc
    return text.encode("utf-8")
