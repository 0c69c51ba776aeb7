"""Validators - Input validation for the railway router.

Validators return Optional[LogMessage]:
- None if valid
- A message object if invalid (caller logs and displays it)

Design Principles:
- No exceptions for expected validation failures
- Invalid input never reaches the RailwayGraph
"""

from typing import Any

from railway_router.model.message import InvalidLinkMessage
from railway_router.model.railway_graph import RailwayGraph, is_positive_int


def validate_link(
    graph: RailwayGraph,
    a: str | None,
    b: str | None,
    weight: Any,
) -> InvalidLinkMessage | None:
    """Validate link endpoints and weight before an add-or-update.

    Returns:
        None if valid, InvalidLinkMessage describing the first problem otherwise.
    """
    if not graph.has_station(a) or not graph.has_station(b):
        return InvalidLinkMessage(reason=f"unknown station in {a} - {b}")
    if a == b:
        return InvalidLinkMessage(reason="start and end stations must differ")
    if not is_positive_int(weight):
        return InvalidLinkMessage(reason=f"weight must be a positive whole number, got {weight!r}")
    return None


def parse_weight(raw: Any) -> Any:
    """Convert a raw widget value to an int weight where possible.

    Whole floats (3.0) and numeric strings ("3") become ints. Anything else is
    returned unchanged so validate_link can reject it with a clear reason.
    """
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        text = raw.strip()
        if text.lstrip("-").isdigit():
            return int(text)
    return raw
