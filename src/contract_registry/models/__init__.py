"""Wire message modeling for contract_registry."""

from __future__ import annotations

from .base import WireMessage
from .fields import WireField, field_number

__all__ = [
    "WireMessage",
    "WireField",
    "field_number",
]
