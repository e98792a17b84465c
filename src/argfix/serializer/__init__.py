"""JSON / YAML serialization of argfix results."""
from __future__ import annotations

from argfix.serializer.serializer import OutcomeSerializer, SerializationError

__all__ = ["OutcomeSerializer", "SerializationError"]
