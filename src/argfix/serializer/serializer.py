"""Serialization of argfix results to JSON and YAML.

Each result object is converted to a plain dict/list structure with a
``"kind"`` discriminator, which maps naturally to both formats.  Parse
and correction outcomes can be read back from that structure.

Usage
-----
::

    from argfix.serializer import OutcomeSerializer

    serializer = OutcomeSerializer()
    text = serializer.to_json(outcome)
    outcome2 = serializer.from_json(text)
    assert outcome == outcome2
"""
from __future__ import annotations

import json
from typing import Any, Union

import yaml

from argfix.corrector.corrector import (
    AmbiguousFlag,
    CorrectionOutcome,
    FlagCorrection,
    FuzzyFlagResult,
)
from argfix.errors import ArgfixError
from argfix.fuzzy.match import MatchResult
from argfix.parser.router import ParseOutcome

Serializable = Union[ParseOutcome, CorrectionOutcome, MatchResult, FuzzyFlagResult]


class SerializationError(ArgfixError, ValueError):
    """Raised when a dict cannot be converted back into a result object."""


class OutcomeSerializer:
    """Converts between argfix result objects and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (object → dict)
    # ------------------------------------------------------------------

    def to_dict(self, obj: Serializable) -> dict[str, Any]:
        """Serialize a result object to a JSON-compatible dict.

        Raises
        ------
        TypeError
            If ``obj`` is not a supported result type.
        """
        if isinstance(obj, ParseOutcome):
            return {
                "kind": "ParseOutcome",
                "positional": list(obj.positional),
                "flags": dict(obj.flags),
            }
        if isinstance(obj, CorrectionOutcome):
            return {
                "kind": "CorrectionOutcome",
                "corrected_args": list(obj.corrected_args),
                "corrections": [
                    {"original": c.original, "corrected": c.corrected}
                    for c in obj.corrections
                ],
                "ambiguous": [
                    {"input": a.input, "suggestions": list(a.suggestions)}
                    for a in obj.ambiguous
                ],
                "errors": list(obj.errors),
            }
        if isinstance(obj, MatchResult):
            return {
                "kind": "MatchResult",
                "input": obj.input,
                "match": obj.match,
                "distance": obj.distance,
                "auto_correct": obj.auto_correct,
                "suggestions": list(obj.suggestions),
            }
        if isinstance(obj, FuzzyFlagResult):
            return {
                "kind": "FuzzyFlagResult",
                "input": obj.input,
                "match": obj.match,
                "auto_correct": obj.auto_correct,
                "suggestions": list(obj.suggestions),
                "is_flag": obj.is_flag,
                "value": obj.value,
                "message": str(obj),
            }
        raise TypeError(f"Cannot serialize object of type {type(obj).__name__}")

    def to_json(self, obj: Serializable, indent: int = 2) -> str:
        """Serialize a result object to a JSON string."""
        return json.dumps(self.to_dict(obj), indent=indent, ensure_ascii=False)

    def to_yaml(self, obj: Serializable) -> str:
        """Serialize a result object to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(obj),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    # ------------------------------------------------------------------
    # Deserialization (dict → object)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, Any]) -> ParseOutcome | CorrectionOutcome:
        """Rebuild a parse or correction outcome from its dict form.

        Raises
        ------
        SerializationError
            If the ``kind`` field is missing or unsupported.
        """
        if not isinstance(data, dict):
            raise SerializationError(f"Expected a mapping, got {type(data).__name__}")
        kind = data.get("kind")
        if kind == "ParseOutcome":
            return ParseOutcome(
                positional=list(data.get("positional", [])),
                flags=dict(data.get("flags", {})),
            )
        if kind == "CorrectionOutcome":
            return CorrectionOutcome(
                corrected_args=list(data.get("corrected_args", [])),
                corrections=[
                    FlagCorrection(original=c["original"], corrected=c["corrected"])
                    for c in data.get("corrections", [])
                ],
                ambiguous=[
                    AmbiguousFlag(input=a["input"], suggestions=tuple(a["suggestions"]))
                    for a in data.get("ambiguous", [])
                ],
                errors=list(data.get("errors", [])),
            )
        raise SerializationError(f"Unsupported kind: {kind!r}")

    def from_json(self, text: str) -> ParseOutcome | CorrectionOutcome:
        """Rebuild a parse or correction outcome from a JSON string."""
        return self.from_dict(json.loads(text))

    def from_yaml(self, text: str) -> ParseOutcome | CorrectionOutcome:
        """Rebuild a parse or correction outcome from a YAML string."""
        return self.from_dict(yaml.safe_load(text))
