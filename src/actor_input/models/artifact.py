"""
artifact.py

PURPOSE: Define the ParseArtifact record produced for each line of actor input.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
The parser produces exactly one ParseArtifact per input line. Artifacts are
immutable and self-contained: everything a consumer needs (tokens, spans,
classification, error envelope) travels with the artifact.

Attribute names are snake_case in Python. The interchange format uses the
camelCase names (actorInput, primaryTargetSpan, ...), produced by the
pydantic alias generator when dumping with by_alias=True.

The error codes below are a contract with consumers (tests, CLIs, scripts)
and must never change between releases.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UNKNOWN_INTENT_CODE = "UNKNOWN_INTENT"
SEMANTIC_ERROR_CODE = "SEMANTIC_ERROR"

# details["reason"] when there is no intent token at all
MISSING_INTENT_TOKEN = "missing-intent-token"

# details["missingSpan"] when a relation word directly follows the intent
PRIMARY_TARGET_SPAN = "primaryTargetSpan"


class Classification(str, Enum):
    """Coarse outcome of parsing one line."""

    SUCCESS = "success"
    SEMANTIC_ERROR = "semantic error"
    UNKNOWN_INTENT = "unknown intent"


class ErrorEnvelope(BaseModel):
    """
    Machine-readable description of a failed parse.

    Attributes:
        error_class: Mirrors the artifact's classification (serialized as "class")
        code: UNKNOWN_INTENT_CODE or SEMANTIC_ERROR_CODE
        details: Code-specific keys, e.g. {"reason": "missing-intent-token"}
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    error_class: Classification = Field(..., alias="class")
    code: str
    details: dict[str, str] = Field(default_factory=dict)


class ParseArtifact(BaseModel):
    """
    A fully parsed line of actor input.

    Examples:
        - "look" -> intent_token="look", classification=SUCCESS
        - "put rusty sword in old chest" -> intent_token="put",
              primary_target_span=("rusty", "sword"), relation_token="in",
              secondary_target_span=("old", "chest")
        - "put in old chest" -> classification=SEMANTIC_ERROR
        - "   " -> intent_token=None, classification=UNKNOWN_INTENT
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    actor_input: str
    normalized_input: str
    intent_token: str | None = None
    primary_target_span: tuple[str, ...] = ()
    relation_token: str | None = None
    secondary_target_span: tuple[str, ...] = ()
    classification: Classification
    error_envelope: ErrorEnvelope | None = None

    @property
    def success(self) -> bool:
        return self.classification is Classification.SUCCESS

    @property
    def args(self) -> str:
        """Everything after the intent token, as normalized text."""
        return " ".join(self.tokens()[1:])

    def tokens(self) -> list[str]:
        """Reassemble the token sequence in input order, omitting absent parts."""
        tokens: list[str] = []
        if self.intent_token is not None:
            tokens.append(self.intent_token)
        tokens.extend(self.primary_target_span)
        if self.relation_token is not None:
            tokens.append(self.relation_token)
        tokens.extend(self.secondary_target_span)
        return tokens

    def to_dict(self) -> dict[str, Any]:
        """Render the artifact in the interchange format (camelCase, null for absent)."""
        return self.model_dump(mode="json", by_alias=True)


def describe_error(artifact: ParseArtifact) -> str | None:
    """
    Build a user-facing message for a failed parse.

    The message is derived from the envelope's code and details so a user
    sees what was wrong, not a generic failure.

    Returns:
        The message, or None when the artifact parsed successfully
    """
    envelope = artifact.error_envelope
    if envelope is None:
        return None

    details = envelope.details
    if envelope.code == UNKNOWN_INTENT_CODE:
        reason = details.get("reason", "unknown")
        return f"Unknown intent ({envelope.code}): {reason}."

    if envelope.code == SEMANTIC_ERROR_CODE:
        intent = details.get("intentToken", "")
        relation = details.get("relationToken", "")
        missing = details.get("missingSpan", "")
        return (
            f'Semantic error ({envelope.code}): "{intent}" needs something before '
            f'"{relation}" (missing {missing}).'
        )

    return f"{envelope.error_class.value} ({envelope.code}): {details}"
