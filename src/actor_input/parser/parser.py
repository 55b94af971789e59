"""
parser.py

PURPOSE: Split tokenized actor input into spans and classify the result.
DEPENDENCIES: lexer, artifact model, grammar model

ARCHITECTURE NOTES:
The parser implements a fixed relation-form grammar:
    COMMAND  := INTENT [PRIMARY] [RELATION SECONDARY]
    PRIMARY  := TOKEN*
    SECONDARY := TOKEN*

The first token is always the intent. The first later token found in the
grammar's relation-word set splits the rest into primary and secondary
spans; relation words after that one are ordinary secondary tokens.

It does NOT check whether the intent names a real command - that belongs
to the command registry. Every input maps to exactly one classification:
- no tokens               -> UNKNOWN_INTENT
- relation right after intent -> SEMANTIC_ERROR (primary span missing)
- anything else           -> SUCCESS
"""

import logging
from dataclasses import dataclass

from actor_input.models.artifact import (
    MISSING_INTENT_TOKEN,
    PRIMARY_TARGET_SPAN,
    SEMANTIC_ERROR_CODE,
    UNKNOWN_INTENT_CODE,
    Classification,
    ErrorEnvelope,
    ParseArtifact,
)
from actor_input.models.grammar import DEFAULT_GRAMMAR, Grammar
from actor_input.parser.lexer import lex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpanSplit:
    """Tokens partitioned around the intent and the first relation word."""

    intent_token: str | None
    primary_target_span: tuple[str, ...] = ()
    relation_token: str | None = None
    secondary_target_span: tuple[str, ...] = ()


def split_spans(tokens: list[str], grammar: Grammar = DEFAULT_GRAMMAR) -> SpanSplit:
    """
    Partition tokens into intent / primary / relation / secondary.

    Args:
        tokens: Lexed tokens
        grammar: Grammar supplying the relation-word set

    Returns:
        SpanSplit (intent_token is None when there are no tokens)
    """
    if not tokens:
        return SpanSplit(intent_token=None)

    intent, remaining = tokens[0], tokens[1:]

    for i, token in enumerate(remaining):
        if grammar.is_relation_word(token):
            return SpanSplit(
                intent_token=intent,
                primary_target_span=tuple(remaining[:i]),
                relation_token=token,
                secondary_target_span=tuple(remaining[i + 1 :]),
            )

    return SpanSplit(intent_token=intent, primary_target_span=tuple(remaining))


class InputParser:
    """Parses actor input against one grammar."""

    def __init__(self, grammar: Grammar = DEFAULT_GRAMMAR):
        self.grammar = grammar

    def parse(self, actor_input: str) -> ParseArtifact:
        """
        Parse one line of actor input.

        Args:
            actor_input: Raw input string, kept verbatim on the artifact

        Returns:
            ParseArtifact with spans, classification and error envelope
        """
        tokens = lex(actor_input)
        normalized = " ".join(tokens)
        split = split_spans(tokens, self.grammar)

        if split.intent_token is None:
            logger.debug(f"No intent token in {actor_input!r}")
            return ParseArtifact(
                actor_input=actor_input,
                normalized_input=normalized,
                classification=Classification.UNKNOWN_INTENT,
                error_envelope=ErrorEnvelope(
                    error_class=Classification.UNKNOWN_INTENT,
                    code=UNKNOWN_INTENT_CODE,
                    details={"reason": MISSING_INTENT_TOKEN},
                ),
            )

        envelope: ErrorEnvelope | None = None
        classification = Classification.SUCCESS

        if split.relation_token is not None and not split.primary_target_span:
            classification = Classification.SEMANTIC_ERROR
            envelope = ErrorEnvelope(
                error_class=Classification.SEMANTIC_ERROR,
                code=SEMANTIC_ERROR_CODE,
                details={
                    "intentToken": split.intent_token,
                    "relationToken": split.relation_token,
                    "missingSpan": PRIMARY_TARGET_SPAN,
                },
            )
            logger.debug(
                f"Relation '{split.relation_token}' directly follows intent "
                f"'{split.intent_token}'"
            )

        return ParseArtifact(
            actor_input=actor_input,
            normalized_input=normalized,
            intent_token=split.intent_token,
            primary_target_span=split.primary_target_span,
            relation_token=split.relation_token,
            secondary_target_span=split.secondary_target_span,
            classification=classification,
            error_envelope=envelope,
        )


_default_parser = InputParser()


def parse_input(actor_input: str) -> ParseArtifact:
    """
    Parse actor input with the default grammar.

    Args:
        actor_input: Raw input string

    Returns:
        ParseArtifact for the input
    """
    return _default_parser.parse(actor_input)
