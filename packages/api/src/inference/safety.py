# This project was developed with assistance from AI tools.
"""Response gate for generated answers.

Rejects text that makes absolute approval claims no product record can back
up. The check is a whole-phrase, case-insensitive regex scan over a fixed
denylist. It is a pure function of the text: it does not look at the product,
does not call out, and does not build the replacement message (the chat
service owns that).

This cannot catch paraphrased or novel hallucinations. Widening the list is a
product decision, not a tuning knob.
"""

import re
from dataclasses import dataclass

# (category, pattern) in check order; the first hit wins
DENYLIST: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("guaranteed approval", re.compile(r"\bguaranteed approval\b", re.IGNORECASE)),
    ("unconditional approval", re.compile(r"\b100% approval\b", re.IGNORECASE)),
    ("no credit check", re.compile(r"\bno credit check\b", re.IGNORECASE)),
    ("instant approval", re.compile(r"\binstant approval\b", re.IGNORECASE)),
)


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of a response gate check."""

    valid: bool
    reason: str | None = None


def validate_response(text: str) -> ValidationOutcome:
    """Check generated text against the approval-claim denylist."""
    for category, pattern in DENYLIST:
        if pattern.search(text):
            return ValidationOutcome(
                valid=False,
                reason=f"Response contains an unsupported claim: {category}",
            )
    return ValidationOutcome(valid=True)
