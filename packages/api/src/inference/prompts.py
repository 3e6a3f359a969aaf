# This project was developed with assistance from AI tools.
"""Grounded prompt rendering for product chat.

The prompt embeds one product record and nothing else, then tells the model
to answer only from it. Rendering is a pure function: no I/O, and the same
inputs always produce the same string.

Optional fields go through ``_optional_line`` so absent values are dropped
from the listing instead of printed as blanks or zeros. ``None`` is the only
absent marker; a stored 0 is a real value and is shown.
"""

from collections.abc import Callable, Iterable, Sequence
from decimal import Decimal
from typing import Any, Protocol

NOT_SPECIFIED = "Not specified"

FALLBACK_SENTENCE = (
    "I don't have that specific information in our product database. However, "
    "I can help you with [list available topics] or connect you with our support "
    "team for detailed assistance."
)

CLOSING_DIRECTIVE = "Provide a helpful, accurate response based ONLY on the information above:"


class Turn(Protocol):
    role: Any
    content: str


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def format_number(value: int | float) -> str:
    """Render a number without a trailing ``.0`` (8.9 -> "8.9", 10.0 -> "10")."""
    if isinstance(value, int):
        return str(value)
    normalized = Decimal(str(value)).normalize()
    return format(normalized, "f")


def _group_indian(digits: str) -> str:
    """Group an integer digit string as lakh/crore: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency_inr(amount: int | float | None) -> str:
    """Format a rupee amount with Indian digit grouping, or "Not specified"."""
    if amount is None:
        return NOT_SPECIFIED
    text = format_number(amount)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    whole, _, fraction = text.partition(".")
    grouped = _group_indian(whole)
    if fraction:
        grouped = f"{grouped}.{fraction}"
    return f"{sign}₹{grouped}"


def _optional_line(
    label: str,
    value: Any,
    fmt: Callable[[Any], str] = str,
) -> str | None:
    """Render ``- label: value`` if the value is present, else None."""
    if value is None:
        return None
    return f"- {label}: {fmt(value)}"


def _render_product_info(product: Any) -> str:
    lines: list[str | None] = [
        "PRODUCT INFORMATION:",
        f"- Product Name: {product.name}",
        f"- Bank: {product.bank}",
        f"- Loan Type: {_enum_value(product.type)}",
        f"- Interest Rate (APR): {format_number(product.rate_apr)}%",
        f"- Minimum Income Required: {format_currency_inr(product.min_income)} per month",
        f"- Minimum Credit Score: {product.min_credit_score}",
        f"- Tenure Range: {product.tenure_min_months} to {product.tenure_max_months} months",
        _optional_line(
            "Processing Fee", product.processing_fee_pct, lambda v: f"{format_number(v)}%"
        ),
        _optional_line(
            "Prepayment Penalty", product.prepayment_allowed, lambda v: "Yes" if v else "No"
        ),
        _optional_line("Disbursal Speed", product.disbursal_speed, _enum_value),
        _optional_line("Documentation Level", product.docs_level, _enum_value),
        _optional_line("Summary", product.summary),
    ]
    return "\n".join(line for line in lines if line is not None)


def _render_faq(faq: Sequence[dict[str, Any]] | None) -> str | None:
    if not faq:
        return None
    lines = ["FREQUENTLY ASKED QUESTIONS:"]
    for i, entry in enumerate(faq, start=1):
        lines.append(f"Q{i}: {entry['q']}")
        lines.append(f"A{i}: {entry['a']}")
    return "\n".join(lines)


def _render_history(history: Iterable[Turn]) -> str | None:
    lines = [f"{str(_enum_value(t.role)).upper()}: {t.content}" for t in history]
    if not lines:
        return None
    return "PREVIOUS CONVERSATION:\n" + "\n".join(lines)


def _render_instructions(product: Any) -> str:
    rate = format_number(product.rate_apr)
    return (
        "You are a helpful loan advisor assistant. You are helping a customer "
        f'understand the "{product.name}" loan product from {product.bank}.\n'
        "\n"
        "CRITICAL RULES:\n"
        "1. Answer ONLY using the product information provided above\n"
        "2. When referencing specific data, cite the field name "
        f'(e.g., "The APR is {rate}% as stated in our product details")\n'
        "3. If the user asks about information NOT in the product data, "
        f'respond with: "{FALLBACK_SENTENCE}"\n'
        "4. Be conversational but accurate\n"
        "5. If you're unsure, acknowledge it rather than guessing"
    )


def build_grounded_prompt(
    product: Any,
    question: str,
    history: Sequence[Turn] = (),
) -> str:
    """Render the grounded instruction block for one product question.

    Args:
        product: A product record (ORM row or anything with the same
            attributes).
        question: The user's question, embedded literally.
        history: Prior turns, oldest first. Embedded as opaque context.

    Returns:
        The prompt: product fields, FAQ, prior conversation, rules, the
        question, and the closing directive, separated by blank lines.

    Raises:
        ValueError: If the question is empty or whitespace. Request
            validation rejects this before we get here.
    """
    if not question or not question.strip():
        raise ValueError("question must be a non-empty string")

    sections = [
        _render_product_info(product),
        _render_faq(product.faq),
        _render_history(history),
        _render_instructions(product),
        f"USER QUESTION: {question}",
        CLOSING_DIRECTIVE,
    ]
    return "\n\n".join(s for s in sections if s is not None)
