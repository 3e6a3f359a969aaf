# This project was developed with assistance from AI tools.
"""Keyword responder used in demo mode when no provider key is configured.

Answers only from product fields, so it exercises the same grounding contract
as a real model. Topic matching is plain substring search on the lowercased
question, checked in a fixed order.
"""

from typing import Any

from .prompts import format_currency_inr, format_number

LOW_RATE_THRESHOLD = 9.5
LOW_FEE_THRESHOLD = 2


def _has(question: str, *keywords: str) -> bool:
    return any(kw in question for kw in keywords)


def _speed(product: Any) -> str | None:
    return getattr(product.disbursal_speed, "value", product.disbursal_speed)


def _rate_answer(product: Any) -> str:
    rate = format_number(product.rate_apr)
    if product.rate_apr <= LOW_RATE_THRESHOLD:
        verdict = "This is considered a competitive low rate in the current market."
    else:
        verdict = "This rate is standard for this type of loan."
    return f"The {product.name} has an annual percentage rate (APR) of {rate}%. {verdict}"


def _eligibility_answer(product: Any) -> str:
    return (
        f"To qualify for the {product.name}, you need:\n"
        f"- Minimum credit score: {product.min_credit_score}\n"
        f"- Minimum monthly income: {format_currency_inr(product.min_income)}\n"
        f"- The loan tenure ranges from {product.tenure_min_months} to "
        f"{product.tenure_max_months} months."
    )


def _prepayment_answer(product: Any) -> str:
    if product.prepayment_allowed is False:
        return (
            f"Great news! The {product.name} does NOT have any prepayment penalties. "
            "You can pay off your loan early without any extra charges, which can save "
            "you money on interest."
        )
    return (
        f"The {product.name} allows prepayment. I'd recommend checking with "
        f"{product.bank} directly about any applicable prepayment charges or conditions."
    )


def _disbursal_answer(product: Any) -> str:
    if _speed(product) == "fast":
        return (
            f"The {product.name} offers fast disbursal, typically within 24-48 hours "
            "after your application is approved. This is great if you need funds urgently."
        )
    return (
        f"The {product.name} typically disburses funds within 3-5 business days after "
        "approval. The exact timeline may vary based on documentation verification."
    )


def _documents_answer(product: Any) -> str:
    docs_level = getattr(product.docs_level, "value", product.docs_level)
    answer = (
        f"For the {product.name}, you'll need standard documentation including:\n"
        "- Identity proof (Aadhaar, PAN card)\n"
        "- Income proof (salary slips, bank statements)\n"
        "- Address proof"
    )
    if docs_level:
        answer += f"\nThe documentation requirement level is {docs_level}."
    return answer


def _fee_answer(product: Any) -> str:
    fee = product.processing_fee_pct
    if fee is None:
        return (
            "I don't have specific information about processing fees in our product "
            f"database. Please contact {product.bank} directly for detailed fee "
            "structure information."
        )
    answer = (
        f"The {product.name} has a processing fee of {format_number(fee)}% of the loan amount."
    )
    if fee < LOW_FEE_THRESHOLD:
        answer += " This is a relatively low processing fee compared to the market average."
    return answer


def _tenure_answer(product: Any) -> str:
    low, high = product.tenure_min_months, product.tenure_max_months
    return (
        f"The {product.name} offers flexible tenure options ranging from {low} months "
        f"({low // 12} years) to {high} months ({high // 12} years). You can choose a "
        "tenure that fits your repayment capacity."
    )


def _fallback_answer(product: Any) -> str:
    topics = [
        f"- Interest rate ({format_number(product.rate_apr)}% APR)",
        f"- Eligibility criteria (credit score: {product.min_credit_score}, "
        f"income: {format_currency_inr(product.min_income)})",
        f"- Tenure options ({product.tenure_min_months}-{product.tenure_max_months} months)",
        "- Prepayment terms",
    ]
    if _speed(product):
        topics.append("- Disbursal timeline")
    return (
        "I don't have specific information about that in our product database. "
        f"However, I can help you with details about the {product.name}'s:\n"
        + "\n".join(topics)
        + "\n\nWhat would you like to know about these aspects?"
    )


_TOPICS = (
    (("apr", "interest", "rate"), _rate_answer),
    (("eligible", "qualify", "requirement"), _eligibility_answer),
    (("prepayment", "penalty", "early"), _prepayment_answer),
    (("disbursal", "fast", "quick", "how long"), _disbursal_answer),
    (("document", "docs", "paperwork"), _documents_answer),
    (("fee", "charge", "cost"), _fee_answer),
    (("tenure", "term", "duration"), _tenure_answer),
)


def simulate_response(product: Any, question: str) -> str:
    """Answer a product question from its fields using keyword matching."""
    q = question.lower()
    for keywords, answer in _TOPICS:
        if _has(q, *keywords):
            return answer(product)
    return _fallback_answer(product)
