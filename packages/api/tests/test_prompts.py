# This project was developed with assistance from AI tools.
"""Tests for grounded prompt rendering."""

import pytest
from db.enums import ChatRole

from src.inference.prompts import (
    CLOSING_DIRECTIVE,
    build_grounded_prompt,
    format_currency_inr,
    format_number,
)
from src.schemas.ai import ChatTurn

from .factories import make_product

_OPTIONAL_LINES = {
    "processing_fee_pct": "- Processing Fee: 2%",
    "prepayment_allowed": "- Prepayment Penalty: Yes",
    "disbursal_speed": "- Disbursal Speed: fast",
    "docs_level": "- Documentation Level: minimal",
    "summary": "- Summary: Low interest personal loan with fast approval.",
}

_REQUIRED_LINES = [
    "- Product Name: Quick Personal Loan",
    "- Bank: HDFC Bank",
    "- Loan Type: personal",
    "- Interest Rate (APR): 8.9%",
    "- Minimum Income Required: ₹25,000 per month",
    "- Minimum Credit Score: 700",
    "- Tenure Range: 12 to 60 months",
]


# -- Formatting helpers --


@pytest.mark.parametrize(
    "value,expected",
    [(8.9, "8.9"), (10.0, "10"), (10, "10"), (0.5, "0.5"), (2.25, "2.25")],
)
def test_format_number_drops_trailing_zero(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "amount,expected",
    [
        (500, "₹500"),
        (25000, "₹25,000"),
        (150000, "₹1,50,000"),
        (12345678, "₹1,23,45,678"),
        (1500.5, "₹1,500.5"),
    ],
)
def test_format_currency_inr_uses_indian_grouping(amount, expected):
    assert format_currency_inr(amount) == expected


def test_format_currency_inr_missing_amount():
    assert format_currency_inr(None) == "Not specified"


# -- Product fields --


def test_all_required_fields_present():
    prompt = build_grounded_prompt(make_product(), "What's the interest rate?")
    for line in _REQUIRED_LINES:
        assert line in prompt


def test_all_optional_fields_rendered_exactly_once():
    prompt = build_grounded_prompt(make_product(), "Tell me more")
    for line in _OPTIONAL_LINES.values():
        assert prompt.count(line) == 1


@pytest.mark.parametrize("field", sorted(_OPTIONAL_LINES))
def test_absent_optional_field_is_omitted(field):
    prompt = build_grounded_prompt(make_product(**{field: None}), "Tell me more")
    label = _OPTIONAL_LINES[field].split(":")[0]
    assert f"{label}:" not in prompt


def test_zero_processing_fee_is_shown():
    """0 is a stored value, not an absent one."""
    prompt = build_grounded_prompt(make_product(processing_fee_pct=0), "Any fees?")
    assert "- Processing Fee: 0%" in prompt


def test_prepayment_flag_false_renders_no():
    prompt = build_grounded_prompt(make_product(prepayment_allowed=False), "Penalty?")
    assert "- Prepayment Penalty: No" in prompt


def test_missing_min_income_says_not_specified():
    prompt = build_grounded_prompt(make_product(min_income=None), "Eligibility?")
    assert "- Minimum Income Required: Not specified per month" in prompt


def test_product_without_summary_or_fee():
    """Required fields stay; the two absent optional lines disappear."""
    product = make_product(summary=None, processing_fee_pct=None)
    prompt = build_grounded_prompt(product, "What's the interest rate?")

    assert "Summary:" not in prompt
    assert "Processing Fee:" not in prompt
    for line in _REQUIRED_LINES:
        assert line in prompt


# -- FAQ --


def test_empty_faq_has_no_section():
    prompt = build_grounded_prompt(make_product(faq=[]), "Hi")
    assert "FREQUENTLY ASKED QUESTIONS" not in prompt
    assert "Q1:" not in prompt


def test_faq_numbered_in_stored_order():
    faq = [
        {"q": "First question?", "a": "First answer."},
        {"q": "Second question?", "a": "Second answer."},
        {"q": "Third question?", "a": "Third answer."},
    ]
    prompt = build_grounded_prompt(make_product(faq=faq), "Hi")

    assert prompt.count("FREQUENTLY ASKED QUESTIONS:") == 1
    for i, entry in enumerate(faq, start=1):
        assert f"Q{i}: {entry['q']}" in prompt
        assert f"A{i}: {entry['a']}" in prompt
    assert "Q4:" not in prompt
    assert prompt.index("Q1:") < prompt.index("Q2:") < prompt.index("Q3:")


# -- History --


def test_no_history_has_no_section():
    prompt = build_grounded_prompt(make_product(), "Hi")
    assert "PREVIOUS CONVERSATION" not in prompt


def test_history_rendered_in_order_with_upper_case_roles():
    history = [
        ChatTurn(role=ChatRole.USER, content="What's the APR?"),
        ChatTurn(role=ChatRole.ASSISTANT, content="The APR is 8.9%."),
    ]
    prompt = build_grounded_prompt(make_product(), "And the fee?", history)

    assert "PREVIOUS CONVERSATION:\nUSER: What's the APR?\nASSISTANT: The APR is 8.9%." in prompt


# -- Section order and rules --


def test_sections_appear_in_order():
    history = [ChatTurn(role=ChatRole.USER, content="Hello")]
    prompt = build_grounded_prompt(make_product(), "What's the interest rate?", history)

    positions = [
        prompt.index("PRODUCT INFORMATION:"),
        prompt.index("FREQUENTLY ASKED QUESTIONS:"),
        prompt.index("PREVIOUS CONVERSATION:"),
        prompt.index("CRITICAL RULES:"),
        prompt.index("USER QUESTION: What's the interest rate?"),
        prompt.index(CLOSING_DIRECTIVE),
    ]
    assert positions == sorted(positions)
    assert prompt.endswith(CLOSING_DIRECTIVE)


def test_instruction_names_product_and_bank_and_five_rules():
    prompt = build_grounded_prompt(make_product(), "Hi")

    assert 'understand the "Quick Personal Loan" loan product from HDFC Bank' in prompt
    for n in range(1, 6):
        assert f"\n{n}. " in prompt
    assert "\n6. " not in prompt
    assert "I don't have that specific information in our product database" in prompt


def test_rendering_is_deterministic():
    product = make_product()
    history = [ChatTurn(role=ChatRole.USER, content="Hello")]
    first = build_grounded_prompt(product, "What's the interest rate?", history)
    second = build_grounded_prompt(product, "What's the interest rate?", history)
    assert first == second


def test_question_is_embedded_literally():
    question = 'Is the "Quick" loan OK for {students}?'
    prompt = build_grounded_prompt(make_product(), question)
    assert f"USER QUESTION: {question}" in prompt


@pytest.mark.parametrize("question", ["", "   "])
def test_blank_question_rejected(question):
    with pytest.raises(ValueError, match="non-empty"):
        build_grounded_prompt(make_product(), question)
