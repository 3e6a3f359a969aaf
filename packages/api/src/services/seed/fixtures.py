# This project was developed with assistance from AI tools.
"""
Demo fixture data for the loan product catalog.

All fixture data is defined as Python dicts so enums can be referenced directly
and type-checked. FAQ entries use the ``{"q", "a"}`` shape the prompt builder
reads.

Simulated for demonstration purposes -- not real financial data.
"""

import hashlib
import json

from db.enums import DisbursalSpeed, DocsLevel, LoanType

# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

PRODUCTS = [
    # Personal loans
    {
        "name": "Quick Personal Loan",
        "bank": "HDFC Bank",
        "type": LoanType.PERSONAL,
        "rate_apr": 8.9,
        "min_income": 20000,
        "min_credit_score": 700,
        "tenure_min_months": 12,
        "tenure_max_months": 60,
        "processing_fee_pct": 2,
        "prepayment_allowed": True,
        "disbursal_speed": DisbursalSpeed.FAST,
        "docs_level": DocsLevel.MINIMAL,
        "summary": "Low interest personal loan with fast approval and no prepayment penalty.",
        "faq": [
            {
                "q": "What documents are needed?",
                "a": "ID proof (Aadhaar/PAN), last 3 months salary slips, "
                "and 6 months bank statements.",
            },
        ],
        "terms": {"late_fee": 500, "foreclosure_charges": "2% of principal amount"},
        "match_score": 95,
    },
    {
        "name": "Salaried Personal Loan",
        "bank": "ICICI Bank",
        "type": LoanType.PERSONAL,
        "rate_apr": 9.2,
        "min_income": 25000,
        "min_credit_score": 720,
        "tenure_min_months": 12,
        "tenure_max_months": 84,
        "processing_fee_pct": 2.5,
        "prepayment_allowed": True,
        "disbursal_speed": DisbursalSpeed.STANDARD,
        "docs_level": DocsLevel.STANDARD,
        "summary": "Flexible tenure options with competitive rates for salaried professionals.",
        "faq": [
            {
                "q": "What is the maximum loan amount?",
                "a": "Up to 40 lakhs based on your income and credit score.",
            },
        ],
        "terms": {"late_fee": 500, "foreclosure_charges": "2% of principal amount"},
        "match_score": 88,
    },
    # Education
    {
        "name": "Education Loan Plus",
        "bank": "SBI",
        "type": LoanType.EDUCATION,
        "rate_apr": 7.5,
        "min_income": 15000,
        "min_credit_score": 650,
        "tenure_min_months": 60,
        "tenure_max_months": 180,
        "processing_fee_pct": 1,
        "prepayment_allowed": False,
        "disbursal_speed": DisbursalSpeed.FAST,
        "docs_level": DocsLevel.STANDARD,
        "summary": "Low-rate education loan for studying in India or abroad.",
        "faq": [
            {
                "q": "Does it cover living expenses?",
                "a": "Yes, covers tuition, books, accommodation, and other "
                "study-related expenses.",
            },
        ],
        "terms": {"late_fee": 300, "foreclosure_charges": "3% of principal amount"},
        "match_score": 82,
    },
    # Vehicle
    {
        "name": "Vehicle Finance",
        "bank": "Axis Bank",
        "type": LoanType.VEHICLE,
        "rate_apr": 10.5,
        "min_income": 30000,
        "min_credit_score": 680,
        "tenure_min_months": 12,
        "tenure_max_months": 84,
        "processing_fee_pct": 3,
        "prepayment_allowed": True,
        "disbursal_speed": DisbursalSpeed.STANDARD,
        "docs_level": DocsLevel.STANDARD,
        "summary": "Finance your dream car or bike with flexible EMI options.",
        "faq": [
            {
                "q": "Can I finance a used vehicle?",
                "a": "Yes, we finance both new and used vehicles up to 5 years old.",
            },
        ],
        "terms": {"late_fee": 800, "foreclosure_charges": "4% of principal amount"},
        "match_score": 76,
    },
    # Home
    {
        "name": "Home Loan Express",
        "bank": "Kotak Mahindra",
        "type": LoanType.HOME,
        "rate_apr": 8.3,
        "min_income": 50000,
        "min_credit_score": 750,
        "tenure_min_months": 120,
        "tenure_max_months": 300,
        "processing_fee_pct": 0.5,
        "prepayment_allowed": False,
        "disbursal_speed": DisbursalSpeed.STANDARD,
        "docs_level": DocsLevel.EXTENSIVE,
        "summary": "Affordable home loan with low processing fees and attractive rates.",
        "faq": [
            {
                "q": "What is the maximum loan amount?",
                "a": "Up to 5 crores based on property value and income.",
            },
        ],
        "terms": {"late_fee": 1000, "foreclosure_charges": "2% of principal amount"},
        "match_score": 70,
    },
    # Business
    {
        "name": "Business Credit Line",
        "bank": "HDFC Bank",
        "type": LoanType.CREDIT_LINE,
        "rate_apr": 11.5,
        "min_income": 40000,
        "min_credit_score": 720,
        "tenure_min_months": 12,
        "tenure_max_months": 36,
        "processing_fee_pct": 2.5,
        "prepayment_allowed": True,
        "disbursal_speed": DisbursalSpeed.FAST,
        "docs_level": DocsLevel.STANDARD,
        "summary": "Flexible credit line for business owners. Pay interest only on amount used.",
        "faq": [
            {
                "q": "What is the maximum credit limit?",
                "a": "Up to 50 lakhs based on business turnover and credit profile.",
            },
        ],
        "terms": {"late_fee": 1000, "foreclosure_charges": "3% of principal amount"},
        "match_score": 62,
    },
]


def compute_config_hash() -> str:
    """Compute a SHA-256 hash of the fixture data for idempotency checks."""
    content = json.dumps(PRODUCTS, sort_keys=True, default=str)
    return hashlib.sha256(content.encode()).hexdigest()
