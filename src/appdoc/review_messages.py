"""Human-readable explanation for an application placed in review."""

from __future__ import annotations

IN_REVIEW_PREFIX = "Your application has been placed in review"

ADDRESS_CLAUSE = " pending outstanding address verification for FICA purposes."
BANK_CLAUSE = " pending outstanding bank account verification."
SUSPICIOUS_ACTIVITY_CLAUSE = (
    " because of suspicious account behaviour. Please contact support ASAP."
)

# First match wins, so order is significant.
_REASON_CLAUSES: tuple[tuple[str, str], ...] = (
    ("address", ADDRESS_CLAUSE),
    ("bank", BANK_CLAUSE),
)


def in_review_message(reason: str | None) -> str:
    """Build the in-review message for a review *reason*.

    Matching is a case-insensitive substring test.  An empty or missing
    reason falls through to the suspicious-activity clause.
    """
    text = (reason or "").casefold()
    for keyword, clause in _REASON_CLAUSES:
        if keyword in text:
            return IN_REVIEW_PREFIX + clause
    return IN_REVIEW_PREFIX + SUSPICIOUS_ACTIVITY_CLAUSE
