"""
Adoption request lifecycle.

The backend enforces these rules; the UI mirrors them so it never offers an
action the backend would refuse.

    PENDING ──> APPROVED   (animal owner)
    PENDING ──> REJECTED   (animal owner)
    PENDING ──> CANCELLED  (requester)

APPROVED, REJECTED and CANCELLED are terminal.
"""

from enum import Enum
from typing import Optional


class RequestStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


# Statuses an animal owner may move a request to
OWNER_DECISIONS = (RequestStatus.APPROVED, RequestStatus.REJECTED)

ALLOWED_TRANSITIONS: dict[RequestStatus, frozenset[RequestStatus]] = {
    RequestStatus.PENDING: frozenset({
        RequestStatus.APPROVED,
        RequestStatus.REJECTED,
        RequestStatus.CANCELLED,
    }),
    RequestStatus.APPROVED: frozenset(),
    RequestStatus.REJECTED: frozenset(),
    RequestStatus.CANCELLED: frozenset(),
}


def parse_status(value: Optional[str]) -> Optional[RequestStatus]:
    """Map a raw status string to RequestStatus, or None if unknown."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return RequestStatus(value.strip().upper())
    except ValueError:
        return None


def is_actionable(status: Optional[str]) -> bool:
    """True if the request can still be approved, rejected or cancelled."""
    return parse_status(status) is RequestStatus.PENDING


def can_transition(current: Optional[str], target: RequestStatus) -> bool:
    """Check a transition against the lifecycle above. Unknown statuses can't move."""
    parsed = parse_status(current)
    if parsed is None:
        return False
    return target in ALLOWED_TRANSITIONS[parsed]
