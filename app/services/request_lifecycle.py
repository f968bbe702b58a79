"""
Status vocabulary for service requests.

Any status in the vocabulary is an accepted target from any current status;
no ordering between them is enforced. Values outside the vocabulary are
rejected before the store is touched.
"""

from typing import Any

from app.core.exceptions import InvalidStatusError
from app.db.models.request import RequestStatus

VALID_STATUSES = frozenset(status.value for status in RequestStatus)


def parse_status(value: Any) -> RequestStatus:
    """
    Return the RequestStatus for ``value`` or raise InvalidStatusError.

    Matching is exact on the display value ("In Progress").
    """
    if isinstance(value, RequestStatus):
        return value
    if not isinstance(value, str) or value not in VALID_STATUSES:
        raise InvalidStatusError(value)
    return RequestStatus(value)
