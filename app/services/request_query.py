"""
Query building for service-request listings.

Translates the optional ``status``, ``service`` and ``search`` query
parameters into SQLAlchemy filter clauses. ``status`` and ``service`` are
exact matches where ``"all"`` (or an empty value) disables the filter;
``search`` is a case-insensitive literal substring match against name, email
or service. The three filters are ANDed together.
"""

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import Select, func, or_, select
from sqlalchemy.sql.elements import ColumnElement

from app.db.models.request import Request

ALL = "all"
RECENT_LIMIT = 10

SEARCH_FIELDS = (Request.name, Request.email, Request.service)

LIST_FIELDS = (
    Request.id,
    Request.name,
    Request.email,
    Request.phone,
    Request.service,
    Request.description,
    Request.status,
    Request.date,
)

RECENT_FIELDS = (
    Request.id,
    Request.name,
    Request.service,
    Request.phone,
    Request.description,
    Request.date,
    Request.status,
)


def _normalize(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == ALL:
        return None
    return value


@dataclass(frozen=True)
class RequestFilter:
    status: Optional[str] = None
    service: Optional[str] = None
    search: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        status: Optional[str] = None,
        service: Optional[str] = None,
        search: Optional[str] = None,
    ) -> "RequestFilter":
        search = search.strip() if search else None
        return cls(
            status=_normalize(status),
            service=_normalize(service),
            search=search or None,
        )

    def clauses(self) -> List[ColumnElement]:
        clauses: List[ColumnElement] = []
        if self.status is not None:
            clauses.append(Request.status == self.status)
        if self.service is not None:
            clauses.append(Request.service == self.service)
        if self.search is not None:
            needle = self.search.lower()
            clauses.append(or_(*(
                func.lower(field).contains(needle, autoescape=True)
                for field in SEARCH_FIELDS
            )))
        return clauses


def build_request_query(request_filter: RequestFilter) -> Select:
    """
    Filtered listing, newest first, projected to the listing fields.
    """
    query = select(*LIST_FIELDS)
    clauses = request_filter.clauses()
    if clauses:
        query = query.where(*clauses)
    return query.order_by(Request.date.desc(), Request.created_at.desc())


def build_recent_query(limit: int = RECENT_LIMIT) -> Select:
    return (
        select(*RECENT_FIELDS)
        .order_by(Request.date.desc(), Request.created_at.desc())
        .limit(limit)
    )
