"""쿼리 조각 패키지: 부분 업데이트/필터용 SQL 조각 생성.

Query fragment package: Builds parameterized SQL fragments for partial
updates (assignment lists) and partial filters (predicate lists).
Everything here is pure and synchronous; execution lives in the repositories.
"""

from app.query.errors import QueryBuildError, QueryErrorKind
from app.query.fragment import FragmentBuilder, QueryFragment, map_column, quote_identifier
from app.query.filters import (
    COMPANY_FILTERS,
    JOB_FILTERS,
    EQUITY_THRESHOLD,
    Comparison,
    FilterFamily,
    FilterField,
    build_filter,
)
from app.query.update import build_update

__all__ = [
    "COMPANY_FILTERS",
    "EQUITY_THRESHOLD",
    "JOB_FILTERS",
    "Comparison",
    "FilterFamily",
    "FilterField",
    "FragmentBuilder",
    "QueryBuildError",
    "QueryErrorKind",
    "QueryFragment",
    "build_filter",
    "build_update",
    "map_column",
    "quote_identifier",
]
