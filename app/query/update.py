"""부분 업데이트 SET 절 생성.

Partial update fragment builder: turns a field/value mapping into the
assignment list of an ``UPDATE ... SET`` statement.
"""

from typing import Any, Mapping

from app.query.errors import QueryBuildError, QueryErrorKind
from app.query.fragment import FragmentBuilder, QueryFragment, map_column, quote_identifier


def build_update(
    data: Mapping[str, Any],
    overrides: Mapping[str, str] | None = None,
    start: int = 1,
) -> QueryFragment:
    """업데이트할 필드로 SET 절 조각을 만듭니다.

    Build the assignment clauses for a partial update.
    Keys are emitted in the mapping's insertion order; values are passed
    through untouched. The caller appends its own trailing placeholder for
    the row key at ``fragment.next_index``.

    Args:
        data: 변경할 필드와 값 (Field name to new value, non-empty)
        overrides: 불규칙한 컬럼명 매핑 (Field name to column name overrides)
        start: 첫 플레이스홀더 번호 (First placeholder index)

    Returns:
        QueryFragment: ``"column"=$N`` 절과 정렬된 값 (Clauses and aligned values)

    Raises:
        QueryBuildError: 데이터가 비어 있을 때 (EMPTY_INPUT when ``data`` is empty)

    Example:
        build_update({"name": "Acme", "numEmployees": 2}, {"numEmployees": "num_employees"})
        # clauses ('"name"=$1', '"num_employees"=$2'), values ("Acme", 2)
    """
    if not data:
        raise QueryBuildError(QueryErrorKind.EMPTY_INPUT, "No data")

    builder: FragmentBuilder = FragmentBuilder(start)
    for field, value in data.items():
        builder.add(f"{quote_identifier(map_column(field, overrides))}=", value)
    return builder.build()
