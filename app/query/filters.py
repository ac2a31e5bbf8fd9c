"""엔티티별 필터 조건(WHERE) 조각 생성.

Per-entity filter predicate builder.
Each entity has a closed filter family: a table mapping every recognized
query key to its column, comparison operator and value coercion. Adding or
auditing a filter is a change to the table below, not to control flow.

Filter families:
    - COMPANY_FILTERS: nameLike, minEmployees, maxEmployees
    - JOB_FILTERS: title, minSalary, hasEquity
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping

from app.query.coercion import (
    EQUITY_THRESHOLD,
    coerce_equity_flag,
    coerce_number,
    coerce_substring,
    is_number,
)
from app.query.errors import QueryBuildError, QueryErrorKind
from app.query.fragment import FragmentBuilder, QueryFragment

__all__ = [
    "COMPANY_FILTERS",
    "EQUITY_THRESHOLD",
    "JOB_FILTERS",
    "Comparison",
    "FilterFamily",
    "FilterField",
    "build_filter",
]


class Comparison(str, Enum):
    """필터 비교 연산자: Comparison operators a filter field may use."""

    ILIKE = "ILIKE"  # 대소문자 무시 부분 일치 (Case-insensitive containment)
    GTE = ">="
    LTE = "<="


@dataclass(frozen=True)
class FilterField:
    """인식되는 필터 키 하나의 정의.

    Definition of one recognized filter key.

    Attributes:
        column: 비교할 컬럼명 (Column compared against)
        comparison: 비교 연산자 (Fixed comparison operator)
        coerce: 원시 텍스트 값 변환 함수 (Raw value coercion)
        numeric: 변환된 값이 숫자여야 하는지 (Whether the coerced value must be a number)
        integer: 정수 컬럼 여부 (Column is an integer; bounds are bound as ints)
    """

    column: str
    comparison: Comparison
    coerce: Callable[[Any], Any]
    numeric: bool = False
    integer: bool = False

    @property
    def prefix(self) -> str:
        return f"{self.column} {self.comparison.value} "

    def bind(self, value: Any) -> Any:
        """바인딩 값 변환: 정수 컬럼의 소수 경계는 안쪽으로 반올림.

        The driver truncates floats bound to integer parameters, so a
        fractional bound on an integer column is rounded inward first:
        ``>= 1000.5`` binds 1001 and ``<= 10.8`` binds 10.
        """
        if not self.integer or isinstance(value, int):
            return value
        if self.comparison is Comparison.GTE:
            return math.ceil(value)
        if self.comparison is Comparison.LTE:
            return math.floor(value)
        return value


@dataclass(frozen=True)
class FilterFamily:
    """한 엔티티가 허용하는 필터 키 집합.

    The closed set of filter keys one entity accepts.

    Attributes:
        name: 엔티티 이름, 오류 메시지용 (Entity name for error messages)
        fields: 쿼리 키 → 필드 정의 (Query key to field definition)
        ranges: (최소 키, 최대 키) 쌍: 최소 > 최대 이면 오류
                ((min key, max key) pairs rejected when min > max)
    """

    name: str
    fields: Mapping[str, FilterField]
    ranges: tuple[tuple[str, str], ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def coerce(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """원시 필터 값을 타입 변환합니다.

        Coerce raw text-valued criteria with each field's coercion.
        Unrecognized keys are passed through untouched so that
        :func:`build_filter` reports them.
        """
        typed: dict[str, Any] = {}
        for key, value in raw.items():
            filter_field: FilterField | None = self.fields.get(key)
            typed[key] = filter_field.coerce(value) if filter_field else value
        return typed


COMPANY_FILTERS: FilterFamily = FilterFamily(
    name="company",
    fields={
        "nameLike": FilterField("name", Comparison.ILIKE, coerce_substring),
        "minEmployees": FilterField("num_employees", Comparison.GTE, coerce_number, numeric=True, integer=True),
        "maxEmployees": FilterField("num_employees", Comparison.LTE, coerce_number, numeric=True, integer=True),
    },
    ranges=(("minEmployees", "maxEmployees"),),
)

JOB_FILTERS: FilterFamily = FilterFamily(
    name="job",
    fields={
        "title": FilterField("title", Comparison.ILIKE, coerce_substring),
        "minSalary": FilterField("salary", Comparison.GTE, coerce_number, numeric=True, integer=True),
        "hasEquity": FilterField("equity", Comparison.GTE, coerce_equity_flag, numeric=True),
    },
)


def build_filter(criteria: Mapping[str, Any], family: FilterFamily) -> QueryFragment:
    """변환된 필터 값으로 WHERE 조건 조각을 만듭니다.

    Build the predicates for a filtered search. Predicates follow the
    mapping's iteration order and are meant to be joined with ``" AND "``.

    Args:
        criteria: 변환된 필터 값 (Coerced criteria, see ``FilterFamily.coerce``)
        family: 엔티티 필터 정의 (The entity's filter family)

    Returns:
        QueryFragment: 조건 절과 정렬된 값 (Predicates and aligned values)

    Raises:
        QueryBuildError: 빈 입력, 미인식 키, 숫자가 아닌 값, 최소 > 최대
                         (EMPTY_INPUT, UNRECOGNIZED_FIELD, INVALID_VALUE, INVALID_RANGE)

    Example:
        build_filter({"title": "%j%", "minSalary": 1000}, JOB_FILTERS).join(" AND ")
        # "title ILIKE $1 AND salary >= $2"
    """
    if not criteria:
        raise QueryBuildError(QueryErrorKind.EMPTY_INPUT, "No data")

    unknown: list[str] = [key for key in criteria if key not in family.fields]
    if unknown:
        raise QueryBuildError(
            QueryErrorKind.UNRECOGNIZED_FIELD,
            f"Unrecognized {family.name} filter: {', '.join(unknown)}",
            field=unknown[0],
        )

    for key, value in criteria.items():
        if family.fields[key].numeric and not is_number(value):
            raise QueryBuildError(
                QueryErrorKind.INVALID_VALUE,
                f"{key} must be a number",
                field=key,
            )

    for low, high in family.ranges:
        if low in criteria and high in criteria and criteria[low] > criteria[high]:
            raise QueryBuildError(
                QueryErrorKind.INVALID_RANGE,
                f"Filter request failed: {low} > {high}",
                field=low,
            )

    builder: FragmentBuilder = FragmentBuilder()
    for key, value in criteria.items():
        filter_field: FilterField = family.fields[key]
        builder.add(filter_field.prefix, filter_field.bind(value))
    return builder.build()
