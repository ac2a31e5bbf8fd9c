"""쿼리 조각 모델과 위치 파라미터 빌더.

Query fragment model and positional-parameter builder.
A fragment is an ordered list of SQL clauses carrying ``$N`` placeholders
plus the ordered list of values those placeholders bind. Placeholder ``$N``
always binds ``values[N - start]``.

Usage:
    builder = FragmentBuilder()
    builder.add('"name"=', "Acme")
    builder.add('"num_employees"=', 2)
    fragment = builder.build()
    fragment.join(", ")   # '"name"=$1, "num_employees"=$2'
    fragment.values       # ("Acme", 2)
    fragment.next_index   # 3
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class QueryFragment:
    """SQL 조각과 위치 정렬된 바인딩 값.

    SQL clauses with their positionally aligned bound values.

    Attributes:
        clauses: ``$N`` 플레이스홀더를 포함한 SQL 절 목록 (Ordered clause strings)
        values: 플레이스홀더 순서와 동일한 값 목록 (Values in placeholder order)
        start: 첫 플레이스홀더 번호 (Index of the first placeholder)
    """

    clauses: tuple[str, ...]
    values: tuple[Any, ...]
    start: int = 1

    @property
    def next_index(self) -> int:
        """템플릿이 뒤에 붙일 다음 플레이스홀더 번호: Next free placeholder index."""
        return self.start + len(self.values)

    def join(self, separator: str) -> str:
        return separator.join(self.clauses)


class FragmentBuilder:
    """플레이스홀더 카운터를 소유하는 조각 빌더.

    Owns the placeholder counter and appends (clause, value) pairs together,
    so clause text and value order cannot drift apart.
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("Placeholder numbering starts at 1")
        self._start: int = start
        self._next: int = start
        self._clauses: list[str] = []
        self._values: list[Any] = []

    def add(self, prefix: str, value: Any) -> str:
        """절 접두어 뒤에 새 플레이스홀더를 붙이고 값을 등록합니다.

        Append ``prefix`` followed by the next placeholder and bind ``value``
        to it. Returns the emitted clause.
        """
        clause: str = f"{prefix}${self._next}"
        self._next += 1
        self._clauses.append(clause)
        self._values.append(value)
        return clause

    def __len__(self) -> int:
        return len(self._values)

    def build(self) -> QueryFragment:
        return QueryFragment(
            clauses=tuple(self._clauses),
            values=tuple(self._values),
            start=self._start,
        )


def map_column(field: str, overrides: Mapping[str, str] | None = None) -> str:
    """논리 필드명을 물리 컬럼명으로 변환합니다.

    Map a logical field name to its column name. Fields without an override
    map to themselves.

    Example:
        map_column("numEmployees", {"numEmployees": "num_employees"})  # "num_employees"
        map_column("name", {"numEmployees": "num_employees"})          # "name"
    """
    if overrides and field in overrides:
        return overrides[field]
    return field


def quote_identifier(name: str) -> str:
    """식별자를 큰따옴표로 감쌉니다. 내부 따옴표는 두 번 씁니다: Quote an SQL identifier."""
    return '"' + name.replace('"', '""') + '"'
