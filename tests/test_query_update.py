"""부분 업데이트 조각 생성 유닛 테스트.

Unit tests for column mapping, the fragment builder and build_update.
"""

import pytest

from app.query import (
    FragmentBuilder,
    QueryBuildError,
    QueryErrorKind,
    build_update,
    map_column,
    quote_identifier,
)


class TestMapColumn:
    """필드명 → 컬럼명 매핑."""

    def test_override(self):
        assert map_column("numEmployees", {"numEmployees": "num_employees"}) == "num_employees"

    def test_identity_without_override(self):
        assert map_column("name", {"numEmployees": "num_employees"}) == "name"

    def test_identity_without_table(self):
        assert map_column("title") == "title"
        assert map_column("title", {}) == "title"


class TestQuoteIdentifier:
    def test_plain(self):
        assert quote_identifier("name") == '"name"'

    def test_embedded_quote_is_doubled(self):
        assert quote_identifier('na"me') == '"na""me"'


class TestFragmentBuilder:
    """플레이스홀더 카운터."""

    def test_numbers_placeholders_in_order(self):
        builder = FragmentBuilder()
        assert builder.add("a = ", 10) == "a = $1"
        assert builder.add("b = ", 20) == "b = $2"
        fragment = builder.build()
        assert fragment.clauses == ("a = $1", "b = $2")
        assert fragment.values == (10, 20)
        assert fragment.next_index == 3
        assert len(builder) == 2

    def test_custom_start(self):
        builder = FragmentBuilder(start=4)
        builder.add("a = ", "x")
        fragment = builder.build()
        assert fragment.clauses == ("a = $4",)
        assert fragment.next_index == 5

    def test_start_below_one_rejected(self):
        with pytest.raises(ValueError):
            FragmentBuilder(start=0)

    def test_join(self):
        builder = FragmentBuilder()
        builder.add("a = ", 1)
        builder.add("b = ", 2)
        assert builder.build().join(" AND ") == "a = $1 AND b = $2"


class TestBuildUpdate:
    """build_update 동작 검증."""

    def test_company_example(self):
        data = {"name": "Acme", "numEmployees": 2, "description": "desc"}
        fragment = build_update(data, {"numEmployees": "num_employees"})
        assert fragment.clauses == ('"name"=$1', '"num_employees"=$2', '"description"=$3')
        assert fragment.values == ("Acme", 2, "desc")
        assert fragment.join(", ") == '"name"=$1, "num_employees"=$2, "description"=$3'
        assert fragment.next_index == 4

    @pytest.mark.parametrize("size", [1, 3, 7])
    def test_one_clause_per_field(self, size):
        data = {f"field{i}": i * 10 for i in range(size)}
        fragment = build_update(data)
        assert len(fragment.clauses) == size
        assert len(fragment.values) == size
        for index, (clause, value) in enumerate(zip(fragment.clauses, fragment.values), start=1):
            assert clause == f'"field{index - 1}"=${index}'
            assert value == (index - 1) * 10

    def test_follows_insertion_order(self):
        fragment = build_update({"salary": 1, "title": "t", "equity": None})
        assert fragment.clauses == ('"salary"=$1', '"title"=$2', '"equity"=$3')
        assert fragment.values == (1, "t", None)

    def test_values_passed_through_untouched(self):
        payload = {"nested": [1, 2]}
        fragment = build_update({"meta": payload})
        assert fragment.values[0] is payload

    def test_custom_start_index(self):
        fragment = build_update({"title": "t"}, start=3)
        assert fragment.clauses == ('"title"=$3',)
        assert fragment.next_index == 4

    def test_quotes_mapped_column(self):
        fragment = build_update({"bad": 1}, {"bad": 'x" = 1; --'})
        assert fragment.clauses == ('"x"" = 1; --"=$1',)

    @pytest.mark.parametrize("overrides", [None, {}, {"numEmployees": "num_employees"}])
    def test_empty_data_rejected(self, overrides):
        with pytest.raises(QueryBuildError) as exc_info:
            build_update({}, overrides)
        assert exc_info.value.kind is QueryErrorKind.EMPTY_INPUT
