"""쿼리 생성 오류 정의.

Query build errors. The query layer never raises HTTP exceptions;
services translate these into client errors.
"""

from enum import Enum


class QueryErrorKind(str, Enum):
    """쿼리 조각 생성 실패 유형: Kinds of query fragment build failures."""

    EMPTY_INPUT = "empty_input"  # 업데이트/필터 데이터 없음 (No fields given)
    UNRECOGNIZED_FIELD = "unrecognized_field"  # 허용되지 않은 필터 키 (Key outside the family)
    INVALID_RANGE = "invalid_range"  # 최소값 > 최대값 (Minimum exceeds maximum)
    INVALID_VALUE = "invalid_value"  # 숫자 필드에 숫자가 아닌 값 (Non-numeric bound)


class QueryBuildError(ValueError):
    """쿼리 조각을 만들 수 없을 때 발생하는 예외.

    Raised when a fragment cannot be built from the given input.
    Always raised before any statement reaches the database.

    Attributes:
        kind: 실패 유형 (Failure kind)
        detail: 사람이 읽을 수 있는 메시지 (Human-readable message)
        field: 문제가 된 필드 이름, 해당 시 (Offending field name, if any)
    """

    def __init__(self, kind: QueryErrorKind, detail: str, field: str | None = None) -> None:
        super().__init__(detail)
        self.kind: QueryErrorKind = kind
        self.detail: str = detail
        self.field: str | None = field
