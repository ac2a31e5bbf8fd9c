"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these; FastAPI turns them into JSON error responses
of the form ``{"detail": ...}``.

Usage:
    from app.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("No job: 7")
    raise BadRequestError.from_query_error(exc)
"""

from fastapi import HTTPException, status

from app.query.errors import QueryBuildError


class NotFoundError(HTTPException):
    """404 Not Found: 대상 행이 없거나 필터 검색 결과가 비었을 때.

    Raised when a company/job key matches no row, or a filtered search
    matches zero rows.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict: 이미 존재하는 회사 handle로 생성 시도 시."""

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden: 관리자 전용 작업을 일반 사용자가 요청할 때."""

    def __init__(self, detail: str = "Admin privileges required") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized: 토큰이 없거나 유효하지 않을 때."""

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외: 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised for request data Pydantic does not catch: empty updates, unknown
    filter keys, non-numeric bounds, and min > max ranges.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

    @classmethod
    def from_query_error(cls, exc: QueryBuildError) -> "BadRequestError":
        return cls(exc.detail)
