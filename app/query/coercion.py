"""필터 값 타입 변환 함수.

Filter value coercion. Query string values arrive as text; these functions
turn them into what the predicate builder binds. Coercion is permissive:
text that cannot be converted is returned unchanged and rejected later by
the builder, never here.
"""

import math
from typing import Any

# hasEquity=true 일 때 사용하는 최소 지분 임계값
# Smallest stake treated as "has equity": every positive stored equity is >= it, zero is not
EQUITY_THRESHOLD: float = 0.0001


def is_number(value: Any) -> bool:
    """bool을 제외한 유한한 int/float 여부: True for finite ints/floats, excluding bools."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def coerce_number(value: Any) -> Any:
    """숫자 문자열을 int 또는 float로 변환합니다.

    Parse integral text as ``int`` and other numeric text as ``float``.
    Numbers pass through unchanged; anything else is returned as-is.
    """
    if is_number(value) or not isinstance(value, str):
        return value
    text: str = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        parsed: float = float(text)
    except ValueError:
        return value
    return parsed if math.isfinite(parsed) else value


def coerce_equity_flag(value: Any) -> Any:
    """hasEquity 플래그를 지분 임계값으로 변환합니다.

    ``"true"`` becomes :data:`EQUITY_THRESHOLD`; any other text becomes ``0``,
    which every row satisfies (false means "don't filter", not "no equity").
    An already-numeric threshold is kept.
    """
    if value is True or value == "true":
        return EQUITY_THRESHOLD
    if is_number(value):
        return value
    return 0


def coerce_substring(value: Any) -> str:
    """부분 일치 패턴으로 감쌉니다: Wrap a value as a ``%value%`` containment pattern."""
    return f"%{value}%"
