"""입력값 검증 / 표시용 포맷 유틸

브라우저 폼에서 들어오는 값은 문자열일 수도, 숫자일 수도 있음
숫자 부분만 앞에서부터 읽어서 float 으로 변환 ("12abc" -> 12.0)
"""

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

CURRENCY_SYMBOL = "¥"
_CENT = Decimal("0.01")
_CURRENCY_CONTEXT = Context(prec=400)  # float 최대값(309자리)도 quantize 가능

MONTHLY_SALARY_RANGE = (0, 1_000_000)
WORK_DAYS_PER_WEEK_RANGE = (1, 7)
HOURS_PER_DAY_RANGE = (1, 24)

# ASCII 숫자만 인정 ("١٢" 같은 유니코드 숫자는 숫자가 아님)
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_PREFIX = re.compile(r"([+-]?)Infinity")


def parse_float(value) -> Optional[float]:
    """앞부분의 숫자만 float 으로 변환. 숫자가 아니면 None"""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            num = float(value)
        except OverflowError:
            # float 범위를 넘는 정수는 무한대로 취급 -> 범위 검사에서 걸러짐
            return -math.inf if value < 0 else math.inf
        return None if math.isnan(num) else num

    text = str(value).lstrip()
    match = _NUMBER_PREFIX.match(text)
    if match:
        return float(match.group(0))

    match = _INFINITY_PREFIX.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    return None


def is_valid_number(value, min_value: float, max_value: float) -> bool:
    num = parse_float(value)
    return num is not None and min_value <= num <= max_value


def is_valid_monthly_salary(value) -> bool:
    return is_valid_number(value, *MONTHLY_SALARY_RANGE)


def is_valid_work_days_per_week(value) -> bool:
    return is_valid_number(value, *WORK_DAYS_PER_WEEK_RANGE)


def is_valid_hours_per_day(value) -> bool:
    return is_valid_number(value, *HOURS_PER_DAY_RANGE)


def format_currency(amount) -> str:
    """
    금액을 "¥1234.50" 형태로 변환
    NaN / 무한대는 0원으로 표시 (0으로 나눈 결과가 화면에 나가지 않도록)
    소수 셋째 자리는 사사오입 (0.125 -> 0.13)
    """
    try:
        amount = float(amount)
    except (TypeError, ValueError, OverflowError):
        amount = 0.0
    if math.isnan(amount) or math.isinf(amount):
        amount = 0.0
    rounded = Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP, context=_CURRENCY_CONTEXT)
    return f"{CURRENCY_SYMBOL}{rounded}"


def sanitize_input(value) -> float:
    num = parse_float(value)
    return 0.0 if num is None else num
