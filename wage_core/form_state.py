"""
계산 폼 상태 관리

코드 요약:
→ 세 입력칸(월급, 주 근무일수, 하루 근무시간)의 원본 값과 검증 상태를 보관
값이 바뀔 때마다 해당 칸을 다시 검증해서 valid / invalid 로 전환
세 칸이 모두 valid 일 때만 계산 가능 상태가 되고, 그때만 rate_engine 을 호출
하나라도 invalid 면 결과 대신 검증 메시지를 돌려줌
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from schemas import WageReport, WorkInput
from wage_core.rate_engine import compute_wage_report, value_difference_percent
from wage_core.validation import (
    HOURS_PER_DAY_RANGE,
    MONTHLY_SALARY_RANGE,
    WORK_DAYS_PER_WEEK_RANGE,
    is_valid_hours_per_day,
    is_valid_monthly_salary,
    is_valid_work_days_per_week,
    sanitize_input,
)

logger = logging.getLogger(__name__)


class FieldState(str, Enum):
    UNVALIDATED = "unvalidated"
    VALID = "valid"
    INVALID = "invalid"


class UnknownFieldError(KeyError):
    pass


# 필드명 -> (검증 함수, 허용 범위, 안내 메시지)
FIELD_RULES: Dict[str, Tuple[Callable[[object], bool], Tuple[float, float], str]] = {
    "monthlySalary": (
        is_valid_monthly_salary,
        MONTHLY_SALARY_RANGE,
        "Monthly salary must be a number between 0 and 1000000",
    ),
    "workDaysPerWeek": (
        is_valid_work_days_per_week,
        WORK_DAYS_PER_WEEK_RANGE,
        "Work days per week must be a number between 1 and 7",
    ),
    "hoursPerDay": (
        is_valid_hours_per_day,
        HOURS_PER_DAY_RANGE,
        "Hours per day must be a number between 1 and 24",
    ),
}

DEFAULT_VALUES = {
    "monthlySalary": 10000,
    "workDaysPerWeek": 5,
    "hoursPerDay": 8,
}


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    min: float
    max: float


@dataclass(frozen=True)
class FormResult:
    states: Dict[str, FieldState]
    errors: List[FieldError]
    report: Optional[WageReport] = None
    value_difference: float = 0.0

    @property
    def computable(self) -> bool:
        return not self.errors and all(s == FieldState.VALID for s in self.states.values())


@dataclass
class WageForm:
    values: Dict[str, object] = field(default_factory=lambda: {name: None for name in FIELD_RULES})
    states: Dict[str, FieldState] = field(
        default_factory=lambda: {name: FieldState.UNVALIDATED for name in FIELD_RULES}
    )

    @classmethod
    def with_defaults(cls) -> "WageForm":
        form = cls()
        for name, value in DEFAULT_VALUES.items():
            form.update(name, value)
        return form

    def update(self, name: str, raw) -> FieldState:
        if name not in FIELD_RULES:
            raise UnknownFieldError(name)

        validator = FIELD_RULES[name][0]
        state = FieldState.VALID if validator(raw) else FieldState.INVALID
        self.values[name] = raw
        self.states[name] = state

        if state is FieldState.INVALID:
            logger.info("field %s rejected value %r", name, raw)
        return state

    @property
    def is_computable(self) -> bool:
        return all(state is FieldState.VALID for state in self.states.values())

    @property
    def errors(self) -> List[FieldError]:
        errors = []
        for name, state in self.states.items():
            if state is FieldState.INVALID:
                _, (low, high), message = FIELD_RULES[name]
                errors.append(FieldError(name, message, low, high))
        return errors

    def work_input(self) -> Optional[WorkInput]:
        if not self.is_computable:
            return None
        return WorkInput(**{name: sanitize_input(self.values[name]) for name in FIELD_RULES})

    def evaluate(self) -> FormResult:
        # 검증 실패한 칸이 있으면 계산 자체를 하지 않음
        report = compute_wage_report(self.work_input())
        return FormResult(
            states=dict(self.states),
            errors=self.errors,
            report=report,
            value_difference=value_difference_percent(report),
        )
