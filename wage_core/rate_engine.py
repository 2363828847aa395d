import logging
from dataclasses import dataclass
from typing import Optional

from schemas import ScheduleRates, WageReport, WorkInput

logger = logging.getLogger(__name__)

# 평균 한 달 주 수 (달력 기준이 아닌 고정 근사값)
AVERAGE_WEEKS_PER_MONTH = 4.33


@dataclass(frozen=True)
class Schedule:
    name: str
    hours_per_day: float
    days_per_week: float

    @property
    def weekly_hours(self) -> float:
        return self.hours_per_day * self.days_per_week

    @property
    def monthly_hours(self) -> float:
        return self.weekly_hours * AVERAGE_WEEKS_PER_MONTH


STANDARD_SCHEDULE = Schedule("standard", hours_per_day=8, days_per_week=5)
EXTENDED_SCHEDULE = Schedule("extended", hours_per_day=12, days_per_week=6)  # 12시간 x 주 6일


def schedule_rates(monthly_salary: float, schedule: Schedule) -> ScheduleRates:
    """
    월급을 주어진 근무 형태의 시급/일급/주급으로 환산
    월급 자체는 그대로 유지됨
    """
    hourly = monthly_salary / schedule.monthly_hours
    return ScheduleRates(
        hourly=hourly,
        daily=hourly * schedule.hours_per_day,
        weekly=hourly * schedule.weekly_hours,
        monthly=monthly_salary,
    )


def compute_wage_report(work: Optional[WorkInput]) -> Optional[WageReport]:
    # 1. 값이 비어 있거나 0이면 계산하지 않음 (0으로 나누기 방지)
    if work is None:
        return None
    if not work.monthlySalary or not work.workDaysPerWeek or not work.hoursPerDay:
        return None

    # 2. 사용자 지정 근무 형태
    custom = Schedule("custom", hours_per_day=work.hoursPerDay, days_per_week=work.workDaysPerWeek)

    # 3. 세 가지 근무 형태별 환산
    report = WageReport(
        standard=schedule_rates(work.monthlySalary, STANDARD_SCHEDULE),
        extended=schedule_rates(work.monthlySalary, EXTENDED_SCHEDULE),
        custom=schedule_rates(work.monthlySalary, custom),
    )
    logger.debug("wage report computed for %s: %s", work, report)
    return report


def value_difference_percent(report: Optional[WageReport]) -> float:
    """표준 근무 대비 연장 근무 시급이 몇 % 낮은지 (소수 첫째 자리 반올림)"""
    if report is None:
        return 0.0
    standard_hourly = report.standard.hourly
    if not standard_hourly:
        return 0.0
    difference = (standard_hourly - report.extended.hourly) / standard_hourly * 100
    return round(difference, 1)
