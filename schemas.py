from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Union

# 폼에서 넘어오는 원본 값 (문자열 또는 숫자)
RawValue = Union[str, float, int, None]


class WorkInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthlySalary: float = Field(ge=0, le=1_000_000)
    workDaysPerWeek: float = Field(ge=1, le=7)
    hoursPerDay: float = Field(ge=1, le=24)


class ScheduleRates(BaseModel):
    model_config = ConfigDict(frozen=True)

    hourly: float
    daily: float
    weekly: float
    monthly: float


class WageReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    standard: ScheduleRates
    extended: ScheduleRates
    custom: ScheduleRates


class ScheduleInfo(BaseModel):
    name: str
    hoursPerDay: float
    daysPerWeek: float
    weeklyHours: float
    monthlyHours: float


class SchedulesResponse(BaseModel):
    averageWeeksPerMonth: float
    schedules: List[ScheduleInfo]


class FormInput(BaseModel):
    monthlySalary: RawValue = None
    workDaysPerWeek: RawValue = None
    hoursPerDay: RawValue = None


class FieldErrorOut(BaseModel):
    field: str
    message: str
    min: float
    max: float


class CalculationResponse(BaseModel):
    computable: bool
    fields: Dict[str, str]  # 예: {"monthlySalary": "valid"}
    errors: List[FieldErrorOut]
    report: Optional[WageReport] = None
    valueDifference: float = 0.0
    formatted: Optional[Dict[str, Dict[str, str]]] = None
