import logging

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from schemas import (
    CalculationResponse,
    FieldErrorOut,
    FormInput,
    RawValue,
    ScheduleInfo,
    SchedulesResponse,
)
from wage_core.form_state import DEFAULT_VALUES, FormResult, WageForm
from wage_core.rate_engine import AVERAGE_WEEKS_PER_MONTH, EXTENDED_SCHEDULE, STANDARD_SCHEDULE
from wage_core.settings import CORS_ORIGINS, LOG_LEVEL
from wage_core.validation import format_currency

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI()

# 🔸 CORS 설정 (WAGE_CORS_ORIGINS 로 제한 가능, 기본은 전체 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def build_response(result: FormResult) -> CalculationResponse:
    formatted = None
    if result.report is not None:
        formatted = {
            name: {key: format_currency(amount) for key, amount in rates.items()}
            for name, rates in result.report.model_dump().items()
        }

    return CalculationResponse(
        computable=result.computable,
        fields={name: state.value for name, state in result.states.items()},
        errors=[
            FieldErrorOut(field=e.field, message=e.message, min=e.min, max=e.max)
            for e in result.errors
        ],
        report=result.report,
        valueDifference=result.value_difference,
        formatted=formatted,
    )


def evaluate_form(values: dict) -> CalculationResponse:
    form = WageForm()
    for name, raw in values.items():
        form.update(name, raw)
    result = form.evaluate()
    logger.info(
        "calculate: computable=%s report=%s",
        result.computable,
        "yes" if result.report is not None else "no",
    )
    return build_response(result)


# 기본 루트 라우터
@app.get("/")
def root():
    return {"message": "Hello, wage calculator!"}


@app.get("/schedules", response_model=SchedulesResponse)
def schedules():
    """고정 근무 형태(표준 8x5, 연장 12x6) 정보"""
    return SchedulesResponse(
        averageWeeksPerMonth=AVERAGE_WEEKS_PER_MONTH,
        schedules=[
            ScheduleInfo(
                name=s.name,
                hoursPerDay=s.hours_per_day,
                daysPerWeek=s.days_per_week,
                weeklyHours=s.weekly_hours,
                monthlyHours=s.monthly_hours,
            )
            for s in (STANDARD_SCHEDULE, EXTENDED_SCHEDULE)
        ],
    )


@app.get("/defaults")
def defaults():
    return DEFAULT_VALUES


# 급여 환산 API (GET 방식 - 쿼리 값 그대로 검증)
@app.get("/calculate", response_model=CalculationResponse)
def calculate(
    monthlySalary: str = Query(str(DEFAULT_VALUES["monthlySalary"]), description="월급 (0 ~ 1000000)"),
    workDaysPerWeek: str = Query(str(DEFAULT_VALUES["workDaysPerWeek"]), description="주 근무일수 (1 ~ 7)"),
    hoursPerDay: str = Query(str(DEFAULT_VALUES["hoursPerDay"]), description="하루 근무시간 (1 ~ 24)"),
):
    return evaluate_form(
        {
            "monthlySalary": monthlySalary,
            "workDaysPerWeek": workDaysPerWeek,
            "hoursPerDay": hoursPerDay,
        }
    )


# 급여 환산 API (POST 방식 - 폼 원본 값)
@app.post("/calculate", response_model=CalculationResponse)
def calculate_form(input: FormInput):
    """
    폼에서 입력한 원본 값(문자열/숫자)을 검증한 뒤
    세 칸이 모두 유효할 때만 표준 / 연장 / 사용자 지정 근무 형태별 급여를 계산
    """
    values: dict[str, RawValue] = input.model_dump()
    return evaluate_form(values)
