import logging
import os
from dotenv import load_dotenv

# .env 파일이 있으면 환경변수로 등록
load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(name) -> str:
    """logging 이 모르는 레벨 이름이면 INFO 로 대체"""
    level = (name or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("WAGE_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = resolve_log_level(os.getenv("WAGE_LOG_LEVEL"))
