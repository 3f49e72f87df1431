"""로깅 설정 테스트"""
import logging

from app.core.logging import setup_logging


def test_driver_loggers_quiet():
    """SQL/드라이버 로거는 개발 환경에서도 WARNING 이상만 출력"""
    setup_logging()
    
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger("aiosqlite").level == logging.WARNING
