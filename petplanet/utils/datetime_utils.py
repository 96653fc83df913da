# petplanet/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간/날짜 처리를 위한 유틸리티 모듈

이 모듈의 목적:
1. 백엔드가 돌려주는 ISO 문자열 파싱 통일
2. 화면 표시용 포맷은 렌더링 시점에만 생성 (저장하지 않음)
3. 조회 기간 파라미터(startDate/endDate) 생성
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Tuple, Union

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

# 화면 표시 기준 시간대 (zh-CN 사용자 기준 UTC+8)
DISPLAY_TZ = timezone(timedelta(hours=8))


class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def today() -> date:
        """표시 시간대 기준 오늘 날짜를 반환"""
        return datetime.now(DISPLAY_TZ).date()

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        ISO 포맷 문자열을 datetime 객체로 파싱

        지원 포맷:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+08:00
        - 2024-01-15T10:30:00.123Z
        - 2024-01-15T10:30:00
        """
        try:
            if not iso_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")

            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'

            dt = dateutil_parser.isoparse(iso_string)

            # timezone-naive인 경우 UTC로 가정
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)

            return dt.astimezone(timezone.utc)

        except Exception as e:
            logger.error(f"ISO datetime 파싱 실패: {iso_string} - {e}")
            raise ValueError(f"잘못된 ISO 날짜 형식입니다: {iso_string}")

    @staticmethod
    def parse_date_string(date_string: str) -> date:
        """
        날짜 문자열을 date 객체로 파싱

        지원 포맷:
        - 2024-01-15
        - 2024/01/15
        """
        try:
            if not date_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")
            return dateutil_parser.parse(date_string).date()
        except Exception as e:
            logger.error(f"날짜 문자열 파싱 실패: {date_string} - {e}")
            raise ValueError(f"잘못된 날짜 형식입니다: {date_string}")

    @staticmethod
    def to_date_string(d: Union[date, datetime]) -> str:
        """date 객체를 YYYY-MM-DD 형식 문자열로 변환"""
        return d.strftime('%Y-%m-%d')

    @staticmethod
    def _coerce(value: Any) -> Optional[datetime]:
        if value is None or value == '':
            return None
        if isinstance(value, datetime):
            return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        return DateTimeUtils.parse_iso_datetime(str(value))

    @staticmethod
    def format_display_datetime(value: Any) -> str:
        """
        zh-CN 로케일 표기('2024/1/15 18:30:00')로 변환합니다.
        값이 없거나 파싱할 수 없으면 빈 문자열을 반환합니다.
        """
        try:
            dt = DateTimeUtils._coerce(value)
        except ValueError:
            return ''
        if dt is None:
            return ''
        local = dt.astimezone(DISPLAY_TZ)
        return f"{local.year}/{local.month}/{local.day} {local.strftime('%H:%M:%S')}"

    @staticmethod
    def format_display_date(value: Any) -> str:
        """zh-CN 로케일 날짜 표기('2024/1/15')."""
        try:
            dt = DateTimeUtils._coerce(value)
        except ValueError:
            return ''
        if dt is None:
            return ''
        local = dt.astimezone(DISPLAY_TZ)
        return f"{local.year}/{local.month}/{local.day}"

    @staticmethod
    def is_past(value: Any) -> bool:
        """만료일 같은 값이 이미 지났는지. 값이 없거나 파싱할 수 없으면 False."""
        try:
            dt = DateTimeUtils._coerce(value)
        except ValueError:
            return False
        return dt is not None and dt < DateTimeUtils.now()

    @staticmethod
    def date_range_params(days: int, end: Optional[date] = None) -> dict:
        """최근 days일 조회용 startDate/endDate 파라미터."""
        end = end or DateTimeUtils.today()
        start = end - timedelta(days=max(0, days - 1))
        return {
            'startDate': DateTimeUtils.to_date_string(start),
            'endDate': DateTimeUtils.to_date_string(end),
        }

    @staticmethod
    def calculate_age(birthdate: Union[date, datetime, str, None]) -> Tuple[int, int]:
        """생년월일로부터 (년, 개월) 나이를 계산합니다. 값이 없으면 (0, 0)."""
        if not birthdate:
            return 0, 0
        try:
            if isinstance(birthdate, str):
                birthdate = DateTimeUtils._coerce(birthdate).astimezone(DISPLAY_TZ).date()
            elif isinstance(birthdate, datetime):
                birthdate = birthdate.date()
            delta = relativedelta(DateTimeUtils.today(), birthdate)
            if delta.years < 0 or delta.months < 0:
                return 0, 0
            return delta.years, delta.months
        except Exception as e:
            logger.error(f"나이 계산 실패: {birthdate} - {e}")
            return 0, 0


# 편의를 위한 글로벌 함수들
def format_datetime(value: Any) -> str:
    return DateTimeUtils.format_display_datetime(value)


def format_date(value: Any) -> str:
    return DateTimeUtils.format_display_date(value)
