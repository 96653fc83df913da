# petplanet/utils/test_datetime_utils.py
"""
시간 유틸리티 테스트

사용법: python -m pytest petplanet/utils/test_datetime_utils.py -v
"""

import pytest
from datetime import date, datetime, timedelta, timezone
from petplanet.utils.datetime_utils import DateTimeUtils, format_date, format_datetime

def test_parse_iso_datetime():
    """ISO 포맷 파싱 테스트"""
    test_cases = [
        "2024-01-15T10:30:00Z",
        "2024-01-15T10:30:00+08:00",
        "2024-01-15T10:30:00.123Z",
        "2024-01-15T10:30:00"
    ]

    for iso_string in test_cases:
        dt = DateTimeUtils.parse_iso_datetime(iso_string)
        assert isinstance(dt, datetime)
        assert dt.tzinfo == timezone.utc  # UTC로 정규화되어야 함

def test_parse_date_string():
    for date_string in ["2024-01-15", "2024/01/15"]:
        assert DateTimeUtils.parse_date_string(date_string) == date(2024, 1, 15)

def test_format_display_datetime():
    """zh-CN 표기: 월/일 앞의 0은 빼고 시간은 두 자리"""
    assert format_datetime("2024-01-15T02:05:09Z") == "2024/1/15 10:05:09"
    assert format_datetime(None) == ''
    assert format_datetime("not-a-date") == ''

def test_format_display_date():
    assert format_date("2024-03-05T00:00:00Z") == "2024/3/5"
    assert format_date('') == ''

def test_is_past():
    past = (DateTimeUtils.now() - timedelta(days=1)).isoformat()
    future = (DateTimeUtils.now() + timedelta(days=1)).isoformat()
    assert DateTimeUtils.is_past(past) is True
    assert DateTimeUtils.is_past(future) is False
    assert DateTimeUtils.is_past(None) is False
    assert DateTimeUtils.is_past('garbage') is False

def test_date_range_params():
    params = DateTimeUtils.date_range_params(7, end=date(2024, 1, 15))
    assert params == {'startDate': '2024-01-09', 'endDate': '2024-01-15'}

    today_only = DateTimeUtils.date_range_params(1, end=date(2024, 1, 15))
    assert today_only['startDate'] == today_only['endDate'] == '2024-01-15'

def test_calculate_age():
    """나이 계산 테스트"""
    years, months = DateTimeUtils.calculate_age(date(2020, 1, 15))
    assert isinstance(years, int) and isinstance(months, int)
    assert years >= 4

    assert DateTimeUtils.calculate_age(None) == (0, 0)
    # 미래 날짜는 0살
    future = DateTimeUtils.today() + timedelta(days=400)
    assert DateTimeUtils.calculate_age(future) == (0, 0)

def test_error_handling():
    """오류 처리 테스트"""
    with pytest.raises(ValueError):
        DateTimeUtils.parse_iso_datetime("invalid-date")

    with pytest.raises(ValueError):
        DateTimeUtils.parse_iso_datetime("")
