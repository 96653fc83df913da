# petplanet/core/storage.py
"""
클라이언트 측에 영속되는 상태 저장소.

저장되는 값은 인증 토큰(`token`)과 사용자가 고른 지역(`userLocation`) 두 가지뿐입니다.
"""
from typing import Dict, Optional

from flask import session

TOKEN_KEY = 'token'
USER_LOCATION_KEY = 'userLocation'
ALLOWED_KEYS = (TOKEN_KEY, USER_LOCATION_KEY)


class ClientStorage:
    """get/set/remove 세 가지 연산만 제공하는 키-값 저장소 인터페이스."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str):
        raise NotImplementedError

    def remove(self, key: str):
        raise NotImplementedError

    @staticmethod
    def _check_key(key: str):
        if key not in ALLOWED_KEYS:
            raise KeyError(f"저장할 수 없는 키입니다: {key}")


class MemoryStorage(ClientStorage):
    """테스트와 스크립트용 메모리 저장소."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value):
        self._check_key(key)
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)


class FlaskSessionStorage(ClientStorage):
    """브라우저의 서명된 세션 쿠키에 값을 저장합니다. 요청 컨텍스트 안에서만 동작합니다."""

    def get(self, key):
        return session.get(key)

    def set(self, key, value):
        self._check_key(key)
        session[key] = value

    def remove(self, key):
        session.pop(key, None)
