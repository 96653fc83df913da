# petplanet/core/errors.py
"""
백엔드 호출에서 발생하는 예외 계층.

프론트엔드는 전송 실패(NetworkError)와 백엔드가 알려준 업무 오류(ApiError)를
구분하지 않고 다루며, 401만 특별히 UnauthorizedError로 분리해 강제 로그아웃에 사용합니다.
"""
from typing import Any, Optional


class PetPlanetError(Exception):
    """패키지 전체 예외의 기반 클래스."""


class ApiError(PetPlanetError):
    """백엔드가 4xx/5xx로 응답한 경우."""

    def __init__(self, status: int, message: str, payload: Optional[Any] = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.payload = payload

    def __repr__(self):
        return f"ApiError(status={self.status}, message={self.message!r})"


class UnauthorizedError(ApiError):
    """HTTP 401. 저장된 토큰을 지우고 로그인 페이지로 보내야 합니다."""


class NetworkError(PetPlanetError):
    """연결 실패, 타임아웃 등 응답 자체를 받지 못한 경우."""


class RequestCancelled(PetPlanetError):
    """요청을 보낸 화면이 닫혀 결과가 버려진 경우."""


class AuthError(PetPlanetError):
    """로그인/회원가입 실패. message는 백엔드가 돌려준 문구 그대로입니다."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status
