# petplanet/core/http.py
"""
백엔드 REST API와 통신하는 단일 HTTP 클라이언트.

모든 리소스 서비스 모듈은 이 클라이언트만을 통해 요청을 보냅니다.
- base URL과 Bearer 토큰을 붙입니다.
- 4xx/5xx 응답을 ApiError로, 401을 UnauthorizedError로 바꿉니다.
- CancelToken이 취소되면 결과를 버립니다.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests

from petplanet.core.concurrency import CancelToken
from petplanet.core.errors import ApiError, NetworkError, UnauthorizedError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = '服务器错误'


@dataclass
class ApiResponse:
    """서비스 함수가 돌려주는 응답. data는 파싱된 JSON 본문입니다."""
    data: Any
    status: int


class ApiClient:
    def __init__(self, base_url: str,
                 token_provider: Optional[Callable[[], Optional[str]]] = None,
                 timeout: float = 10,
                 on_unauthorized: Optional[Callable[[], None]] = None,
                 http: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.token_provider = token_provider
        self.timeout = timeout
        self.on_unauthorized = on_unauthorized
        self.http = http or requests.Session()
        self.http.headers.update({'Accept': 'application/json'})

    def _headers(self) -> Dict[str, str]:
        headers = {}
        token = self.token_provider() if self.token_provider else None
        if token:
            headers['Authorization'] = f"Bearer {token}"
        return headers

    def request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None,
                json: Any = None, data: Optional[Dict[str, Any]] = None,
                files: Optional[Dict[str, Any]] = None,
                cancel_token: Optional[CancelToken] = None) -> ApiResponse:
        """
        요청을 보내고 ApiResponse를 반환합니다.

        :param path: '/posts/123/like' 처럼 base URL 뒤에 붙을 경로
        :param files: multipart 업로드 파일. 주어지면 data와 함께 form으로 전송됩니다.
        :param cancel_token: 요청 전/후에 취소 여부를 확인할 토큰
        """
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        url = f"{self.base_url}{path}"
        # None 값 파라미터는 쿼리스트링에서 뺍니다.
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = self.http.request(
                method, url,
                params=params or None,
                json=json if files is None else None,
                data=data if files is not None else None,
                files=files,
                headers=self._headers(),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"API 요청 실패 ({method} {path}): {e}")
            raise NetworkError(f"网络错误: {e}") from e

        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        body = self._parse_body(response)
        if response.status_code >= 400:
            message = DEFAULT_ERROR_MESSAGE
            if isinstance(body, dict) and body.get('message'):
                message = body['message']
            if response.status_code == 401:
                logger.info(f"인증 만료 응답 수신 ({method} {path})")
                if self.on_unauthorized:
                    self.on_unauthorized()
                raise UnauthorizedError(401, message, body)
            raise ApiError(response.status_code, message, body)

        return ApiResponse(data=body, status=response.status_code)

    @staticmethod
    def _parse_body(response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def get(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.request('GET', path, params=params, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs) -> ApiResponse:
        return self.request('POST', path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs) -> ApiResponse:
        return self.request('PUT', path, json=json, **kwargs)

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.request('DELETE', path, params=params, **kwargs)
