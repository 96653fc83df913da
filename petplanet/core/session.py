# petplanet/core/session.py
"""
로그인 상태를 보관하는 세션 객체.

전역 싱글톤 대신 생성자로 주입받아 사용하며, 상태가 바뀔 때마다
on_change로 등록된 콜백에 알립니다.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from petplanet.api.auth.services import AuthService
from petplanet.api.base import unwrap_record
from petplanet.core.errors import ApiError, AuthError, NetworkError, PetPlanetError
from petplanet.core.storage import TOKEN_KEY, ClientStorage
from petplanet.core.tokens import is_token_expired

logger = logging.getLogger(__name__)

STATUS_LOADING = 'loading'
STATUS_AUTHENTICATED = 'authenticated'
STATUS_UNAUTHENTICATED = 'unauthenticated'


class AuthSession:
    def __init__(self, auth_service: AuthService, storage: ClientStorage):
        self.auth_service = auth_service
        self.storage = storage
        self.user: Optional[Dict[str, Any]] = None
        self.token: Optional[str] = storage.get(TOKEN_KEY)
        self.loading = False
        self._listeners: List[Callable[["AuthSession"], None]] = []

    # --- 상태 조회 ---
    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and self.user is not None

    @property
    def status(self) -> str:
        if self.loading:
            return STATUS_LOADING
        if self.is_authenticated:
            return STATUS_AUTHENTICATED
        return STATUS_UNAUTHENTICATED

    def get_current_user(self) -> Optional[Dict[str, Any]]:
        return self.user

    def get_token(self) -> Optional[str]:
        return self.token

    @property
    def is_admin(self) -> bool:
        return bool(self.user) and self.user.get('role') == 'admin'

    # --- 구독 ---
    def on_change(self, callback: Callable[["AuthSession"], None]) -> Callable[[], None]:
        """상태 변경 콜백을 등록하고, 등록 해제 함수를 반환합니다."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)
        return unsubscribe

    def _notify(self):
        for callback in list(self._listeners):
            try:
                callback(self)
            except Exception as e:
                logger.error(f"세션 변경 콜백 실행 실패: {e}", exc_info=True)

    # --- 상태 변경 ---
    def hydrate(self) -> Optional[Dict[str, Any]]:
        """
        저장된 토큰이 있으면 /auth/me로 현재 사용자를 복원합니다.
        실패하면 토큰을 지우고 비로그인 상태가 됩니다.
        """
        if not self.token:
            self.user = None
            return None

        if is_token_expired(self.token):
            logger.info("저장된 토큰이 만료되어 세션을 비웁니다.")
            self._clear()
            self._notify()
            return None

        self.loading = True
        self._notify()
        try:
            response = self.auth_service.get_current_user()
            self.user = unwrap_record(response.data)
        except (ApiError, NetworkError) as e:
            logger.warning(f"저장된 토큰으로 사용자 복원 실패: {e}")
            self._clear()
        finally:
            self.loading = False
        self._notify()
        return self.user

    def login(self, credentials: Dict[str, Any]) -> Dict[str, Any]:
        """로그인에 성공하면 토큰을 저장하고 사용자 정보를 반환합니다."""
        return self._authenticate(self.auth_service.login, credentials, '登录失败')

    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._authenticate(self.auth_service.register, data, '注册失败')

    def _authenticate(self, call, payload, default_message) -> Dict[str, Any]:
        try:
            response = call(payload)
        except ApiError as e:
            raise AuthError(e.message, e.status) from e
        except NetworkError as e:
            raise AuthError(str(e)) from e

        body = response.data if isinstance(response.data, dict) else {}
        token = body.get('token')
        if not token:
            raise AuthError(body.get('message') or default_message, response.status)

        user = body.get('data') or body.get('user')
        if not isinstance(user, dict):
            user = {k: v for k, v in body.items() if k not in ('token', 'success', 'message')}

        self.token = token
        self.user = user
        self.storage.set(TOKEN_KEY, token)
        logger.info(f"로그인 성공 (user_id: {user.get('_id') or user.get('id')})")
        self._notify()
        return user

    def logout(self):
        """
        서버에 로그아웃을 알린 뒤 로컬 상태를 비웁니다.
        서버 알림이 실패해도 로그아웃은 완료된 것으로 봅니다.
        """
        if self.token:
            try:
                self.auth_service.logout()
            except PetPlanetError as e:
                logger.info(f"서버 로그아웃 알림 실패 (무시): {e}")
        self._clear()
        self._notify()

    def invalidate(self):
        """401 응답으로 토큰이 만료되었을 때 서버 알림 없이 세션을 비웁니다."""
        self._clear()
        self._notify()

    def _clear(self):
        self.token = None
        self.user = None
        self.storage.remove(TOKEN_KEY)
