# petplanet/api/auth/pages.py
"""
로그인/회원가입 화면. 백엔드 호출은 AuthSession을 통해서만 합니다.
"""
import logging
from typing import Any, Dict, Optional

from petplanet.api.users.schemas import UserProfileSchema
from petplanet.core.errors import AuthError
from petplanet.core.session import AuthSession

logger = logging.getLogger(__name__)


class AuthFormPage:
    """로그인/회원가입 폼 공통. 실패하면 백엔드가 돌려준 문구를 그대로 보여줍니다."""
    title = ''
    default_error = ''

    def __init__(self, session: AuthSession):
        self.session = session
        self.error: Optional[str] = None
        self.error_status: Optional[int] = None

    def _call(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def submit(self, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.error = None
        try:
            return self._call(payload)
        except AuthError as e:
            logger.warning(f"{self.title} 실패: {e.message}")
            self.error = e.message or self.default_error
            self.error_status = e.status or 400
            return None

    def to_view(self) -> Dict[str, Any]:
        user = self.session.get_current_user()
        return {
            "title": self.title,
            "authenticated": self.session.is_authenticated,
            "user": UserProfileSchema().dump(user) if user else None,
            "error": self.error,
        }


class LoginPage(AuthFormPage):
    title = '登录'
    default_error = '登录失败，请检查邮箱和密码'

    def _call(self, payload):
        return self.session.login(payload)


class RegisterPage(AuthFormPage):
    title = '注册'
    default_error = '注册失败，请重试'

    def _call(self, payload):
        return self.session.register(payload)
