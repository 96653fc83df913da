# petplanet/api/auth/services.py
from typing import Any, Dict

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class AuthService(BaseResourceService):
    """/auth 엔드포인트 래퍼. 토큰 저장은 AuthSession이 담당합니다."""
    resource = 'auth'

    def register(self, user_data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path('register'), json=user_data)

    def login(self, credentials: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path('login'), json=credentials)

    def get_current_user(self) -> ApiResponse:
        return self.client.get(self._path('me'))

    def update_profile(self, user_data: Dict[str, Any]) -> ApiResponse:
        return self.client.put(self._path('updatedetails'), json=user_data)

    def update_password(self, passwords: Dict[str, Any]) -> ApiResponse:
        return self.client.put(self._path('updatepassword'), json=passwords)

    def logout(self) -> ApiResponse:
        return self.client.post(self._path('logout'))
