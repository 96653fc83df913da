# petplanet/api/users/services.py
from typing import Any

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class UserService(BaseResourceService):
    """사용자 프로필/팔로우(/users) 리소스 서비스."""
    resource = 'users'

    def get_user_profile(self, user_id: str, **kwargs) -> ApiResponse:
        return self.get(user_id, **kwargs)

    def get_user_stats(self, user_id: str, **kwargs) -> ApiResponse:
        return self.client.get(self._path(user_id, 'stats'), **kwargs)

    def get_followers(self, user_id: str, **kwargs) -> ApiResponse:
        return self.client.get(self._path(user_id, 'followers'), **kwargs)

    def get_following(self, user_id: str, **kwargs) -> ApiResponse:
        return self.client.get(self._path(user_id, 'following'), **kwargs)

    def follow_user(self, user_id: str) -> ApiResponse:
        return self.client.post(self._path(user_id, 'follow'))

    def unfollow_user(self, user_id: str) -> ApiResponse:
        return self.client.delete(self._path(user_id, 'follow'))

    def upload_avatar(self, file: Any) -> ApiResponse:
        """file은 (filename, fileobj, content_type) 튜플 또는 파일 객체입니다."""
        return self.client.post(self._path('avatar'), data={}, files={'avatar': file})
