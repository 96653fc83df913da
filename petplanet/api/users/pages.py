# petplanet/api/users/pages.py
"""
프로필 화면: 사용자 정보, 통계, 팔로워/팔로잉, 팔로우 토글, 아바타/프로필 수정.
"""
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.posts.schemas import PostSchema
from petplanet.api.users.schemas import AuthorSchema, UserProfileSchema, UserStatsSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import FOLLOW_TOGGLED, PATCHED
from petplanet.utils.user_utils import get_user_id, is_following


class ProfilePage(PageController):
    empty_state = EmptyState('👤', '用户不存在', '返回首页', '/')

    def __init__(self, services, user_id: Optional[str] = None, viewer: Optional[Dict[str, Any]] = None):
        super().__init__(services)
        self.viewer = viewer
        # user_id가 없으면 내 프로필
        self.user_id = str(user_id or get_user_id(viewer) or '')
        self.stats: Dict[str, Any] = {}
        self.followers: List[Dict[str, Any]] = []
        self.following: List[Dict[str, Any]] = []
        self.posts: List[Dict[str, Any]] = []

    @property
    def is_me(self) -> bool:
        return bool(self.user_id) and self.user_id == str(get_user_id(self.viewer) or '')

    @property
    def profile(self) -> Optional[Dict[str, Any]]:
        return self.store.get(self.user_id)

    def load(self) -> bool:
        users = self.services['users']
        posts = self.services['posts']
        token = self.cancel_token

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_record(users.get_user_profile(self.user_id, cancel_token=token).data),
                    lambda: unwrap_record(users.get_user_stats(self.user_id, cancel_token=token).data),
                    lambda: unwrap_list(users.get_followers(self.user_id, cancel_token=token).data),
                    lambda: unwrap_list(users.get_following(self.user_id, cancel_token=token).data),
                    lambda: unwrap_list(posts.get_user_posts(self.user_id, cancel_token=token).data),
                ],
                fallbacks=[None, {}, [], [], []],
                label='프로필',
            )

        def apply(result):
            profile, stats, followers, following, user_posts = result
            self.store.clear()
            if profile:
                self.store.upsert(dict(profile, _id=profile.get('_id') or self.user_id))
            self.stats = stats or {}
            self.followers = followers
            self.following = following
            self.posts = user_posts

        return self._load(fetch, apply, label='프로필')

    def toggle_follow(self) -> Optional[Dict[str, Any]]:
        profile = self.profile
        if profile is None or self.is_me:
            return None
        users = self.services['users']
        following = is_following(self.viewer, profile)
        call = (lambda: users.unfollow_user(self.user_id)) if following else (lambda: users.follow_user(self.user_id))
        if self._mutate(call, '操作失败，请重试', '팔로우') is None:
            return None
        # 백엔드 프로필에는 followers 배열만 있으므로 토글 전에 플래그와 카운트를 채워 둡니다.
        count = profile.get('followersCount')
        self.store.dispatch(PATCHED, self.user_id, isFollowing=following,
                            followersCount=len(profile.get('followers') or []) if count is None else count)
        return self.store.dispatch(FOLLOW_TOGGLED, self.user_id, isFollowing=not following)

    def upload_avatar(self, file: Any) -> Optional[str]:
        response = self._mutate(lambda: self.services['users'].upload_avatar(file), '头像上传失败', '아바타 업로드')
        if response is None:
            return None
        body = unwrap_record(response.data) or {}
        avatar = body.get('avatar')
        if avatar:
            self.store.dispatch(PATCHED, self.user_id, avatar=avatar)
        return avatar

    def update_profile(self, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(lambda: self.services['auth'].update_profile(data), '保存失败，请重试', '프로필 수정',
                                prefer_server_message=True)
        if response is None:
            return None
        updated = unwrap_record(response.data) or data
        return self.store.dispatch(PATCHED, self.user_id, **updated)

    def update_password(self, passwords: Dict[str, Any]) -> bool:
        response = self._mutate(lambda: self.services['auth'].update_password(passwords), '密码修改失败', '비밀번호 변경',
                                prefer_server_message=True)
        return response is not None

    def to_view(self):
        profile = self.profile
        return {
            "loading": self.loading,
            "isMe": self.is_me,
            "profile": UserProfileSchema().dump(dict(profile, isFollowing=is_following(self.viewer, profile)))
            if profile else None,
            "stats": UserStatsSchema().dump(self.stats),
            "followers": AuthorSchema(many=True).dump(self.followers),
            "following": AuthorSchema(many=True).dump(self.following),
            "posts": PostSchema(many=True).dump(self.posts),
            "empty": None if (profile or self.loading) else self.empty_state.to_dict(),
            "error": self.error,
        }
