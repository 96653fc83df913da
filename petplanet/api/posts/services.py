# petplanet/api/posts/services.py
from typing import Any, Dict, List, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class PostService(BaseResourceService):
    """
    게시글(/posts) 리소스 서비스.
    좋아요는 토글 방식이며, 응답으로 최신 likesCount/isLiked를 돌려받습니다.
    """
    resource = 'posts'

    def get_posts(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_post(self, post_id: str, **kwargs) -> ApiResponse:
        return self.get(post_id, **kwargs)

    def create_post(self, post_data: Dict[str, Any], files: Optional[List[Any]] = None) -> ApiResponse:
        """files가 있으면 multipart로, 없으면 JSON으로 보냅니다."""
        if files:
            return self.client.post(
                self._path(), data=post_data,
                files=[('media', f) for f in files]
            )
        return self.create(post_data)

    def update_post(self, post_id: str, post_data: Dict[str, Any]) -> ApiResponse:
        return self.update(post_id, post_data)

    def delete_post(self, post_id: str) -> ApiResponse:
        return self.delete(post_id)

    def like_post(self, post_id: str) -> ApiResponse:
        return self.client.put(self._path(post_id, 'like'))

    def add_comment(self, post_id: str, content: str) -> ApiResponse:
        return self.client.post(self._path(post_id, 'comments'), json={'content': content})

    def get_user_posts(self, user_id: str, **kwargs) -> ApiResponse:
        return self.client.get(self._path('user', user_id), **kwargs)

    def get_trending_hashtags(self, limit: int = 10, **kwargs) -> ApiResponse:
        return self.client.get(self._path('trending', 'hashtags'), params={'limit': limit}, **kwargs)

    def get_posts_by_hashtag(self, hashtag: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.client.get(self._path('hashtag', hashtag), params=params or {}, **kwargs)
