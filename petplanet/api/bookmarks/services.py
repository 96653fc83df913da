# petplanet/api/bookmarks/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class BookmarkService(BaseResourceService):
    resource = 'bookmarks'

    def get_bookmarks(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def bookmark_post(self, post_id: str) -> ApiResponse:
        return self.client.post(self._path(post_id))

    def remove_bookmark(self, post_id: str) -> ApiResponse:
        return self.client.delete(self._path(post_id))

    def check_bookmark(self, post_id: str, **kwargs) -> ApiResponse:
        return self.client.get(self._path('check', post_id), **kwargs)

    def toggle_bookmark(self, post_id: str, is_bookmarked: bool) -> ApiResponse:
        """현재 상태가 북마크됨이면 해제, 아니면 추가합니다."""
        if is_bookmarked:
            return self.remove_bookmark(post_id)
        return self.bookmark_post(post_id)
