# petplanet/api/bookmarks/pages.py
from typing import Optional

from petplanet.api.base import unwrap_list
from petplanet.api.bookmarks.schemas import BookmarkSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import REMOVED, record_id


class BookmarksPage(PageController):
    """내가 저장한 게시물. 북마크 레코드는 post를 populate해서 내려옵니다."""
    empty_state = EmptyState('🔖', '还没有收藏任何帖子', '去社区看看', '/')

    def load(self) -> bool:
        return self._load(
            lambda: unwrap_list(self.services['bookmarks'].get_bookmarks(cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='북마크 목록',
        )

    def _find_by_post(self, post_id: str) -> Optional[str]:
        for bookmark in self.store.all():
            post = bookmark.get('post')
            pid = record_id(post) if isinstance(post, dict) else (str(post) if post is not None else None)
            if pid == str(post_id):
                return record_id(bookmark)
        return None

    def remove(self, post_id: str) -> bool:
        """북마크 해제는 게시물 id 기준입니다."""
        if self._mutate(lambda: self.services['bookmarks'].remove_bookmark(post_id), '取消收藏失败', '북마크 해제') is None:
            return False
        bookmark_id = self._find_by_post(post_id)
        if bookmark_id is not None:
            self.store.dispatch(REMOVED, bookmark_id)
        return True

    def to_view(self):
        bookmarks = self.store.all()
        return {
            "loading": self.loading,
            "bookmarks": BookmarkSchema(many=True).dump(bookmarks),
            "empty": self.empty_view(bookmarks),
            "error": self.error,
        }
