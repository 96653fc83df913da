# petplanet/api/posts/pages.py
"""
커뮤니티 화면: 홈 피드, 게시글 상세, 해시태그 모아보기, 글쓰기.
"""
import logging
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.posts.schemas import HashtagSchema, PostSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import BOOKMARK_TOGGLED, COMMENT_ADDED, LIKE_TOGGLED, PATCHED, REMOVED, record_id
from petplanet.models.enums import PostCategory, values
from petplanet.utils.user_utils import is_owner

logger = logging.getLogger(__name__)

ALL_CATEGORIES = 'all'


def like_payload(data: Any) -> Dict[str, Any]:
    """좋아요 응답({data: {likesCount, isLiked}})에서 store에 넘길 값만 추립니다."""
    record = unwrap_record(data) or {}
    return {k: record[k] for k in ('isLiked', 'likesCount') if record.get(k) is not None}


class HomeFeedPage(PageController):
    empty_state = EmptyState('📝', '还没有帖子，快来发布第一条吧！', '发布帖子', '/posts/create')

    def __init__(self, services):
        super().__init__(services)
        self.category = ALL_CATEGORIES

    def load(self, category: Optional[str] = None) -> bool:
        self.category = category or ALL_CATEGORIES
        params = {} if self.category == ALL_CATEGORIES else {'category': self.category}
        return self._load(
            lambda: unwrap_list(self.services['posts'].get_posts(params, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='게시글 목록',
        )

    def like(self, post_id: str) -> Optional[Dict[str, Any]]:
        response = self._mutate(lambda: self.services['posts'].like_post(post_id), '操作失败，请重试', '좋아요')
        if response is None:
            return None
        return self.store.dispatch(LIKE_TOGGLED, post_id, **like_payload(response.data))

    def to_view(self):
        posts = self.store.all()
        return {
            "loading": self.loading,
            "category": self.category,
            "categories": [ALL_CATEGORIES] + values(PostCategory),
            "posts": PostSchema(many=True).dump(posts),
            "empty": self.empty_view(posts),
            "error": self.error,
        }


class UserPostsPage(PageController):
    empty_state = EmptyState('📝', '还没有发布过帖子', '发布帖子', '/posts/create')

    def __init__(self, services, user_id: str):
        super().__init__(services)
        self.user_id = str(user_id)

    def load(self) -> bool:
        return self._load(
            lambda: unwrap_list(self.services['posts'].get_user_posts(self.user_id, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='사용자 게시글',
        )

    def to_view(self):
        posts = self.store.all()
        return {
            "loading": self.loading,
            "userId": self.user_id,
            "posts": PostSchema(many=True).dump(posts),
            "empty": self.empty_view(posts),
        }


class PostDetailPage(PageController):
    """
    게시글 한 건. 좋아요/댓글/북마크는 서버 응답을 받은 뒤 store의 해당 필드만 갱신합니다.
    삭제는 작성자 본인만 할 수 있습니다.
    """
    empty_state = EmptyState('😢', '帖子不存在或已被删除', '返回首页', '/')

    def __init__(self, services, post_id: str, user: Optional[Dict[str, Any]] = None):
        super().__init__(services)
        self.post_id = str(post_id)
        self.user = user
        self.deleted = False

    @property
    def post(self) -> Optional[Dict[str, Any]]:
        return self.store.get(self.post_id)

    def load(self) -> bool:
        posts = self.services['posts']
        bookmarks = self.services['bookmarks']

        def fetch():
            post_data, bookmark_data = self._gather(
                [
                    lambda: posts.get_post(self.post_id, cancel_token=self.cancel_token).data,
                    lambda: bookmarks.check_bookmark(self.post_id, cancel_token=self.cancel_token).data,
                ],
                fallbacks=[None, None],
                label='게시글',
            )
            post = unwrap_record(post_data)
            if post is not None and bookmark_data is not None:
                status = unwrap_record(bookmark_data) or {}
                if 'isBookmarked' in status:
                    post = dict(post, isBookmarked=bool(status['isBookmarked']))
            return post

        def apply(post):
            self.store.clear()
            if post:
                self.store.upsert(dict(post, _id=post.get('_id') or self.post_id))

        return self._load(fetch, apply, label='게시글')

    def open(self) -> bool:
        """상세 화면 진입. 불러오기에 성공하면 방문 기록을 남깁니다."""
        loaded = self.load()
        if loaded and self.post:
            self.record_view('post', self.post_id)
        return loaded

    def like(self) -> Optional[Dict[str, Any]]:
        if self.post is None:
            return self._not_found(self.empty_state.message)
        response = self._mutate(lambda: self.services['posts'].like_post(self.post_id), '操作失败，请重试', '좋아요')
        if response is None:
            return None
        return self.store.dispatch(LIKE_TOGGLED, self.post_id, **like_payload(response.data))

    def comment(self, content: str) -> Optional[Dict[str, Any]]:
        if self.post is None:
            return self._not_found(self.empty_state.message)
        response = self._mutate(
            lambda: self.services['posts'].add_comment(self.post_id, content),
            '评论失败，请重试', '댓글 작성'
        )
        if response is None:
            return None
        body = unwrap_record(response.data)
        # 백엔드가 댓글 목록 전체를 돌려주는 경우도 있습니다.
        if isinstance(body, dict) and isinstance(body.get('comments'), list):
            comments = body['comments']
            return self.store.dispatch(PATCHED, self.post_id, comments=comments, commentsCount=len(comments))
        return self.store.dispatch(COMMENT_ADDED, self.post_id, comment=body)

    def toggle_bookmark(self) -> Optional[Dict[str, Any]]:
        post = self.post
        if post is None:
            return self._not_found(self.empty_state.message)
        is_bookmarked = bool(post.get('isBookmarked'))
        response = self._mutate(
            lambda: self.services['bookmarks'].toggle_bookmark(self.post_id, is_bookmarked),
            '收藏失败，请重试', '북마크'
        )
        if response is None:
            return None
        return self.store.dispatch(BOOKMARK_TOGGLED, self.post_id, isBookmarked=not is_bookmarked)

    def delete(self) -> bool:
        if self.post is None:
            self._not_found(self.empty_state.message)
            return False
        if not is_owner(self.user, self.post):
            self.error = '只能删除自己的帖子'
            self.error_status = 403
            return False
        response = self._mutate(lambda: self.services['posts'].delete_post(self.post_id), '删除失败，请重试', '게시글 삭제')
        if response is None:
            return False
        self.store.dispatch(REMOVED, self.post_id)
        self.deleted = True
        return True

    def to_view(self):
        post = self.post
        return {
            "loading": self.loading,
            "post": PostSchema().dump(post) if post else None,
            "isOwner": is_owner(self.user, post),
            "deleted": self.deleted,
            "empty": None if (post or self.loading) else self.empty_state.to_dict(),
            "error": self.error,
        }


class HashtagPostsPage(PageController):
    empty_state = EmptyState('#️⃣', '该话题下还没有帖子', '去发布', '/posts/create')

    def __init__(self, services, hashtag: str):
        super().__init__(services)
        self.hashtag = hashtag.lstrip('#')
        self.trending: List[Dict[str, Any]] = []

    def load(self) -> bool:
        posts = self.services['posts']

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_list(posts.get_posts_by_hashtag(self.hashtag, cancel_token=self.cancel_token).data),
                    lambda: unwrap_list(posts.get_trending_hashtags(cancel_token=self.cancel_token).data),
                ],
                fallbacks=[[], []],
                label='해시태그 게시글',
            )

        def apply(result):
            found, trending = result
            self.store.replace_all(found)
            self.trending = trending

        return self._load(fetch, apply, label='해시태그 게시글')

    def to_view(self):
        posts = self.store.all()
        return {
            "loading": self.loading,
            "hashtag": self.hashtag,
            "posts": PostSchema(many=True).dump(posts),
            "trending": HashtagSchema(many=True).dump(self.trending),
            "empty": self.empty_view(posts),
        }


class CreatePostPage(PageController):
    SUCCESS_MESSAGE = '发布成功！'

    def __init__(self, services):
        super().__init__(services)
        self.created: Optional[Dict[str, Any]] = None

    def submit(self, post_data: Dict[str, Any], files: Optional[List[Any]] = None) -> Optional[Dict[str, Any]]:
        """검증된 폼 데이터로 글을 등록합니다. 실패하면 error에 문구를 남기고 None을 반환합니다."""
        if not (post_data.get('content') or '').strip():
            self.error = '请输入内容'
            return None
        response = self._mutate(
            lambda: self.services['posts'].create_post(post_data, files=files),
            '发布失败，请重试', '게시글 작성'
        )
        if response is None:
            return None
        self.created = unwrap_record(response.data)
        logger.info(f"게시글 작성 완료: {record_id(self.created or {})}")
        return self.created

    def to_view(self):
        return {
            "created": PostSchema().dump(self.created) if self.created else None,
            "message": self.SUCCESS_MESSAGE if self.created else None,
            "error": self.error,
            "categories": values(PostCategory),
        }
