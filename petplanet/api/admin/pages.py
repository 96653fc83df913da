# petplanet/api/admin/pages.py
"""
관리자 화면: 대시보드 통계, 게시물/상품/서비스 관리.
의견 처리 화면은 feedback.pages.AdminFeedbackPage를 사용합니다.
"""
import logging
from typing import Any, Dict, Optional

from petplanet.api.admin.schemas import DashboardStatsSchema
from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.pet_services.schemas import ServiceSchema
from petplanet.api.posts.schemas import PostSchema
from petplanet.api.products.schemas import ProductSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import REMOVED

logger = logging.getLogger(__name__)


class AdminDashboardPage(PageController):
    def __init__(self, services):
        super().__init__(services)
        self.stats: Dict[str, Any] = {}

    def load(self) -> bool:
        def apply(stats):
            self.stats = stats or {}

        return self._load(
            lambda: unwrap_record(self.services['stats'].get_stats(cancel_token=self.cancel_token).data),
            apply,
            fallback={},
            label='관리자 통계',
        )

    def to_view(self):
        return {"loading": self.loading, "stats": DashboardStatsSchema().dump(self.stats)}


class AdminResource:
    """관리 화면 하나가 다루는 리소스: 서비스 키, 서비스 함수 이름, 출력 스키마."""

    def __init__(self, service_key, list_fn, create_fn, update_fn, delete_fn, schema, empty_state):
        self.service_key = service_key
        self.list_fn = list_fn
        self.create_fn = create_fn
        self.update_fn = update_fn
        self.delete_fn = delete_fn
        self.schema = schema
        self.empty_state = empty_state


ADMIN_RESOURCES = {
    'posts': AdminResource('posts', 'get_posts', None, None, 'delete_post',
                           lambda: PostSchema(many=True), EmptyState('📝', '暂无帖子')),
    'products': AdminResource('products', 'get_products', 'create_product', 'update_product', 'delete_product',
                              lambda: ProductSchema(many=True, exclude=('reviews',)), EmptyState('📦', '暂无商品')),
    'services': AdminResource('pet_services', 'get_services', 'create_service', 'update_service', 'delete_service',
                              lambda: ServiceSchema(many=True, exclude=('reviews',)), EmptyState('🏥', '暂无服务')),
}


class AdminContentPage(PageController):
    """
    게시물/상품/서비스 관리 목록. 삭제는 세 리소스 모두, 등록/수정은 상품과 서비스만 지원합니다.
    """

    def __init__(self, services, kind: str, search: Optional[str] = None):
        super().__init__(services)
        self.kind = kind
        self.resource = ADMIN_RESOURCES[kind]
        self.empty_state = self.resource.empty_state
        self.search = (search or '').strip()

    @property
    def client(self):
        return self.services[self.resource.service_key]

    def load(self) -> bool:
        params = {'search': self.search} if self.search else {}
        list_fn = getattr(self.client, self.resource.list_fn)
        return self._load(
            lambda: unwrap_list(list_fn(params, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label=f'관리자 {self.kind} 목록',
        )

    def delete(self, item_id: str) -> bool:
        delete_fn = getattr(self.client, self.resource.delete_fn)
        if self._mutate(lambda: delete_fn(item_id), '删除失败，请重试', f'관리자 {self.kind} 삭제') is None:
            return False
        self.store.dispatch(REMOVED, item_id)
        logger.info(f"관리자 삭제 완료 ({self.kind}: {item_id})")
        return True

    def save(self, data: Dict[str, Any], item_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """item_id가 있으면 수정, 없으면 등록. 성공하면 목록을 다시 불러옵니다."""
        if item_id is None:
            save_fn = getattr(self.client, self.resource.create_fn)
            call = lambda: save_fn(data)
        else:
            save_fn = getattr(self.client, self.resource.update_fn)
            call = lambda: save_fn(item_id, data)
        response = self._mutate(call, '保存失败，请重试', f'관리자 {self.kind} 저장', prefer_server_message=True)
        if response is None:
            return None
        saved = unwrap_record(response.data)
        self.load()
        return saved

    @property
    def editable(self) -> bool:
        return self.resource.create_fn is not None

    def to_view(self):
        items = self.store.all()
        return {
            "loading": self.loading,
            "kind": self.kind,
            "search": self.search,
            "editable": self.editable,
            "items": self.resource.schema().dump(items),
            "empty": self.empty_view(items),
            "error": self.error,
        }
