# petplanet/api/products/pages.py
"""
상점 화면: 상품 목록(분류/정렬/검색)과 상품 상세(리뷰, 바로 주문).
"""
import logging
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.products.schemas import ProductSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.models.enums import ProductCategory, ProductSort, values

logger = logging.getLogger(__name__)

ALL_CATEGORIES = 'all'
DEFAULT_DEBOUNCE_SECONDS = 0.5


def build_query(category: str, search: str, sort: Optional[str]) -> Dict[str, Any]:
    """목록 조회 파라미터. 'all'/빈 검색어/기본 정렬은 보내지 않습니다."""
    params: Dict[str, Any] = {}
    if category and category != ALL_CATEGORIES:
        params['category'] = category
    if search:
        params['search'] = search
    if sort and sort != 'newest':
        params['sort'] = sort
    return params


class ShopPage(PageController):
    """
    검색어 입력은 디바운스되어 마지막 입력 후 일정 시간이 지나야 목록을 다시 불러옵니다.
    """
    empty_state = EmptyState('🛍️', '没有找到相关商品', '查看全部商品', '/shop')

    def __init__(self, services, debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS):
        super().__init__(services)
        self.category = ALL_CATEGORIES
        self.sort: Optional[str] = None
        self.search = ''
        self.featured: List[Dict[str, Any]] = []
        self._search_debouncer = self.debounce(debounce_seconds, self.load)

    def load(self, with_featured: bool = False) -> bool:
        products = self.services['products']
        token = self.cancel_token
        params = build_query(self.category, self.search, self.sort)

        if not with_featured:
            return self._load(
                lambda: unwrap_list(products.get_products(params, cancel_token=token).data),
                self.store.replace_all,
                fallback=[],
                label='상품 목록',
            )

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_list(products.get_products(params, cancel_token=token).data),
                    lambda: unwrap_list(products.get_featured_products(cancel_token=token).data),
                ],
                fallbacks=[[], []],
                label='상품 목록',
            )

        def apply(result):
            found, self.featured = result
            self.store.replace_all(found)

        return self._load(fetch, apply, label='상품 목록')

    def set_filters(self, category: Optional[str] = None, sort: Optional[str] = None,
                    search: Optional[str] = None):
        self.category = category or ALL_CATEGORIES
        self.sort = sort
        self.search = (search or '').strip()

    def on_search_input(self, term: str):
        """검색창 입력. 바로 조회하지 않고 디바운스합니다."""
        self.search = (term or '').strip()
        self._search_debouncer()

    def flush_search(self):
        self._search_debouncer.flush()

    def wait_search(self, timeout: Optional[float] = None) -> bool:
        return self._search_debouncer.wait(timeout)

    def to_view(self):
        products = self.store.all()
        return {
            "loading": self.loading,
            "category": self.category,
            "categories": [ALL_CATEGORIES] + values(ProductCategory),
            "sort": self.sort,
            "sortOptions": values(ProductSort),
            "search": self.search,
            "products": ProductSchema(many=True, exclude=('reviews',)).dump(products),
            "featured": ProductSchema(many=True, exclude=('reviews',)).dump(self.featured),
            "empty": self.empty_view(products),
        }


class ProductDetailPage(PageController):
    empty_state = EmptyState('📦', '商品不存在', '返回商城', '/shop')

    def __init__(self, services, product_id: str):
        super().__init__(services)
        self.product_id = str(product_id)
        self.order: Optional[Dict[str, Any]] = None

    @property
    def product(self) -> Optional[Dict[str, Any]]:
        return self.store.get(self.product_id)

    def load(self) -> bool:
        def apply(product):
            self.store.clear()
            if product:
                self.store.upsert(dict(product, _id=product.get('_id') or self.product_id))

        return self._load(
            lambda: unwrap_record(self.services['products'].get_product(self.product_id, cancel_token=self.cancel_token).data),
            apply,
            label='상품 상세',
        )

    def open(self) -> bool:
        loaded = self.load()
        if loaded and self.product:
            self.record_view('product', self.product_id)
        return loaded

    def review(self, review_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['products'].add_review(self.product_id, review_data),
            '评价失败，请重试', '상품 리뷰', prefer_server_message=True
        )
        if response is None:
            return None
        # 리뷰가 반영된 평점/리뷰 목록을 다시 받습니다.
        self.load()
        return self.product

    def buy(self, order_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['orders'].create_order(order_data),
            '下单失败，请重试', '주문 생성', prefer_server_message=True
        )
        if response is None:
            return None
        self.order = unwrap_record(response.data)
        return self.order

    def to_view(self):
        product = self.product
        return {
            "loading": self.loading,
            "product": ProductSchema().dump(product) if product else None,
            "order": self.order,
            "empty": None if (product or self.loading) else self.empty_state.to_dict(),
            "error": self.error,
        }
