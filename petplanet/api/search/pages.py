# petplanet/api/search/pages.py
"""
통합 검색. 게시물/상품/서비스를 동시에 조회하고(all-settled),
실패한 종류만 빈 목록으로 보여줍니다.
"""
from typing import Any, Dict, List

from petplanet.api.base import unwrap_list
from petplanet.api.pet_services.schemas import ServiceSchema
from petplanet.api.posts.schemas import PostSchema
from petplanet.api.products.schemas import ProductSchema
from petplanet.core.page import EmptyState, PageController

SEARCH_TABS = ('all', 'posts', 'products', 'services')


class SearchPage(PageController):
    empty_state = EmptyState('🔍', '没有找到相关结果', '返回首页', '/')

    def __init__(self, services, query: str = '', tab: str = 'all'):
        super().__init__(services)
        self.query = (query or '').strip()
        self.tab = tab if tab in SEARCH_TABS else 'all'
        self.posts: List[Dict[str, Any]] = []
        self.products: List[Dict[str, Any]] = []
        self.pet_services: List[Dict[str, Any]] = []

    def load(self) -> bool:
        if not self.query:
            self.posts, self.products, self.pet_services = [], [], []
            return True
        params = {'search': self.query}
        token = self.cancel_token
        posts = self.services['posts']
        products = self.services['products']
        pet_services = self.services['pet_services']

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_list(posts.get_posts(params, cancel_token=token).data),
                    lambda: unwrap_list(products.get_products(params, cancel_token=token).data),
                    lambda: unwrap_list(pet_services.get_services(params, cancel_token=token).data),
                ],
                fallbacks=[[], [], []],
                label='통합 검색',
            )

        def apply(result):
            self.posts, self.products, self.pet_services = result

        return self._load(fetch, apply, label='통합 검색')

    @property
    def total(self) -> int:
        return len(self.posts) + len(self.products) + len(self.pet_services)

    def to_view(self):
        empty = None
        if self.query and not self.total and not self.loading:
            empty = self.empty_state.to_dict()
        return {
            "loading": self.loading,
            "query": self.query,
            "tab": self.tab,
            "tabs": list(SEARCH_TABS),
            "counts": {
                "posts": len(self.posts),
                "products": len(self.products),
                "services": len(self.pet_services),
                "total": self.total,
            },
            "posts": PostSchema(many=True).dump(self.posts) if self.tab in ('all', 'posts') else [],
            "products": ProductSchema(many=True, exclude=('reviews',)).dump(self.products)
            if self.tab in ('all', 'products') else [],
            "services": ServiceSchema(many=True, exclude=('reviews',)).dump(self.pet_services)
            if self.tab in ('all', 'services') else [],
            "empty": empty,
        }
