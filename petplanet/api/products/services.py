# petplanet/api/products/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class ProductService(BaseResourceService):
    """상품(/products) 리소스 서비스. 목록은 category/search/sort 파라미터를 받습니다."""
    resource = 'products'

    def get_products(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_product(self, product_id: str, **kwargs) -> ApiResponse:
        return self.get(product_id, **kwargs)

    def get_featured_products(self, **kwargs) -> ApiResponse:
        return self.client.get(self._path('featured'), **kwargs)

    def create_product(self, data: Dict[str, Any]) -> ApiResponse:
        return self.create(data)

    def update_product(self, product_id: str, data: Dict[str, Any]) -> ApiResponse:
        return self.update(product_id, data)

    def delete_product(self, product_id: str) -> ApiResponse:
        return self.delete(product_id)

    def add_review(self, product_id: str, data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path(product_id, 'reviews'), json=data)
