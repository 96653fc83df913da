# petplanet/api/orders/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class OrderService(BaseResourceService):
    resource = 'orders'

    def get_orders(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_order(self, order_id: str, **kwargs) -> ApiResponse:
        return self.get(order_id, **kwargs)

    def create_order(self, data: Dict[str, Any]) -> ApiResponse:
        return self.create(data)

    def update_payment(self, order_id: str, data: Dict[str, Any]) -> ApiResponse:
        return self.client.put(self._path(order_id, 'payment'), json=data)

    def update_order_status(self, order_id: str, data: Dict[str, Any]) -> ApiResponse:
        """관리자 전용."""
        return self.client.put(self._path(order_id, 'status'), json=data)

    def cancel_order(self, order_id: str, data: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return self.client.put(self._path(order_id, 'cancel'), json=data)
