# petplanet/api/orders/pages.py
from typing import Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.orders.schemas import CANCELLABLE_ORDER_STATUSES, OrderSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import PATCHED
from petplanet.models.enums import OrderStatus, PaymentMethod, values

ALL_STATUSES = 'all'


class OrdersPage(PageController):
    """내 주문 목록. 취소와 결제 결과 반영은 해당 주문 레코드만 갱신합니다."""
    empty_state = EmptyState('📦', '暂无订单', '去逛逛', '/shop')

    def __init__(self, services, status: Optional[str] = None):
        super().__init__(services)
        self.status = status or ALL_STATUSES

    def load(self) -> bool:
        params = {} if self.status == ALL_STATUSES else {'status': self.status}
        return self._load(
            lambda: unwrap_list(self.services['orders'].get_orders(params, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='주문 목록',
        )

    def cancel(self, order_id: str, reason: Optional[str] = None) -> bool:
        order = self.store.get(order_id)
        if order is not None and order.get('status') not in CANCELLABLE_ORDER_STATUSES:
            self.error = '该订单无法取消'
            self.error_status = 409
            return False
        data = {'reason': reason} if reason else None
        response = self._mutate(lambda: self.services['orders'].cancel_order(order_id, data), '取消失败，请重试', '주문 취소')
        if response is None:
            return False
        updated = unwrap_record(response.data) or {}
        self.store.dispatch(PATCHED, order_id, status=updated.get('status') or OrderStatus.CANCELLED.value)
        return True

    def pay(self, order_id: str, payment: dict) -> bool:
        response = self._mutate(lambda: self.services['orders'].update_payment(order_id, payment), '支付失败，请重试', '결제')
        if response is None:
            return False
        updated = unwrap_record(response.data)
        if updated and updated.get('payment'):
            self.store.dispatch(PATCHED, order_id, **{k: updated[k] for k in ('payment', 'status') if updated.get(k)})
        else:
            order = self.store.get(order_id) or {}
            self.store.dispatch(PATCHED, order_id, payment=dict(order.get('payment') or {}, status=payment.get('status')))
        return True

    def to_view(self):
        orders = self.store.all()
        return {
            "loading": self.loading,
            "status": self.status,
            "statuses": [ALL_STATUSES] + values(OrderStatus),
            "paymentMethods": values(PaymentMethod),
            "orders": OrderSchema(many=True).dump(orders),
            "empty": self.empty_view(orders),
            "error": self.error,
        }
