# petplanet/api/points/pages.py
from typing import Any, Dict, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.points.schemas import TransactionSchema
from petplanet.core.page import EmptyState, PageController

# 포인트몰 교환 상품
EXCHANGE_ITEMS = [
    {'id': 'pet-food-coupon', 'name': '宠物粮优惠券', 'pointsCost': 100, 'icon': '🍖'},
    {'id': 'grooming-coupon', 'name': '美容服务代金券', 'pointsCost': 200, 'icon': '✂️'},
    {'id': 'pet-toy', 'name': '宠物玩具', 'pointsCost': 300, 'icon': '🧸'},
    {'id': 'vip-month', 'name': '会员月卡', 'pointsCost': 500, 'icon': '👑'},
]


def balance_of(data: Any) -> int:
    """잔액 응답은 {data: {balance}}, {balance} 또는 숫자만 오는 경우가 있습니다."""
    if isinstance(data, dict):
        data = data.get('data', data)
    if isinstance(data, dict):
        return data.get('balance') or 0
    return data or 0


class PointsMallPage(PageController):
    """
    잔액과 거래 내역을 함께 보여줍니다. 교환에 성공하면 둘 다 다시 불러옵니다.
    """
    empty_state = EmptyState('🪙', '暂无积分记录')

    def __init__(self, services):
        super().__init__(services)
        self.balance = 0
        self.exchanged: Optional[Dict[str, Any]] = None

    def load(self) -> bool:
        points = self.services['points']
        token = self.cancel_token

        def fetch():
            return self._gather(
                [
                    lambda: points.get_balance(cancel_token=token).data,
                    lambda: unwrap_list(points.get_transactions(cancel_token=token).data),
                ],
                fallbacks=[None, []],
                label='포인트',
            )

        def apply(result):
            balance, transactions = result
            self.balance = balance_of(balance)
            self.store.replace_all(transactions)

        return self._load(fetch, apply, label='포인트')

    def can_afford(self, points_cost: int) -> bool:
        return (self.balance or 0) >= points_cost

    def exchange(self, item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if not self.can_afford(item['pointsCost']):
            self.error = '积分不足'
            self.error_status = 409
            return None
        response = self._mutate(
            lambda: self.services['points'].exchange_points(item),
            '兑换失败，请重试', '포인트 교환', prefer_server_message=True
        )
        if response is None:
            return None
        self.exchanged = unwrap_record(response.data) or {}
        self.load()
        return self.exchanged

    def to_view(self):
        transactions = self.store.all()
        return {
            "loading": self.loading,
            "balance": self.balance,
            "items": [dict(item, affordable=self.can_afford(item['pointsCost'])) for item in EXCHANGE_ITEMS],
            "transactions": TransactionSchema(many=True).dump(transactions),
            "message": '兑换成功！' if self.exchanged is not None else None,
            "empty": self.empty_view(transactions),
            "error": self.error,
        }
