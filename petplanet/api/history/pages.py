# petplanet/api/history/pages.py
from typing import Optional

from petplanet.api.base import unwrap_list
from petplanet.api.history.schemas import HistoryItemSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import REMOVED
from petplanet.models.enums import HistoryItemType, values

ALL_TYPES = 'all'


class BrowsingHistoryPage(PageController):
    """
    최근 본 항목. itemType 필터가 'all'이면 파라미터를 보내지 않고,
    비우기도 선택된 종류만 지웁니다.
    """
    empty_state = EmptyState('🕒', '暂无浏览记录', '去逛逛', '/')

    def __init__(self, services, item_type: Optional[str] = None):
        super().__init__(services)
        self.item_type = item_type if item_type in values(HistoryItemType) else ALL_TYPES

    def load(self) -> bool:
        params = {} if self.item_type == ALL_TYPES else {'itemType': self.item_type}
        return self._load(
            lambda: unwrap_list(self.services['history'].get_history(params, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='방문 기록',
        )

    def delete_item(self, history_id: str) -> bool:
        if self._mutate(lambda: self.services['history'].delete_history_item(history_id), '删除失败', '방문 기록 삭제') is None:
            return False
        self.store.dispatch(REMOVED, history_id)
        return True

    def clear(self) -> bool:
        item_type = None if self.item_type == ALL_TYPES else self.item_type
        if self._mutate(lambda: self.services['history'].clear_history(item_type), '清空失败', '방문 기록 비우기') is None:
            return False
        self.store.clear()
        return True

    def to_view(self):
        items = self.store.all()
        return {
            "loading": self.loading,
            "itemType": self.item_type,
            "itemTypes": [ALL_TYPES] + values(HistoryItemType),
            "items": HistoryItemSchema(many=True).dump(items),
            "empty": self.empty_view(items),
            "error": self.error,
        }
