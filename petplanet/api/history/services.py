# petplanet/api/history/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class HistoryService(BaseResourceService):
    """브라우징 기록(/history). itemType은 post/pet/product/service 중 하나입니다."""
    resource = 'history'

    def add_to_history(self, item_type: str, item_id: str) -> ApiResponse:
        return self.create({'itemType': item_type, 'itemId': item_id})

    def get_history(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def clear_history(self, item_type: Optional[str] = None) -> ApiResponse:
        params = {'itemType': item_type} if item_type else {}
        return self.client.delete(self._path(), params=params)

    def delete_history_item(self, history_id: str) -> ApiResponse:
        return self.delete(history_id)
