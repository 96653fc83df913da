# petplanet/api/points/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class PointsService(BaseResourceService):
    resource = 'points'

    def get_balance(self, **kwargs) -> ApiResponse:
        return self.client.get(self._path('balance'), **kwargs)

    def get_transactions(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.client.get(self._path('transactions'), params=params or {}, **kwargs)

    def exchange_points(self, data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path('exchange'), json=data)
