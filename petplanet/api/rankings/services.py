# petplanet/api/rankings/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class RankingService(BaseResourceService):
    resource = 'rankings'

    def get_rankings(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_all_rankings(self, **kwargs) -> ApiResponse:
        return self.client.get(self._path('all'), **kwargs)

    def vote_for_pet(self, data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path('vote'), json=data)
