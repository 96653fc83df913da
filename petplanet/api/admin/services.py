# petplanet/api/admin/services.py
from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class StatsService(BaseResourceService):
    """관리자 대시보드 통계(/stats)."""
    resource = 'stats'

    def get_stats(self, **kwargs) -> ApiResponse:
        return self.client.get(self._path(), **kwargs)
