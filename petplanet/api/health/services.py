# petplanet/api/health/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class HealthService(BaseResourceService):
    """건강 기록(/health/:petId) 서비스."""
    resource = 'health'

    def get_health_logs(self, pet_id: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.client.get(self._path(pet_id), params=params or {}, **kwargs)

    def create_health_log(self, pet_id: str, log_data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path(pet_id), json=log_data)

    def get_health_analytics(self, pet_id: str, days: int = 30, **kwargs) -> ApiResponse:
        return self.client.get(self._path(pet_id, 'analytics'), params={'days': days}, **kwargs)
