# petplanet/api/pet_services/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class PetCareServiceService(BaseResourceService):
    """동네 반려동물 서비스(병원/미용/위탁 등, /services) 리소스 서비스."""
    resource = 'services'

    def get_services(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_service(self, service_id: str, **kwargs) -> ApiResponse:
        return self.get(service_id, **kwargs)

    def create_service(self, data: Dict[str, Any]) -> ApiResponse:
        return self.create(data)

    def update_service(self, service_id: str, data: Dict[str, Any]) -> ApiResponse:
        return self.update(service_id, data)

    def delete_service(self, service_id: str) -> ApiResponse:
        return self.delete(service_id)

    def add_review(self, service_id: str, data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path(service_id, 'reviews'), json=data)

    def get_nearby_services(self, params: Dict[str, Any], **kwargs) -> ApiResponse:
        return self.client.get(self._path('nearby'), params=params, **kwargs)
