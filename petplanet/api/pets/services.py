# petplanet/api/pets/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class PetService(BaseResourceService):
    """반려동물(/pets) 리소스 서비스."""
    resource = 'pets'

    def get_pets(self, **kwargs) -> ApiResponse:
        return self.list(**kwargs)

    def get_pet(self, pet_id: str, **kwargs) -> ApiResponse:
        return self.get(pet_id, **kwargs)

    def create_pet(self, pet_data: Dict[str, Any]) -> ApiResponse:
        return self.create(pet_data)

    def update_pet(self, pet_id: str, pet_data: Dict[str, Any]) -> ApiResponse:
        return self.update(pet_id, pet_data)

    def delete_pet(self, pet_id: str) -> ApiResponse:
        return self.delete(pet_id)

    def add_health_record(self, pet_id: str, record_data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path(pet_id, 'health'), json=record_data)

    def add_reminder(self, pet_id: str, reminder_data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path(pet_id, 'reminders'), json=reminder_data)


class PetRatingService(BaseResourceService):
    """반려동물 평가(/pets/:petId/ratings) 서비스."""
    resource = 'pets'

    def get_pet_ratings(self, pet_id: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.client.get(self._path(pet_id, 'ratings'), params=params or {}, **kwargs)

    def add_rating(self, pet_id: str, rating_data: Dict[str, Any]) -> ApiResponse:
        return self.client.post(self._path(pet_id, 'ratings'), json=rating_data)

    def get_my_rating(self, pet_id: str, **kwargs) -> ApiResponse:
        return self.client.get(self._path(pet_id, 'ratings', 'me'), **kwargs)

    def delete_rating(self, pet_id: str, rating_id: str) -> ApiResponse:
        return self.client.delete(self._path(pet_id, 'ratings', rating_id))

    def mark_helpful(self, pet_id: str, rating_id: str) -> ApiResponse:
        return self.client.put(self._path(pet_id, 'ratings', rating_id, 'helpful'))
