# petplanet/api/bookings/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class BookingService(BaseResourceService):
    resource = 'bookings'

    def get_bookings(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_booking(self, booking_id: str, **kwargs) -> ApiResponse:
        return self.get(booking_id, **kwargs)

    def create_booking(self, data: Dict[str, Any]) -> ApiResponse:
        return self.create(data)

    def update_booking(self, booking_id: str, data: Dict[str, Any]) -> ApiResponse:
        return self.update(booking_id, data)

    def cancel_booking(self, booking_id: str) -> ApiResponse:
        return self.client.put(self._path(booking_id, 'cancel'))

    def delete_booking(self, booking_id: str) -> ApiResponse:
        return self.delete(booking_id)
