# petplanet/api/bookings/pages.py
from typing import Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.bookings.schemas import CANCELLABLE_BOOKING_STATUSES, BookingSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import PATCHED
from petplanet.models.enums import BookingStatus, values

ALL_STATUSES = 'all'


class BookingsPage(PageController):
    empty_state = EmptyState('📅', '暂无预约记录', '去预约服务', '/services')

    def __init__(self, services, status: Optional[str] = None):
        super().__init__(services)
        self.status = status or ALL_STATUSES

    def load(self) -> bool:
        params = {} if self.status == ALL_STATUSES else {'status': self.status}
        return self._load(
            lambda: unwrap_list(self.services['bookings'].get_bookings(params, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='예약 목록',
        )

    def cancel(self, booking_id: str) -> bool:
        """대기/확정 상태의 예약만 취소할 수 있습니다."""
        booking = self.store.get(booking_id)
        if booking is not None and booking.get('status') not in CANCELLABLE_BOOKING_STATUSES:
            self.error = '该预约无法取消'
            self.error_status = 409
            return False
        response = self._mutate(lambda: self.services['bookings'].cancel_booking(booking_id), '取消失败，请重试', '예약 취소')
        if response is None:
            return False
        updated = unwrap_record(response.data) or {}
        self.store.dispatch(PATCHED, booking_id, status=updated.get('status') or BookingStatus.CANCELLED.value)
        return True

    def to_view(self):
        bookings = self.store.all()
        return {
            "loading": self.loading,
            "status": self.status,
            "statuses": [ALL_STATUSES] + values(BookingStatus),
            "bookings": BookingSchema(many=True).dump(bookings),
            "empty": self.empty_view(bookings),
            "error": self.error,
        }
