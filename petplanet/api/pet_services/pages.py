# petplanet/api/pet_services/pages.py
"""
반려동물 서비스 화면: 서비스 목록(분류/검색/지역), 주변 서비스, 상세, 예약하기.
"""
import logging
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.pet_services.schemas import ServiceSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.storage import USER_LOCATION_KEY, ClientStorage
from petplanet.models.enums import PetSpecies, ServiceCategory, ServiceSort, values

logger = logging.getLogger(__name__)

ALL_CATEGORIES = 'all'
DEFAULT_DEBOUNCE_SECONDS = 0.5


class ServicesPage(PageController):
    """
    사용자가 고른 지역(userLocation)은 클라이언트 저장소에 남겨 다음 방문에도 적용합니다.
    """
    empty_state = EmptyState('🏥', '附近暂无相关服务', '查看全部服务', '/services')

    def __init__(self, services, storage: ClientStorage, debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS):
        super().__init__(services)
        self.storage = storage
        self.category = ALL_CATEGORIES
        self.sort: Optional[str] = None
        self.search = ''
        self.location: Optional[str] = storage.get(USER_LOCATION_KEY)
        self._search_debouncer = self.debounce(debounce_seconds, self.load)

    def _query(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.category != ALL_CATEGORIES:
            params['category'] = self.category
        if self.search:
            params['search'] = self.search
        if self.sort and self.sort != 'newest':
            params['sort'] = self.sort
        if self.location:
            params['city'] = self.location
        return params

    def load(self) -> bool:
        params = self._query()
        return self._load(
            lambda: unwrap_list(self.services['pet_services'].get_services(params, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='서비스 목록',
        )

    def load_nearby(self, query: Dict[str, Any]) -> bool:
        """좌표 기준 주변 서비스. 이 경우 지역 설정은 무시합니다."""
        params = dict(query)
        if self.category != ALL_CATEGORIES:
            params.setdefault('category', self.category)
        return self._load(
            lambda: unwrap_list(self.services['pet_services'].get_nearby_services(params, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='주변 서비스',
        )

    def set_filters(self, category: Optional[str] = None, sort: Optional[str] = None,
                    search: Optional[str] = None):
        self.category = category or ALL_CATEGORIES
        self.sort = sort
        self.search = (search or '').strip()

    def set_location(self, city: Optional[str]):
        """지역 설정을 바꾸고 저장합니다. 빈 값이면 설정을 지웁니다."""
        city = (city or '').strip()
        if city:
            self.storage.set(USER_LOCATION_KEY, city)
            self.location = city
        else:
            self.storage.remove(USER_LOCATION_KEY)
            self.location = None

    def on_search_input(self, term: str):
        self.search = (term or '').strip()
        self._search_debouncer()

    def flush_search(self):
        self._search_debouncer.flush()

    def wait_search(self, timeout: Optional[float] = None) -> bool:
        return self._search_debouncer.wait(timeout)

    def to_view(self):
        items = self.store.all()
        return {
            "loading": self.loading,
            "category": self.category,
            "categories": [ALL_CATEGORIES] + values(ServiceCategory),
            "sort": self.sort,
            "sortOptions": values(ServiceSort),
            "search": self.search,
            "location": self.location,
            "services": ServiceSchema(many=True, exclude=('reviews',)).dump(items),
            "empty": self.empty_view(items),
        }


class ServiceDetailPage(PageController):
    empty_state = EmptyState('🔍', '服务不存在', '返回服务列表', '/services')

    def __init__(self, services, service_id: str):
        super().__init__(services)
        self.service_id = str(service_id)

    @property
    def service(self) -> Optional[Dict[str, Any]]:
        return self.store.get(self.service_id)

    def load(self) -> bool:
        def apply(service):
            self.store.clear()
            if service:
                self.store.upsert(dict(service, _id=service.get('_id') or self.service_id))

        return self._load(
            lambda: unwrap_record(self.services['pet_services'].get_service(self.service_id, cancel_token=self.cancel_token).data),
            apply,
            label='서비스 상세',
        )

    def open(self) -> bool:
        loaded = self.load()
        if loaded and self.service:
            self.record_view('service', self.service_id)
        return loaded

    def review(self, review_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['pet_services'].add_review(self.service_id, review_data),
            '评价失败，请重试', '서비스 리뷰', prefer_server_message=True
        )
        if response is None:
            return None
        self.load()
        return self.service

    def to_view(self):
        service = self.service
        return {
            "loading": self.loading,
            "service": ServiceSchema().dump(service) if service else None,
            "bookingHref": f"/services/{self.service_id}/book" if service else None,
            "empty": None if (service or self.loading) else self.empty_state.to_dict(),
            "error": self.error,
        }


class CreateBookingPage(PageController):
    SUCCESS_MESSAGE = '预约成功！我们会尽快与您联系确认'

    def __init__(self, services, service_id: str):
        super().__init__(services)
        self.service_id = str(service_id)
        self.service: Optional[Dict[str, Any]] = None
        self.booking: Optional[Dict[str, Any]] = None

    def load(self) -> bool:
        def apply(service):
            self.service = service

        return self._load(
            lambda: unwrap_record(self.services['pet_services'].get_service(self.service_id, cancel_token=self.cancel_token).data),
            apply,
            label='예약 대상 서비스',
        )

    def submit(self, form: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        booking_data = dict(form, service=self.service_id)
        response = self._mutate(
            lambda: self.services['bookings'].create_booking(booking_data),
            '预约失败，请重试', '예약 생성'
        )
        if response is None:
            return None
        self.booking = unwrap_record(response.data)
        logger.info(f"예약 완료 (service_id: {self.service_id})")
        return self.booking

    def service_types(self) -> List[str]:
        pricing = (self.service or {}).get('pricing') or {}
        return [item.get('name') for item in pricing.get('services') or [] if item.get('name')]

    def to_view(self):
        return {
            "loading": self.loading,
            "service": ServiceSchema(only=('id', 'name', 'category', 'location')).dump(self.service)
            if self.service else None,
            "serviceTypes": self.service_types(),
            "petTypes": values(PetSpecies),
            "booking": self.booking,
            "message": self.SUCCESS_MESSAGE if self.booking else None,
            "redirect": '/services' if self.booking else None,
            "error": self.error,
        }
