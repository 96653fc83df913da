# petplanet/api/pets/pages.py
import logging
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.health.schemas import HealthLogSchema
from petplanet.api.pets.schemas import PetSchema, RatingSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import PATCHED, REMOVED, record_id
from petplanet.models.enums import PetSpecies, values

logger = logging.getLogger(__name__)

RECENT_LOG_LIMIT = 7
ANALYTICS_DAYS = 30


class PetsListPage(PageController):
    empty_state = EmptyState('🐾', '还没有添加宠物', '添加宠物', '/pets/new')

    def load(self) -> bool:
        return self._load(
            lambda: unwrap_list(self.services['pets'].get_pets(cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='반려동물 목록',
        )

    def delete(self, pet_id: str) -> bool:
        if self._mutate(lambda: self.services['pets'].delete_pet(pet_id), '删除失败，请重试', '반려동물 삭제') is None:
            return False
        self.store.dispatch(REMOVED, pet_id)
        return True

    def to_view(self):
        pets = self.store.all()
        return {
            "loading": self.loading,
            "pets": PetSchema(many=True).dump(pets),
            "empty": self.empty_view(pets),
            "error": self.error,
        }


class PetDetailPage(PageController):
    """
    반려동물 상세. 기본 정보, 최근 건강 기록 7건, 30일 분석, 다른 사용자의 평가를
    한 번에 불러오며 하나가 실패해도 나머지는 그대로 보여줍니다.
    """
    empty_state = EmptyState('😿', '宠物不存在', '返回列表', '/pets')

    def __init__(self, services, pet_id: str):
        super().__init__(services)
        self.pet_id = str(pet_id)
        self.health_logs: List[Dict[str, Any]] = []
        self.analytics: Optional[Dict[str, Any]] = None
        self.my_rating: Optional[Dict[str, Any]] = None
        self.ratings = self.store
        self.pet: Optional[Dict[str, Any]] = None

    def load(self) -> bool:
        pets = self.services['pets']
        health = self.services['health']
        ratings = self.services['ratings']
        token = self.cancel_token

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_record(pets.get_pet(self.pet_id, cancel_token=token).data),
                    lambda: unwrap_list(health.get_health_logs(self.pet_id, {'limit': RECENT_LOG_LIMIT},
                                                               cancel_token=token).data),
                    lambda: unwrap_record(health.get_health_analytics(self.pet_id, ANALYTICS_DAYS,
                                                                      cancel_token=token).data),
                    lambda: unwrap_list(ratings.get_pet_ratings(self.pet_id, cancel_token=token).data),
                    lambda: unwrap_record(ratings.get_my_rating(self.pet_id, cancel_token=token).data),
                ],
                fallbacks=[None, [], None, [], None],
                label='반려동물 상세',
            )

        def apply(result):
            self.pet, self.health_logs, self.analytics, rating_list, self.my_rating = result
            self.ratings.replace_all(rating_list)

        return self._load(fetch, apply, label='반려동물 상세')

    def open(self) -> bool:
        loaded = self.load()
        if loaded and self.pet:
            self.record_view('pet', self.pet_id)
        return loaded

    def rate(self, rating_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['ratings'].add_rating(self.pet_id, rating_data),
            '评价失败，请重试', '평가 작성', prefer_server_message=True
        )
        if response is None:
            return None
        rating = unwrap_record(response.data)
        if rating:
            self.ratings.upsert(rating)
            self.my_rating = rating
        return rating

    def delete_rating(self, rating_id: str) -> bool:
        response = self._mutate(
            lambda: self.services['ratings'].delete_rating(self.pet_id, rating_id),
            '删除失败，请重试', '평가 삭제'
        )
        if response is None:
            return False
        self.ratings.dispatch(REMOVED, rating_id)
        if self.my_rating and record_id(self.my_rating) == str(rating_id):
            self.my_rating = None
        return True

    def mark_helpful(self, rating_id: str) -> Optional[Dict[str, Any]]:
        if self.ratings.get(rating_id) is None:
            return self._not_found('评价不存在')
        response = self._mutate(
            lambda: self.services['ratings'].mark_helpful(self.pet_id, rating_id),
            '操作失败，请重试', '평가 도움됨'
        )
        if response is None:
            return None
        body = unwrap_record(response.data) or {}
        if body.get('helpfulCount') is not None:
            return self.ratings.dispatch(PATCHED, rating_id, helpfulCount=body['helpfulCount'])
        rating = self.ratings.get(rating_id) or {}
        return self.ratings.dispatch(PATCHED, rating_id, helpfulCount=(rating.get('helpfulCount') or 0) + 1)

    def to_view(self):
        return {
            "loading": self.loading,
            "pet": PetSchema().dump(self.pet) if self.pet else None,
            "healthLogs": HealthLogSchema(many=True).dump(self.health_logs),
            "analytics": self.analytics,
            "ratings": RatingSchema(many=True).dump(self.ratings.all()),
            "myRating": RatingSchema().dump(self.my_rating) if self.my_rating else None,
            "empty": None if (self.pet or self.loading) else self.empty_state.to_dict(),
            "error": self.error,
        }


class AddPetPage(PageController):
    SUCCESS_MESSAGE = '宠物添加成功！'

    def __init__(self, services):
        super().__init__(services)
        self.created: Optional[Dict[str, Any]] = None

    def submit(self, pet_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['pets'].create_pet(pet_data),
            '添加失败，请重试', '반려동물 등록', prefer_server_message=True
        )
        if response is None:
            return None
        self.created = unwrap_record(response.data)
        logger.info(f"반려동물 등록 완료: {record_id(self.created or {})}")
        return self.created

    def to_view(self):
        return {
            "species": values(PetSpecies),
            "created": PetSchema().dump(self.created) if self.created else None,
            "message": self.SUCCESS_MESSAGE if self.created else None,
            "error": self.error,
        }
