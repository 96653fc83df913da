# petplanet/api/reminders/pages.py
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.pets.schemas import PetSchema
from petplanet.api.reminders.schemas import ReminderSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import PATCHED, REMOVED
from petplanet.models.enums import ReminderRepeat, ReminderStatus, ReminderType, values

ALL = 'all'


class RemindersPage(PageController):
    """
    반려동물 일정 알림. 목록, 통계, 내 반려동물 목록(등록 폼 선택지)을 함께 불러옵니다.
    """
    empty_state = EmptyState('⏰', '暂无提醒事项', '添加提醒', None)

    def __init__(self, services, status: Optional[str] = None, pet_id: Optional[str] = None):
        super().__init__(services)
        self.status = status if status in values(ReminderStatus) else ALL
        self.pet_id = pet_id
        self.stats: Dict[str, Any] = {}
        self.pets: List[Dict[str, Any]] = []
        self.created: Optional[Dict[str, Any]] = None

    def _query(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.status != ALL:
            params['status'] = self.status
        if self.pet_id:
            params['petId'] = self.pet_id
        return params

    def load(self) -> bool:
        reminders = self.services['reminders']
        pets = self.services['pets']
        token = self.cancel_token
        params = self._query()

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_list(reminders.get_reminders(params, cancel_token=token).data),
                    lambda: unwrap_record(reminders.get_stats(cancel_token=token).data),
                    lambda: unwrap_list(pets.get_pets(cancel_token=token).data),
                ],
                fallbacks=[[], {}, []],
                label='알림',
            )

        def apply(result):
            items, stats, self.pets = result
            self.stats = stats or {}
            self.store.replace_all(items)

        return self._load(fetch, apply, label='알림')

    def create(self, reminder_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['reminders'].create_reminder(reminder_data),
            '创建失败，请重试', '알림 생성', prefer_server_message=True
        )
        if response is None:
            return None
        self.created = unwrap_record(response.data)
        self.load()
        return self.created

    def complete(self, reminder_id: str) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['reminders'].complete_reminder(reminder_id),
            '操作失败，请重试', '알림 완료'
        )
        if response is None:
            return None
        updated = unwrap_record(response.data) or {}
        return self.store.dispatch(PATCHED, reminder_id,
                                   status=updated.get('status') or ReminderStatus.COMPLETED.value)

    def delete(self, reminder_id: str) -> bool:
        if self._mutate(lambda: self.services['reminders'].delete_reminder(reminder_id), '删除失败，请重试', '알림 삭제') is None:
            return False
        self.store.dispatch(REMOVED, reminder_id)
        return True

    def to_view(self):
        reminders = self.store.all()
        return {
            "loading": self.loading,
            "status": self.status,
            "petId": self.pet_id,
            "stats": self.stats,
            "pets": PetSchema(many=True, only=('id', 'name', 'species')).dump(self.pets),
            "types": values(ReminderType),
            "repeats": values(ReminderRepeat),
            "reminders": ReminderSchema(many=True).dump(reminders),
            "empty": self.empty_view(reminders),
            "error": self.error,
        }
