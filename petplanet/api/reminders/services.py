# petplanet/api/reminders/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class ReminderService(BaseResourceService):
    resource = 'reminders'

    def get_reminders(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_stats(self, **kwargs) -> ApiResponse:
        return self.client.get(self._path('stats'), **kwargs)

    def create_reminder(self, data: Dict[str, Any]) -> ApiResponse:
        return self.create(data)

    def update_reminder(self, reminder_id: str, data: Dict[str, Any]) -> ApiResponse:
        return self.update(reminder_id, data)

    def complete_reminder(self, reminder_id: str) -> ApiResponse:
        return self.client.put(self._path(reminder_id, 'complete'))

    def delete_reminder(self, reminder_id: str) -> ApiResponse:
        return self.delete(reminder_id)
