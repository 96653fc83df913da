# petplanet/api/settings/services.py
from typing import Any, Dict

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class SettingsService(BaseResourceService):
    resource = 'settings'

    def get_settings(self, **kwargs) -> ApiResponse:
        return self.client.get(self._path(), **kwargs)

    def update_settings(self, data: Dict[str, Any]) -> ApiResponse:
        return self.client.put(self._path(), json=data)

    def update_appearance(self, data: Dict[str, Any]) -> ApiResponse:
        return self.client.put(self._path('appearance'), json=data)

    def update_notifications(self, data: Dict[str, Any]) -> ApiResponse:
        return self.client.put(self._path('notifications'), json=data)

    def update_privacy(self, data: Dict[str, Any]) -> ApiResponse:
        return self.client.put(self._path('privacy'), json=data)
