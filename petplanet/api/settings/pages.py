# petplanet/api/settings/pages.py
from typing import Any, Dict, Optional

from petplanet.api.base import unwrap_record
from petplanet.api.settings.schemas import SettingsSchema
from petplanet.core.page import PageController
from petplanet.models.enums import Theme, Visibility, values

# 설정 화면의 섹션 이름 → 부분 저장 함수
SECTION_UPDATERS = {
    'appearance': 'update_appearance',
    'notifications': 'update_notifications',
    'privacy': 'update_privacy',
}


class SettingsPage(PageController):
    SUCCESS_MESSAGE = '设置已保存'

    def __init__(self, services):
        super().__init__(services)
        self.settings: Dict[str, Any] = {}
        self.saved = False

    def load(self) -> bool:
        def apply(settings):
            self.settings = settings or {}

        return self._load(
            lambda: unwrap_record(self.services['settings'].get_settings(cancel_token=self.cancel_token).data),
            apply,
            fallback={},
            label='설정',
        )

    def save(self, data: Dict[str, Any], section: Optional[str] = None) -> bool:
        """section이 없으면 전체 설정을, 있으면 해당 섹션만 저장합니다."""
        settings = self.services['settings']
        if section is None:
            call = lambda: settings.update_settings(data)
        else:
            updater = getattr(settings, SECTION_UPDATERS[section])
            call = lambda: updater(data)

        response = self._mutate(call, '保存失败，请重试', '설정 저장', prefer_server_message=True)
        if response is None:
            return False
        updated = unwrap_record(response.data)
        if updated:
            self.settings = updated
        elif section is None:
            self.settings = dict(self.settings, **data)
        else:
            self.settings = dict(self.settings, **{section: dict(self.settings.get(section) or {}, **data)})
        self.saved = True
        return True

    def to_view(self):
        return {
            "loading": self.loading,
            "settings": SettingsSchema().dump(self.settings),
            "themes": values(Theme),
            "visibilities": values(Visibility),
            "message": self.SUCCESS_MESSAGE if self.saved else None,
            "error": self.error,
        }
