# petplanet/api/feedback/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class FeedbackService(BaseResourceService):
    resource = 'feedback'

    def submit_feedback(self, feedback_data: Dict[str, Any]) -> ApiResponse:
        return self.create(feedback_data)

    def get_user_feedback(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_all_feedback(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        """관리자 전용. 모든 사용자의 피드백을 조회합니다."""
        return self.client.get(self._path('all'), params=params or {}, **kwargs)

    def update_feedback(self, feedback_id: str, update_data: Dict[str, Any]) -> ApiResponse:
        return self.update(feedback_id, update_data)
