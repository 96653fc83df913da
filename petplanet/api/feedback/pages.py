# petplanet/api/feedback/pages.py
"""
도움말/의견 보내기 화면과 관리자 의견 처리 화면.
"""
from typing import Any, Dict, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.feedback.schemas import FeedbackSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import PATCHED, record_id
from petplanet.models.enums import FeedbackStatus, FeedbackType, values

# 도움말 화면의 자주 묻는 질문
FAQS = [
    {'question': '如何添加宠物？', 'answer': '进入「我的宠物」页面，点击「添加宠物」并填写宠物信息即可。'},
    {'question': '如何预约宠物服务？', 'answer': '在「宠物服务」中选择服务，进入详情页后点击「立即预约」。'},
    {'question': '积分如何获得？', 'answer': '发布帖子、参与评论和每日登录都可以获得积分。'},
    {'question': '如何取消订单？', 'answer': '在「我的订单」中找到待处理或已确认的订单，点击「取消订单」。'},
]


class HelpPage(PageController):
    SUCCESS_MESSAGE = '感谢您的反馈！'
    empty_state = EmptyState('💬', '您还没有提交过反馈')

    def __init__(self, services):
        super().__init__(services)
        self.submitted: Optional[Dict[str, Any]] = None

    def load(self) -> bool:
        return self._load(
            lambda: unwrap_list(self.services['feedback'].get_user_feedback(cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='내 의견 목록',
        )

    def submit(self, feedback_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['feedback'].submit_feedback(feedback_data),
            '提交失败，请重试', '의견 보내기'
        )
        if response is None:
            return None
        self.submitted = unwrap_record(response.data)
        if self.submitted:
            self.store.upsert(self.submitted)
        return self.submitted

    def to_view(self):
        items = self.store.all()
        return {
            "loading": self.loading,
            "faqs": FAQS,
            "feedbackTypes": values(FeedbackType),
            "feedback": FeedbackSchema(many=True).dump(items),
            "message": self.SUCCESS_MESSAGE if self.submitted else None,
            "empty": self.empty_view(items),
            "error": self.error,
        }


class AdminFeedbackPage(PageController):
    empty_state = EmptyState('📭', '暂无用户反馈')

    def __init__(self, services, status: Optional[str] = None):
        super().__init__(services)
        self.status = status if status in values(FeedbackStatus) else None

    def load(self) -> bool:
        params = {'status': self.status} if self.status else {}
        return self._load(
            lambda: unwrap_list(self.services['feedback'].get_all_feedback(params, cancel_token=self.cancel_token).data),
            self.store.replace_all,
            fallback=[],
            label='전체 의견 목록',
        )

    def update(self, feedback_id: str, update_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['feedback'].update_feedback(feedback_id, update_data),
            '更新失败，请重试', '의견 처리'
        )
        if response is None:
            return None
        updated = unwrap_record(response.data)
        if updated and record_id(updated):
            self.store.upsert(updated)
            return updated
        return self.store.dispatch(PATCHED, feedback_id, **update_data)

    def to_view(self):
        items = self.store.all()
        return {
            "loading": self.loading,
            "status": self.status,
            "statuses": values(FeedbackStatus),
            "feedback": FeedbackSchema(many=True).dump(items),
            "empty": self.empty_view(items),
            "error": self.error,
        }
