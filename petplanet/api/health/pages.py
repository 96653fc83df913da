# petplanet/api/health/pages.py
"""
건강 관리 화면: 건강 센터(오늘 기록 + AI 분석), 기록 추가, 기간별 기록 조회,
그리고 어드바이저를 쓰는 급식 추천/품종 인식/아바타 생성.
"""
import logging
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.health.schemas import HealthLogSchema
from petplanet.api.pets.schemas import PetSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)

HISTORY_DAYS_CHOICES = (7, 30, 90)


def advisor_metrics(log: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """건강 기록 한 건을 어드바이저 입력 형식으로 바꿉니다."""
    if not log:
        return {}
    diet = log.get('diet') or {}
    metrics = {
        'weight': log.get('weight'),
        'temperature': log.get('temperature'),
        'foodIntake': diet.get('foodAmount'),
        'waterIntake': diet.get('waterAmount'),
        'mood': log.get('mood'),
    }
    return {k: v for k, v in metrics.items() if v is not None}


class HealthCenterPage(PageController):
    empty_state = EmptyState('📋', '今天还没有健康记录', '添加记录', '/pets/{pet_id}/health/add')

    def __init__(self, services, pet_id: str):
        super().__init__(services)
        self.pet_id = str(pet_id)
        self.pet: Optional[Dict[str, Any]] = None
        self.today_log: Optional[Dict[str, Any]] = None
        self.recent_logs: List[Dict[str, Any]] = []
        self.analytics: Optional[Dict[str, Any]] = None
        self.insights: Optional[Dict[str, Any]] = None

    def load(self) -> bool:
        pets = self.services['pets']
        health = self.services['health']
        token = self.cancel_token
        today = DateTimeUtils.date_range_params(1)

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_record(pets.get_pet(self.pet_id, cancel_token=token).data),
                    lambda: unwrap_list(health.get_health_logs(self.pet_id, today, cancel_token=token).data),
                    lambda: unwrap_list(health.get_health_logs(self.pet_id, {'limit': 7}, cancel_token=token).data),
                    lambda: unwrap_record(health.get_health_analytics(self.pet_id, cancel_token=token).data),
                ],
                fallbacks=[None, [], [], None],
                label='건강 센터',
            )

        def apply(result):
            self.pet, today_logs, self.recent_logs, self.analytics = result
            self.today_log = today_logs[0] if today_logs else None

        if not self._load(fetch, apply, label='건강 센터'):
            return False
        self.analyze()
        return True

    def analyze(self) -> Optional[Dict[str, Any]]:
        """오늘 기록과 최근 기록으로 AI 건강 분석을 요청합니다."""
        result = self.services['advisor'].analyze_health(
            self.pet_id, self.pet, advisor_metrics(self.today_log), self.recent_logs
        )
        if not result.get('success'):
            logger.warning(f"건강 분석 실패 (pet_id: {self.pet_id}): {result.get('message')}")
            self.insights = None
            return None
        self.insights = result['data']
        return self.insights

    def to_view(self):
        empty = None
        if not self.today_log and not self.loading:
            empty = self.empty_state.to_dict()
            empty['action_href'] = empty['action_href'].format(pet_id=self.pet_id)
        return {
            "loading": self.loading,
            "pet": PetSchema().dump(self.pet) if self.pet else None,
            "todayLog": HealthLogSchema().dump(self.today_log) if self.today_log else None,
            "analytics": self.analytics,
            "insights": self.insights,
            "empty": empty,
        }


class AddHealthLogPage(PageController):
    SUCCESS_MESSAGE = '健康记录已保存！'

    def __init__(self, services, pet_id: str):
        super().__init__(services)
        self.pet_id = str(pet_id)
        self.saved: Optional[Dict[str, Any]] = None

    def submit(self, log_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """저장에 실패하면 백엔드가 준 문구를, 없으면 기본 문구를 보여줍니다."""
        log_data = dict(log_data)
        log_data.setdefault('date', DateTimeUtils.to_date_string(DateTimeUtils.today()))
        response = self._mutate(
            lambda: self.services['health'].create_health_log(self.pet_id, log_data),
            '保存失败，请重试', '건강 기록 저장', prefer_server_message=True
        )
        if response is None:
            return None
        self.saved = unwrap_record(response.data)
        return self.saved

    def to_view(self):
        return {
            "petId": self.pet_id,
            "saved": HealthLogSchema().dump(self.saved) if self.saved else None,
            "message": self.SUCCESS_MESSAGE if self.saved else None,
            "redirect": f"/pets/{self.pet_id}/health" if self.saved else None,
            "error": self.error,
        }


class HealthHistoryPage(PageController):
    empty_state = EmptyState('📅', '该时间段内没有健康记录', '添加记录', None)

    def __init__(self, services, pet_id: str, days: int = 30):
        super().__init__(services)
        self.pet_id = str(pet_id)
        self.days = days if days in HISTORY_DAYS_CHOICES else 30
        self.analytics: Optional[Dict[str, Any]] = None

    def load(self) -> bool:
        health = self.services['health']
        token = self.cancel_token
        params = DateTimeUtils.date_range_params(self.days)

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_list(health.get_health_logs(self.pet_id, params, cancel_token=token).data),
                    lambda: unwrap_record(health.get_health_analytics(self.pet_id, self.days, cancel_token=token).data),
                ],
                fallbacks=[[], None],
                label='건강 기록',
            )

        def apply(result):
            logs, self.analytics = result
            self.store.replace_all(logs)

        return self._load(fetch, apply, label='건강 기록')

    def to_view(self):
        logs = self.store.all()
        empty = self.empty_view(logs)
        if empty:
            empty['action_href'] = f"/pets/{self.pet_id}/health/add"
        return {
            "loading": self.loading,
            "days": self.days,
            "dayChoices": list(HISTORY_DAYS_CHOICES),
            "logs": HealthLogSchema(many=True).dump(logs),
            "analytics": self.analytics,
            "empty": empty,
        }


class AdvisorPage:
    """어드바이저 단건 호출(급식 추천, 사진 분석, 아바타 생성)."""

    def __init__(self, advisor):
        self.advisor = advisor
        self.result: Optional[Dict[str, Any]] = None
        self.error: Optional[str] = None

    def _run(self, call) -> Optional[Dict[str, Any]]:
        self.error = None
        result = call()
        if not result.get('success'):
            self.error = result.get('message') or '分析失败，请稍后再试'
            return None
        self.result = result['data']
        return self.result

    def feeding(self, pet_data: Dict[str, Any]):
        return self._run(lambda: self.advisor.feeding_recommendation(pet_data))

    def analyze_image(self, image: Any, analysis_type: str = 'breed'):
        return self._run(lambda: self.advisor.analyze_image(image, analysis_type))

    def generate_avatar(self, pet_data: Dict[str, Any]):
        return self._run(lambda: self.advisor.generate_avatar(pet_data))

    def avatar_status(self, task_id: str):
        return self._run(lambda: self.advisor.check_avatar_status(task_id))

    def to_view(self):
        return {"result": self.result, "error": self.error}
