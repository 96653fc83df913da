# petplanet/api/rankings/pages.py
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.rankings.schemas import RankingSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.models.enums import RankingCategory, values

# 랭킹 탭 이름
CATEGORY_LABELS = {
    RankingCategory.CUTE.value: '最萌宠物',
    RankingCategory.WELL_BEHAVED.value: '最乖宠物',
    RankingCategory.ACTIVE.value: '最活泼宠物',
    RankingCategory.SMART.value: '最聪明宠物',
}


class RankingsPage(PageController):
    empty_state = EmptyState('🏆', '暂无排行数据')

    def __init__(self, services, category: Optional[str] = None):
        super().__init__(services)
        self.category = category if category in CATEGORY_LABELS else RankingCategory.CUTE.value
        self.rankings: List[Dict[str, Any]] = []
        self.voted: Optional[Dict[str, Any]] = None

    def load(self) -> bool:
        def apply(rankings):
            self.rankings = rankings

        return self._load(
            lambda: unwrap_list(self.services['rankings'].get_rankings(
                {'category': self.category}, cancel_token=self.cancel_token).data),
            apply,
            fallback=[],
            label='랭킹',
        )

    def vote(self, pet_id: str) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['rankings'].vote_for_pet({'petId': pet_id, 'category': self.category}),
            '投票失败，请重试', '투표', prefer_server_message=True
        )
        if response is None:
            return None
        self.voted = unwrap_record(response.data) or {}
        # 순위가 바뀌었을 수 있으므로 목록 전체를 다시 받습니다.
        self.load()
        return self.voted

    def to_view(self):
        return {
            "loading": self.loading,
            "category": self.category,
            "categories": [{'value': value, 'label': CATEGORY_LABELS[value]} for value in values(RankingCategory)],
            "rankings": RankingSchema(many=True).dump(self.rankings),
            "message": '投票成功！' if self.voted is not None else None,
            "empty": self.empty_view(self.rankings),
            "error": self.error,
        }
