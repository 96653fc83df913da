# petplanet/core/store.py
"""
화면에 표시 중인 레코드를 id로 보관하는 작은 저장소.

변경 요청이 성공한 뒤 레코드 전체를 다시 받지 않고, 변경 종류별 reducer로
영향받는 필드만 고칩니다(좋아요/북마크/팔로우 토글, 댓글 추가 등).
"""
import threading
from collections import OrderedDict
from typing import Any, Callable, Dict, Iterable, List, Optional

LIKE_TOGGLED = 'like_toggled'
BOOKMARK_TOGGLED = 'bookmark_toggled'
FOLLOW_TOGGLED = 'follow_toggled'
COMMENT_ADDED = 'comment_added'
PATCHED = 'patched'
REMOVED = 'removed'

Record = Dict[str, Any]
Reducer = Callable[[Record, Dict[str, Any]], Optional[Record]]


def record_id(record: Record) -> Optional[str]:
    """백엔드 레코드의 id. Mongo 스타일 `_id`를 우선합니다."""
    if not isinstance(record, dict):
        return None
    value = record.get('_id') or record.get('id')
    return str(value) if value is not None else None


def _toggle(flag_field: str, count_field: str) -> Reducer:
    """
    flag를 뒤집고 count를 ±1 합니다(0 미만으로 내려가지 않음).
    서버가 최신 값을 돌려준 경우 그 값을 그대로 사용합니다.
    """
    def reducer(record: Record, payload: Dict[str, Any]) -> Record:
        updated = dict(record)
        flag = payload.get(flag_field)
        if flag is None:
            flag = not bool(record.get(flag_field))
        updated[flag_field] = bool(flag)

        if payload.get(count_field) is not None:
            updated[count_field] = payload[count_field]
        else:
            count = record.get(count_field) or 0
            if updated[flag_field] != bool(record.get(flag_field)):
                count = count + 1 if updated[flag_field] else count - 1
            updated[count_field] = max(0, count)
        return updated
    return reducer


def _comment_added(record: Record, payload: Dict[str, Any]) -> Record:
    updated = dict(record)
    comment = payload.get('comment')
    if comment is not None:
        updated['comments'] = list(record.get('comments') or []) + [comment]
    if payload.get('commentsCount') is not None:
        updated['commentsCount'] = payload['commentsCount']
    else:
        updated['commentsCount'] = (record.get('commentsCount') or 0) + 1
    return updated


def _patched(record: Record, payload: Dict[str, Any]) -> Record:
    updated = dict(record)
    updated.update(payload)
    return updated


def _removed(record: Record, payload: Dict[str, Any]) -> None:
    return None


REDUCERS: Dict[str, Reducer] = {
    LIKE_TOGGLED: _toggle('isLiked', 'likesCount'),
    BOOKMARK_TOGGLED: _toggle('isBookmarked', 'bookmarksCount'),
    FOLLOW_TOGGLED: _toggle('isFollowing', 'followersCount'),
    COMMENT_ADDED: _comment_added,
    PATCHED: _patched,
    REMOVED: _removed,
}


class ResourceStore:
    def __init__(self, records: Optional[Iterable[Record]] = None):
        self._lock = threading.Lock()
        self._records: "OrderedDict[str, Record]" = OrderedDict()
        if records:
            self.replace_all(records)

    def replace_all(self, records: Iterable[Record]):
        """목록을 새로 받아온 경우 기존 캐시를 통째로 교체합니다."""
        with self._lock:
            self._records = OrderedDict()
            for record in records:
                rid = record_id(record)
                if rid is not None:
                    self._records[rid] = record

    def upsert(self, record: Record):
        rid = record_id(record)
        if rid is None:
            return
        with self._lock:
            self._records[rid] = record

    def get(self, rid: Any) -> Optional[Record]:
        return self._records.get(str(rid))

    def all(self) -> List[Record]:
        return list(self._records.values())

    def dispatch(self, kind: str, rid: Any, **payload) -> Optional[Record]:
        """
        변경 종류(kind)에 맞는 reducer를 적용하고 갱신된 레코드를 반환합니다.
        캐시에 없는 id는 무시합니다.
        """
        reducer = REDUCERS.get(kind)
        if reducer is None:
            raise ValueError(f"알 수 없는 변경 종류입니다: {kind}")
        key = str(rid)
        with self._lock:
            record = self._records.get(key)
            if record is None:
                return None
            updated = reducer(record, payload)
            if updated is None:
                del self._records[key]
            else:
                self._records[key] = updated
            return updated

    def clear(self):
        with self._lock:
            self._records.clear()

    def __len__(self):
        return len(self._records)

    def __contains__(self, rid):
        return str(rid) in self._records
