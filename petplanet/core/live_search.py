# petplanet/core/live_search.py
"""
검색창 실시간 입력(search-as-you-type).

같은 세션에서 짧은 간격으로 들어온 입력 요청들은 하나의 페이지 컨트롤러를 공유합니다.
페이지의 디바운서가 마지막 입력 후 한 번만 목록을 다시 불러오고,
기다리던 요청들은 모두 그 (마지막 검색어의) 결과를 받습니다.
"""
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Hashable, Optional

from flask import session

logger = logging.getLogger(__name__)

SEARCH_KEY = 'liveSearchKey'


def session_search_key() -> str:
    """세션마다 고정된 검색 키. 처음 검색할 때 만들어 세션 쿠키에 저장합니다."""
    key = session.get(SEARCH_KEY)
    if not key:
        key = uuid.uuid4().hex
        session[SEARCH_KEY] = key
    return key


class _Entry:
    def __init__(self, page):
        self.page = page
        self.waiters = 0


class LiveSearch:
    """
    검색 중인 페이지 레지스트리.
    페이지는 on_search_input(term), wait_search(timeout), close()를 제공해야 합니다.
    마지막으로 기다리던 요청이 끝나면 페이지를 닫고 레지스트리에서 뺍니다.
    """

    def __init__(self, timeout: float):
        self.timeout = timeout
        self._lock = threading.Lock()
        self._entries: Dict[Hashable, _Entry] = {}

    def search(self, key: Hashable, create_page: Callable[[], Any], term: str,
               render: Callable[[Any], Any], prepare: Optional[Callable[[Any], None]] = None) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry(create_page())
            entry.waiters += 1
        page = entry.page
        try:
            if prepare is not None:
                prepare(page)
            page.on_search_input(term)
            if not page.wait_search(self.timeout):
                logger.warning(f"실시간 검색 대기 시간 초과 ({key}, term={term!r})")
            return render(page)
        finally:
            with self._lock:
                entry.waiters -= 1
                if entry.waiters == 0:
                    self._entries.pop(key, None)
                    page.close()

    def __len__(self):
        with self._lock:
            return len(self._entries)
