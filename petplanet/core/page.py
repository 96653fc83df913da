# petplanet/core/page.py
"""
페이지 컨트롤러 공통 기반.

모든 페이지는 같은 흐름을 따릅니다.
1. 조회 전에 loading=True, 끝나면 finally에서 False
2. 성공하면 결과를 보관하고, 실패하면 로그만 남기고 빈 값으로 대체
3. 변경 요청(좋아요, 취소, 삭제 등)이 성공하면 목록을 다시 받거나 ResourceStore로 필드만 패치

추가로 마지막 요청의 응답만 반영하고(RequestGeneration), close() 이후 도착한 응답은 버립니다.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional

from petplanet.core.concurrency import CancelToken, Debouncer, RequestGeneration, all_settled
from petplanet.core.errors import ApiError, NetworkError, RequestCancelled, UnauthorizedError
from petplanet.core.store import ResourceStore

logger = logging.getLogger(__name__)

# 백엔드에 닿지 못한 변경 요청은 502로 응답합니다.
NETWORK_ERROR_STATUS = 502


@dataclass
class EmptyState:
    """목록이 비었을 때 보여줄 안내. action은 (라벨, 경로) 형태의 선택 항목입니다."""
    icon: str
    message: str
    action_label: Optional[str] = None
    action_href: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class PageController:
    empty_state: Optional[EmptyState] = None

    def __init__(self, services: Dict[str, Any]):
        self.services = services
        self.loading = False
        self.error: Optional[str] = None
        self.error_status: Optional[int] = None
        self.store = ResourceStore()
        self.cancel_token = CancelToken()
        self._generation = RequestGeneration()
        self._debouncers: List[Debouncer] = []

    # --- 조회 ---
    def _load(self, fetch: Callable[[], Any], apply: Callable[[Any], None],
              fallback: Any = None, label: str = 'data') -> bool:
        """
        fetch 결과를 apply에 넘깁니다. 실패하면 fallback을 넘깁니다.
        더 새로운 요청이 시작되었거나 페이지가 닫혔다면 아무것도 반영하지 않고 False를 반환합니다.
        """
        ticket = self._generation.next()
        self.loading = True
        try:
            result = fetch()
        except UnauthorizedError:
            raise
        except RequestCancelled:
            logger.debug(f"{label} 조회 취소됨")
            return False
        except (ApiError, NetworkError) as e:
            logger.error(f"{label} 조회 실패: {e}", exc_info=True)
            result = fallback
        finally:
            if self._generation.is_current(ticket):
                self.loading = False

        if self.cancel_token.cancelled or not self._generation.is_current(ticket):
            logger.debug(f"오래된 {label} 응답을 폐기합니다 (ticket={ticket})")
            return False
        apply(result)
        return True

    def _gather(self, calls: List[Callable[[], Any]], fallbacks: List[Any], label: str = 'data') -> List[Any]:
        """
        독립적인 조회를 동시에 실행합니다(all-settled).
        실패한 항목만 fallback으로 바꾸고, 401은 그대로 전파합니다.
        """
        results = []
        for settled, fallback in zip(all_settled(calls), fallbacks):
            if settled.ok:
                results.append(settled.value)
                continue
            reason = settled.reason
            if isinstance(reason, UnauthorizedError) or not isinstance(reason, (ApiError, NetworkError)):
                raise reason
            logger.error(f"{label} 조회 실패: {reason}", exc_info=reason)
            results.append(fallback)
        return results

    # --- 변경 ---
    def _not_found(self, message: str) -> None:
        """변경할 대상이 화면에 없으면 요청을 보내지 않고 404로 끝냅니다."""
        self.error = message
        self.error_status = 404

    def _mutate(self, call: Callable[[], Any], error_message: str, label: str = 'action',
                prefer_server_message: bool = False) -> Any:
        """
        변경 요청을 실행합니다. 실패하면 로그를 남기고 error에 사용자용 문구를 담은 뒤 None을 반환합니다.
        prefer_server_message이면 백엔드가 준 message를 우선 보여줍니다.
        401은 강제 로그아웃을 위해 그대로 전파합니다.
        """
        self.error = None
        self.error_status = None
        try:
            return call()
        except UnauthorizedError:
            raise
        except ApiError as e:
            logger.error(f"{label} 실패: {e}", exc_info=True)
            self.error = (prefer_server_message and e.message) or error_message
            self.error_status = e.status
            return None
        except NetworkError as e:
            logger.error(f"{label} 실패: {e}", exc_info=True)
            self.error = error_message
            self.error_status = NETWORK_ERROR_STATUS
            return None

    def record_view(self, item_type: str, item_id: str):
        """상세 화면 방문 기록. 실패해도 화면 표시에는 영향을 주지 않습니다."""
        try:
            self.services['history'].add_to_history(item_type, item_id)
        except UnauthorizedError:
            raise
        except (ApiError, NetworkError) as e:
            logger.warning(f"방문 기록 저장 실패 ({item_type}:{item_id}): {e}")

    def debounce(self, interval: float, fn: Callable[..., Any]) -> Debouncer:
        debouncer = Debouncer(interval, fn)
        self._debouncers.append(debouncer)
        return debouncer

    def close(self):
        """페이지를 떠날 때 호출합니다. 진행 중인 요청과 대기 중인 검색을 모두 버립니다."""
        self.cancel_token.cancel()
        for debouncer in self._debouncers:
            debouncer.cancel()

    # --- 렌더링 ---
    def empty_view(self, items: List[Any]) -> Optional[Dict[str, Any]]:
        if items or self.loading or self.empty_state is None:
            return None
        return self.empty_state.to_dict()

    def to_view(self) -> Dict[str, Any]:
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
