# petplanet/core/concurrency.py
"""
요청 취소, 오래된 응답 폐기, 병렬 조회, 검색 디바운스를 위한 도구 모음.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from flask import copy_current_request_context, has_request_context

from petplanet.core.errors import RequestCancelled

logger = logging.getLogger(__name__)


class CancelToken:
    """
    화면이 닫힐 때(unmount) 진행 중인 요청의 결과를 버리기 위한 토큰.
    한 번 취소되면 되돌릴 수 없습니다.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self):
        if self._event.is_set():
            raise RequestCancelled("요청이 취소되었습니다.")


class RequestGeneration:
    """
    단조 증가하는 요청 번호 발급기.
    가장 마지막에 발급된 번호의 응답만 화면에 반영합니다.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._current = 0

    def next(self) -> int:
        with self._lock:
            self._current += 1
            return self._current

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._current

    @property
    def current(self) -> int:
        return self._current


@dataclass
class Settled:
    """all_settled 결과 한 건. status는 'fulfilled' 또는 'rejected'."""
    status: str
    value: Any = None
    reason: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == 'fulfilled'


def all_settled(calls: Sequence[Callable[[], Any]], max_workers: Optional[int] = None) -> List[Settled]:
    """
    독립적인 호출들을 병렬로 실행하고, 실패 여부와 관계없이 모두 끝날 때까지 기다립니다.
    결과는 입력 순서대로 반환되며, 하나의 실패가 다른 결과를 막지 않습니다.
    """
    if not calls:
        return []

    if has_request_context():
        # 워커 스레드에서도 세션(토큰)에 접근할 수 있도록 요청 컨텍스트를 복사합니다.
        calls = [copy_current_request_context(call) for call in calls]

    results: List[Settled] = []
    with ThreadPoolExecutor(max_workers=max_workers or len(calls)) as executor:
        futures = [executor.submit(call) for call in calls]
        for future in futures:
            try:
                results.append(Settled('fulfilled', value=future.result()))
            except Exception as e:
                results.append(Settled('rejected', reason=e))
    return results


class Debouncer:
    """
    마지막 호출 후 interval초 동안 추가 호출이 없을 때만 fn을 실행합니다.
    검색창 입력처럼 연속으로 들어오는 요청을 하나로 묶는 데 사용합니다.
    요청 처리 중에 호출되면 그 요청 컨텍스트를 복사해 타이머 스레드에서 실행합니다.
    """

    def __init__(self, interval: float, fn: Callable[..., Any]):
        self.interval = interval
        self.fn = fn
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()
        self._settled = threading.Event()
        self._settled.set()

    def __call__(self, *args, **kwargs):
        fn = self.fn
        if has_request_context():
            fn = copy_current_request_context(fn)
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._settled.clear()
            self._timer = threading.Timer(self.interval, self._fire, args=(fn,) + args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, fn: Callable[..., Any], *args, **kwargs):
        with self._lock:
            # 실행 직전에 새 호출이 들어와 타이머가 바뀌었다면 그 타이머는 그대로 둡니다.
            if self._timer is threading.current_thread():
                self._timer = None
        try:
            fn(*args, **kwargs)
        except Exception as e:
            logger.error(f"디바운스된 호출 실패: {e}", exc_info=True)
        finally:
            with self._lock:
                if self._timer is None:
                    self._settled.set()

    def flush(self):
        """대기 중인 호출이 있으면 즉시 실행합니다."""
        with self._lock:
            timer = self._timer
            self._timer = None
        if timer is not None:
            timer.cancel()
            self._fire(*timer.args, **timer.kwargs)

    def cancel(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._settled.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """대기 중인 호출이 실행(또는 취소)될 때까지 기다립니다. 시간 안에 끝나면 True."""
        return self._settled.wait(timeout)

    @property
    def pending(self) -> bool:
        return self._timer is not None
