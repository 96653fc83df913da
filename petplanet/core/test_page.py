# petplanet/core/test_page.py
import pytest

from petplanet.core.errors import ApiError, NetworkError, RequestCancelled, UnauthorizedError
from petplanet.core.page import NETWORK_ERROR_STATUS, EmptyState, PageController


class ListPage(PageController):
    empty_state = EmptyState('🐾', '空空如也')

    def __init__(self):
        super().__init__({})
        self.items = None

    def apply(self, items):
        self.items = items

    def to_view(self):
        return {"items": self.items, "empty": self.empty_view(self.items or [])}


def fail(error):
    def call():
        raise error
    return call


def test_load_applies_result_and_clears_loading():
    page = ListPage()
    assert page._load(lambda: [1, 2], page.apply, fallback=[]) is True
    assert page.items == [1, 2]
    assert page.loading is False


@pytest.mark.parametrize('error', [ApiError(500, 'down'), NetworkError('timeout')])
def test_load_failure_uses_fallback(error):
    page = ListPage()
    assert page._load(fail(error), page.apply, fallback=[]) is True
    assert page.items == []
    assert page.loading is False
    assert page.to_view()['empty'] == {
        'icon': '🐾', 'message': '空空如也', 'action_label': None, 'action_href': None
    }


def test_unauthorized_propagates():
    page = ListPage()
    with pytest.raises(UnauthorizedError):
        page._load(fail(UnauthorizedError(401, 'expired')), page.apply, fallback=[])
    assert page.loading is False


def test_stale_response_is_discarded():
    page = ListPage()
    applied = []

    def older():
        # 응답이 오기 전에 더 새로운 조회가 시작됩니다.
        page._load(lambda: 'newer', applied.append)
        return 'older'

    assert page._load(older, applied.append) is False
    assert applied == ['newer']


def test_closed_page_ignores_responses():
    page = ListPage()

    def fetch():
        page.close()
        return [1]

    assert page._load(fetch, page.apply) is False
    assert page.items is None


def test_cancelled_request_is_not_an_error():
    page = ListPage()
    assert page._load(fail(RequestCancelled()), page.apply, fallback=[]) is False
    assert page.items is None


def test_gather_replaces_only_failed_calls():
    page = ListPage()
    results = page._gather(
        [lambda: 'a', fail(ApiError(404, 'missing')), lambda: 'c'],
        fallbacks=[None, [], None],
    )
    assert results == ['a', [], 'c']


def test_gather_propagates_unauthorized_and_bugs():
    page = ListPage()
    with pytest.raises(UnauthorizedError):
        page._gather([lambda: 1, fail(UnauthorizedError(401, 'x'))], fallbacks=[None, None])
    with pytest.raises(KeyError):
        page._gather([fail(KeyError('bug'))], fallbacks=[None])


def test_mutate_sets_error_and_status():
    page = ListPage()
    assert page._mutate(fail(ApiError(409, '库存不足')), '下单失败') is None
    assert page.error == '下单失败'
    assert page.error_status == 409

    assert page._mutate(fail(ApiError(409, '库存不足')), '下单失败', prefer_server_message=True) is None
    assert page.error == '库存不足'

    assert page._mutate(fail(NetworkError('offline')), '下单失败') is None
    assert page.error_status == NETWORK_ERROR_STATUS

    assert page._mutate(lambda: 'ok', '下单失败') == 'ok'
    assert page.error is None and page.error_status is None


def test_context_manager_cancels_debouncers():
    fired = []
    with ListPage() as page:
        debouncer = page.debounce(10, fired.append)
        debouncer('x')
    assert page.cancel_token.cancelled
    assert not debouncer.pending
    assert fired == []


def test_record_view_failure_is_ignored():
    class History:
        def add_to_history(self, item_type, item_id):
            raise ApiError(500, 'down')

    page = PageController({'history': History()})
    page.record_view('post', 'p1')
