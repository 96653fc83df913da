# petplanet/core/test_store.py
import pytest

from petplanet.core.store import (
    BOOKMARK_TOGGLED, COMMENT_ADDED, FOLLOW_TOGGLED, LIKE_TOGGLED, PATCHED, REMOVED, ResourceStore, record_id
)


@pytest.fixture
def store():
    return ResourceStore([
        {'_id': 'p1', 'isLiked': False, 'likesCount': 3, 'commentsCount': 0},
        {'_id': 'p2', 'isLiked': True, 'likesCount': 0},
    ])


def test_record_id():
    assert record_id({'_id': 1}) == '1'
    assert record_id({'id': 'x'}) == 'x'
    assert record_id({}) is None
    assert record_id('nope') is None


def test_like_toggle_twice_restores(store):
    store.dispatch(LIKE_TOGGLED, 'p1')
    assert store.get('p1')['isLiked'] is True
    assert store.get('p1')['likesCount'] == 4

    store.dispatch(LIKE_TOGGLED, 'p1')
    assert store.get('p1')['isLiked'] is False
    assert store.get('p1')['likesCount'] == 3


def test_count_never_negative(store):
    store.dispatch(LIKE_TOGGLED, 'p2')
    assert store.get('p2') == {'_id': 'p2', 'isLiked': False, 'likesCount': 0}


def test_server_values_win(store):
    store.dispatch(LIKE_TOGGLED, 'p1', isLiked=True, likesCount=10)
    assert store.get('p1')['likesCount'] == 10


def test_bookmark_and_follow_toggles():
    store = ResourceStore([{'_id': 'x'}])
    store.dispatch(BOOKMARK_TOGGLED, 'x')
    store.dispatch(FOLLOW_TOGGLED, 'x')
    record = store.get('x')
    assert record['isBookmarked'] is True and record['bookmarksCount'] == 1
    assert record['isFollowing'] is True and record['followersCount'] == 1


def test_comment_added(store):
    store.dispatch(COMMENT_ADDED, 'p1', comment={'content': '好可爱'})
    assert store.get('p1')['comments'] == [{'content': '好可爱'}]
    assert store.get('p1')['commentsCount'] == 1


def test_patched_and_removed(store):
    store.dispatch(PATCHED, 'p1', status='cancelled')
    assert store.get('p1')['status'] == 'cancelled'

    store.dispatch(REMOVED, 'p1')
    assert 'p1' not in store
    assert len(store) == 1


def test_unknown_id_is_ignored(store):
    assert store.dispatch(PATCHED, 'missing', a=1) is None


def test_unknown_kind_raises(store):
    with pytest.raises(ValueError):
        store.dispatch('exploded', 'p1')


def test_replace_all_skips_records_without_id():
    store = ResourceStore()
    store.replace_all([{'_id': 'a'}, {'name': 'no id'}, {'id': 'b'}])
    assert [record_id(r) for r in store.all()] == ['a', 'b']
