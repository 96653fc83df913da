# petplanet/api/users/test_profile_pages.py
from conftest import USER

from petplanet.api.users.pages import ProfilePage


def _mock_profile(fake_http, user_id, profile):
    fake_http.on('GET', f'/users/{user_id}', {'data': profile})
    fake_http.on('GET', f'/users/{user_id}/stats', {'data': {'postsCount': 3}})
    fake_http.on('GET', f'/users/{user_id}/followers', {'data': [{'_id': 'u9', 'username': 'eve'}]})
    fake_http.on('GET', f'/users/{user_id}/following', [])
    fake_http.on('GET', f'/posts/user/{user_id}', [])


def test_own_profile_defaults_to_viewer(services, fake_http):
    _mock_profile(fake_http, 'u1', USER)
    page = ProfilePage(services, viewer=USER)

    page.load()

    view = page.to_view()
    assert view['isMe'] is True
    assert view['stats']['postsCount'] == 3
    assert view['followers'][0]['username'] == 'eve'
    assert page.toggle_follow() is None


def test_follow_toggle_round_trip(services, fake_http):
    _mock_profile(fake_http, 'u2', {'_id': 'u2', 'username': 'bob', 'followers': ['u9'], 'isFollowing': False})
    fake_http.on('POST', '/users/u2/follow', {'success': True})
    fake_http.on('DELETE', '/users/u2/follow', {'success': True})
    page = ProfilePage(services, 'u2', viewer=USER)
    page.load()

    followed = page.toggle_follow()
    assert followed['isFollowing'] is True
    assert followed['followersCount'] == 2

    unfollowed = page.toggle_follow()
    assert unfollowed['isFollowing'] is False
    assert unfollowed['followersCount'] == 1


def test_follow_state_comes_from_followers_array(services, fake_http):
    # 백엔드 프로필 응답에는 isFollowing 없이 populate된 followers만 있습니다.
    _mock_profile(fake_http, 'u2', {'_id': 'u2', 'username': 'bob', 'followers': [{'_id': 'u1', 'username': 'alice'}]})
    fake_http.on('POST', '/users/u2/follow', {'success': True})
    fake_http.on('DELETE', '/users/u2/follow', {'success': True})
    page = ProfilePage(services, 'u2', viewer=USER)
    page.load()
    assert page.to_view()['profile']['isFollowing'] is True

    unfollowed = page.toggle_follow()

    assert len(fake_http.find('DELETE', '/users/u2/follow')) == 1
    assert fake_http.find('POST', '/users/u2/follow') == []
    assert unfollowed['isFollowing'] is False
    assert unfollowed['followersCount'] == 0

    followed = page.toggle_follow()
    assert len(fake_http.find('POST', '/users/u2/follow')) == 1
    assert followed['isFollowing'] is True
    assert followed['followersCount'] == 1


def test_upload_avatar_patches_profile(services, fake_http):
    _mock_profile(fake_http, 'u1', USER)
    fake_http.on('POST', '/users/avatar', {'success': True, 'data': {'avatar': '/uploads/a.png'}})
    page = ProfilePage(services, viewer=USER)
    page.load()

    assert page.upload_avatar(('a.png', b'png', 'image/png')) == '/uploads/a.png'
    assert page.profile['avatar'] == '/uploads/a.png'
    assert fake_http.find('POST', '/users/avatar')[0]['files'] == {'avatar': ('a.png', b'png', 'image/png')}
