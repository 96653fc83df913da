# petplanet/core/test_security.py
from flask import session

from petplanet.core.session import STATUS_LOADING


class LoadingSession:
    status = STATUS_LOADING
    is_admin = False

    def hydrate(self):
        return None


def test_unauthenticated_redirects_to_login(client):
    response = client.get('/bookings')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')
    # 원래 가려던 위치는 보존하지 않습니다.
    assert 'next' not in response.headers['Location']


def test_loading_shows_spinner(app, client):
    app.session_factory = LoadingSession
    response = client.get('/bookings')
    assert response.status_code == 202
    assert response.get_json() == {'loading': True}


def test_admin_loading_shows_spinner(app, client):
    app.session_factory = LoadingSession
    response = client.get('/admin')
    assert response.status_code == 202
    assert response.get_json() == {'loading': True}


def test_authenticated_view_runs(logged_in, fake_http):
    fake_http.on('GET', '/bookings', {'success': True, 'data': []})
    response = logged_in.get('/bookings')
    assert response.status_code == 200
    assert response.get_json()['bookings'] == []


def test_admin_required_sends_regular_user_home(logged_in):
    response = logged_in.get('/admin')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/')


def test_admin_required_allows_admin(admin_client, fake_http):
    fake_http.on('GET', '/stats', {'success': True, 'data': {'counts': {'users': 5}}})
    response = admin_client.get('/admin')
    assert response.status_code == 200
    assert response.get_json()['stats']['counts']['users'] == 5


def test_401_anywhere_forces_logout(logged_in, fake_http):
    fake_http.on('GET', '/bookings', {'message': 'Token expired'}, status=401)

    with logged_in:
        response = logged_in.get('/bookings')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/login')
        assert 'token' not in session
