# conftest.py
"""
공용 테스트 픽스처.

백엔드 REST API 대신 FakeHttp(가짜 전송 계층)를 ApiClient에 주입합니다.
테스트는 fake_http.on(...)으로 응답을 등록하고, fake_http.calls로 실제 요청을 확인합니다.
"""
import json as jsonlib
import threading

import pytest
import requests

from petplanet import create_app
from petplanet.core.config import DEFAULT_API_URL
from petplanet.core.http import ApiClient
from petplanet.services.health_advisor import MockHealthAdvisor

USER = {'_id': 'u1', 'username': 'alice', 'email': 'alice@example.com', 'role': 'user'}
ADMIN = {'_id': 'a1', 'username': 'root', 'email': 'root@example.com', 'role': 'admin'}


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        if body is None:
            self.content = b''
        elif isinstance(body, str):
            self.content = body.encode('utf-8')
        else:
            self.content = jsonlib.dumps(body).encode('utf-8')

    @property
    def text(self):
        return self.content.decode('utf-8')

    def json(self):
        return jsonlib.loads(self.content)


class FakeHttp:
    """requests.Session 대용. (method, path) 별로 응답을 등록합니다."""

    def __init__(self, base_url=DEFAULT_API_URL):
        self.base_url = base_url
        self.headers = {}
        self.calls = []
        self._routes = {}
        self._lock = threading.Lock()

    def on(self, method, path, body=None, status=200, raises=None, handler=None):
        self._routes[(method.upper(), path)] = (status, body, raises, handler)
        return self

    def request(self, method, url, params=None, json=None, data=None, files=None, headers=None, timeout=None):
        path = url[len(self.base_url):] if url.startswith(self.base_url) else url
        call = {
            'method': method, 'path': path, 'params': params, 'json': json,
            'data': data, 'files': files, 'headers': dict(headers or {}),
        }
        with self._lock:
            self.calls.append(call)
        status, body, raises, handler = self._routes.get(
            (method.upper(), path), (404, {'success': False, 'message': 'Not found'}, None, None)
        )
        if raises is not None:
            raise raises
        if handler is not None:
            return handler(call)
        return FakeResponse(status, body)

    def find(self, method, path):
        return [c for c in self.calls if c['method'] == method and c['path'] == path]


@pytest.fixture
def fake_http():
    return FakeHttp()


@pytest.fixture
def api_client(fake_http):
    return ApiClient(base_url=DEFAULT_API_URL, http=fake_http)


@pytest.fixture
def app(fake_http):
    app = create_app('testing', http=fake_http, advisor=MockHealthAdvisor())
    return app


@pytest.fixture
def services(app):
    return app.services


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, fake_http, user):
    with client.session_transaction() as sess:
        sess['token'] = 'test-token'
    fake_http.on('GET', '/auth/me', {'success': True, 'data': user})


@pytest.fixture
def logged_in(client, fake_http):
    _login(client, fake_http, USER)
    return client


@pytest.fixture
def admin_client(client, fake_http):
    _login(client, fake_http, ADMIN)
    return client


@pytest.fixture
def network_down():
    return requests.ConnectionError('connection refused')
