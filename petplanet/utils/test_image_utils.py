# petplanet/utils/test_image_utils.py
import pytest
import requests

from petplanet.utils import image_utils
from petplanet.utils.image_utils import (
    DEFAULT_AVATAR, DEFAULT_PLACEHOLDER, asset_base_url, get_avatar_url, get_image_url, get_media_url,
    is_image_accessible
)


@pytest.fixture(autouse=True)
def default_api_url(monkeypatch):
    monkeypatch.delenv('VITE_API_URL', raising=False)


@pytest.mark.parametrize('path', [None, ''])
def test_empty_path_uses_placeholder(path):
    assert get_image_url(path) == DEFAULT_PLACEHOLDER


def test_absolute_urls_are_unchanged():
    assert get_image_url('http://cdn.example.com/a.png') == 'http://cdn.example.com/a.png'
    assert get_image_url('https://cdn.example.com/a.png') == 'https://cdn.example.com/a.png'


def test_relative_paths_join_with_single_slash():
    assert get_image_url('uploads/a.png') == 'http://localhost:5000/uploads/a.png'
    assert get_image_url('/uploads/a.png') == 'http://localhost:5000/uploads/a.png'


def test_asset_base_strips_api_suffix(monkeypatch):
    monkeypatch.setenv('VITE_API_URL', 'https://api.petplanet.cn/api')
    assert asset_base_url() == 'https://api.petplanet.cn'
    assert get_image_url('/uploads/a.png') == 'https://api.petplanet.cn/uploads/a.png'


def test_asset_base_prefers_app_config(app, monkeypatch):
    monkeypatch.setenv('VITE_API_URL', 'https://env.example.com/api')
    app.config['VITE_API_URL'] = 'https://cdn.petplanet.cn/api'

    with app.app_context():
        assert asset_base_url() == 'https://cdn.petplanet.cn'
        assert get_image_url('uploads/a.png') == 'https://cdn.petplanet.cn/uploads/a.png'

    assert asset_base_url() == 'https://env.example.com'


def test_avatar_and_media():
    assert get_avatar_url(None) == DEFAULT_AVATAR
    assert get_avatar_url('', default_avatar='/x.png') == '/x.png'
    assert get_avatar_url('/avatars/u1.png') == 'http://localhost:5000/avatars/u1.png'

    assert get_media_url({'url': '/m/1.jpg', 'type': 'image'}) == 'http://localhost:5000/m/1.jpg'
    assert get_media_url('/m/2.jpg') == 'http://localhost:5000/m/2.jpg'
    assert get_media_url({}) == DEFAULT_PLACEHOLDER


def test_is_image_accessible(monkeypatch):
    class Ok:
        ok = True

    monkeypatch.setattr(image_utils.requests, 'head', lambda url, **kw: Ok())
    assert is_image_accessible('http://x/a.png') is True

    def boom(url, **kw):
        raise requests.ConnectionError('down')

    monkeypatch.setattr(image_utils.requests, 'head', boom)
    assert is_image_accessible('http://x/a.png') is False
