# petplanet/utils/image_utils.py
"""
백엔드가 돌려주는 상대 경로 이미지를 절대 URL로 바꾸는 도구.
"""
import logging
import os
from typing import Any, Optional

import requests
from flask import current_app, has_app_context

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = '/default-placeholder.png'
DEFAULT_AVATAR = '/default-avatar.png'
DEFAULT_ASSET_BASE = 'http://localhost:5000'


def asset_base_url(api_url: Optional[str] = None) -> str:
    """
    정적 자원 origin. VITE_API_URL에서 '/api'를 뗀 값이며, 없으면 http://localhost:5000.
    앱 컨텍스트 안에서는 앱 설정을, 밖에서는 환경 변수를 읽습니다.
    """
    if api_url is None:
        api_url = current_app.config.get('VITE_API_URL') if has_app_context() else os.getenv('VITE_API_URL')
    if not api_url:
        return DEFAULT_ASSET_BASE
    base = api_url.replace('/api', '', 1).rstrip('/')
    return base or DEFAULT_ASSET_BASE


def get_image_url(path: Optional[str], base: Optional[str] = None) -> str:
    """
    - 값이 없으면 기본 placeholder
    - http:// 또는 https://로 시작하면 그대로
    - 그 외에는 base + '/' + 경로 (앞의 '/'는 하나만 유지)
    """
    if not path:
        return DEFAULT_PLACEHOLDER
    if path.startswith('http://') or path.startswith('https://'):
        return path
    base = base if base is not None else asset_base_url()
    clean_path = path if path.startswith('/') else f"/{path}"
    return f"{base}{clean_path}"


def get_avatar_url(avatar_path: Optional[str], default_avatar: str = DEFAULT_AVATAR) -> str:
    if not avatar_path:
        return default_avatar
    return get_image_url(avatar_path)


def get_media_url(media: Any) -> str:
    """media는 경로 문자열이거나 {url: ...} 객체입니다."""
    if not media:
        return DEFAULT_PLACEHOLDER
    if isinstance(media, str):
        return get_image_url(media)
    if isinstance(media, dict) and media.get('url'):
        return get_image_url(media['url'])
    return DEFAULT_PLACEHOLDER


def is_image_accessible(url: str, timeout: float = 5) -> bool:
    """HEAD 요청으로 이미지 접근 가능 여부를 확인합니다. 전송 오류는 False."""
    try:
        response = requests.head(url, timeout=timeout, allow_redirects=True)
        return response.ok
    except requests.RequestException as e:
        logger.debug(f"이미지 접근 확인 실패 ({url}): {e}")
        return False
