# petplanet/core/security.py
"""
보호된 화면 앞에 두는 라우트 가드.

세 가지 상태만 구분합니다.
- loading: 사용자 복원 중 -> 로딩 응답
- unauthenticated: 로그인 페이지로 이동 (원래 가려던 위치는 보존하지 않음)
- authenticated: 화면을 그대로 보여줌
"""
from functools import wraps

from flask import current_app, g, jsonify, redirect, url_for

from petplanet.core.session import STATUS_LOADING, STATUS_UNAUTHENTICATED, AuthSession


def get_auth() -> AuthSession:
    """현재 요청의 AuthSession. 처음 접근할 때 한 번만 만들고 복원합니다."""
    if 'auth' not in g:
        auth = current_app.session_factory()
        auth.hydrate()
        g.auth = auth
    return g.auth


def _loading_response():
    return jsonify({"loading": True}), 202


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth = get_auth()
        if auth.status == STATUS_LOADING:
            return _loading_response()
        if auth.status == STATUS_UNAUTHENTICATED:
            return redirect(url_for('auth_bp.login_page'))
        return f(*args, **kwargs)

    return decorated_function


def admin_required(f):
    """로그인 여부를 확인한 뒤, 관리자가 아니면 홈으로 보냅니다."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth = get_auth()
        if auth.status == STATUS_LOADING:
            return _loading_response()
        if auth.status == STATUS_UNAUTHENTICATED:
            return redirect(url_for('auth_bp.login_page'))
        if not auth.is_admin:
            return redirect(url_for('posts_bp.home'))
        return f(*args, **kwargs)

    return decorated_function
