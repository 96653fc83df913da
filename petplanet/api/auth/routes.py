# petplanet/api/auth/routes.py
from flask import Blueprint, jsonify
from marshmallow import ValidationError

from petplanet.api.auth.pages import LoginPage, RegisterPage
from petplanet.api.auth.schemas import LoginSchema, RegisterSchema
from petplanet.api.responses import json_body, validation_error
from petplanet.core.security import get_auth

auth_bp = Blueprint('auth_bp', __name__)


@auth_bp.route('/login', methods=['GET'])
def login_page():
    """로그인 화면. 이미 로그인된 경우 authenticated=true와 사용자 정보를 함께 돌려줍니다."""
    return jsonify(LoginPage(get_auth()).to_view()), 200


@auth_bp.route('/login', methods=['POST'])
def login():
    """
    이메일/비밀번호로 로그인합니다.
    - 성공 시 토큰은 세션 쿠키에 저장되고 사용자 정보를 반환합니다.
    - 실패 시 백엔드가 돌려준 문구를 message로 반환합니다.
    """
    try:
        credentials = LoginSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    page = LoginPage(get_auth())
    if page.submit(credentials) is None:
        return jsonify({"error_code": "LOGIN_FAILED", "message": page.error}), page.error_status
    return jsonify(page.to_view()), 200


@auth_bp.route('/register', methods=['GET'])
def register_page():
    return jsonify(RegisterPage(get_auth()).to_view()), 200


@auth_bp.route('/register', methods=['POST'])
def register():
    try:
        data = RegisterSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    page = RegisterPage(get_auth())
    if page.submit(data) is None:
        return jsonify({"error_code": "REGISTER_FAILED", "message": page.error}), page.error_status
    return jsonify(page.to_view()), 201


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """서버 알림 성공 여부와 관계없이 로그아웃은 항상 완료됩니다."""
    get_auth().logout()
    return jsonify({"message": "已退出登录"}), 200
