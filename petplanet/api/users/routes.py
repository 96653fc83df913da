# petplanet/api/users/routes.py
from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError

from petplanet.api.auth.schemas import PasswordUpdateSchema, ProfileUpdateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.api.users.pages import ProfilePage
from petplanet.core.security import get_auth, login_required

users_bp = Blueprint('users_bp', __name__)


def _profile_page(user_id=None) -> ProfilePage:
    return ProfilePage(current_app.services, user_id, viewer=get_auth().get_current_user())


@users_bp.route('/profile', methods=['GET'])
@login_required
def my_profile():
    with _profile_page() as page:
        page.load()
        return page_view(page)


@users_bp.route('/users/<string:user_id>', methods=['GET'])
@login_required
def user_profile(user_id: str):
    with _profile_page(user_id) as page:
        page.load()
        return page_view(page)


@users_bp.route('/users/<string:user_id>/follow', methods=['POST'])
@login_required
def toggle_follow(user_id: str):
    """팔로우 중이면 언팔로우, 아니면 팔로우합니다. 자기 자신은 팔로우할 수 없습니다."""
    with _profile_page(user_id) as page:
        page.load()
        if page.is_me:
            return jsonify({"error_code": "CANNOT_FOLLOW_SELF", "message": "不能关注自己"}), 400
        if page.toggle_follow() is None:
            return page_error(page, "FOLLOW_TOGGLE_FAILED")
        return page_view(page)


@users_bp.route('/profile', methods=['PUT'])
@login_required
def update_profile():
    try:
        data = ProfileUpdateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with _profile_page() as page:
        page.load()
        if page.update_profile(data) is None:
            return page_error(page, "PROFILE_UPDATE_FAILED")
        return page_view(page)


@users_bp.route('/profile/password', methods=['PUT'])
@login_required
def update_password():
    try:
        data = PasswordUpdateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with _profile_page() as page:
        if not page.update_password(data):
            return page_error(page, "PASSWORD_UPDATE_FAILED")
        return jsonify({"message": "密码已更新"}), 200


@users_bp.route('/profile/avatar', methods=['POST'])
@login_required
def upload_avatar():
    """multipart 'avatar' 필드의 이미지를 프로필 사진으로 올립니다."""
    upload = request.files.get('avatar')
    if upload is None or not upload.filename:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": {"avatar": ["请选择图片"]}}), 400

    with _profile_page() as page:
        page.load()
        if page.upload_avatar((upload.filename, upload.stream, upload.mimetype)) is None:
            return page_error(page, "AVATAR_UPLOAD_FAILED")
        return page_view(page)
