# petplanet/api/health/routes.py
from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError

from petplanet.api.health.pages import AddHealthLogPage, AdvisorPage, HealthCenterPage, HealthHistoryPage
from petplanet.api.health.schemas import FeedingRequestSchema, HealthLogCreateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import login_required

health_bp = Blueprint('health_bp', __name__)


@health_bp.route('/pets/<string:pet_id>/health', methods=['GET'])
@login_required
def health_center(pet_id: str):
    """오늘의 건강 기록, 30일 분석, AI 건강 분석을 함께 반환합니다."""
    with HealthCenterPage(current_app.services, pet_id) as page:
        page.load()
        return page_view(page)


@health_bp.route('/pets/<string:pet_id>/health/add', methods=['POST'])
@login_required
def add_health_log(pet_id: str):
    try:
        data = HealthLogCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with AddHealthLogPage(current_app.services, pet_id) as page:
        if page.submit(data) is None:
            return page_error(page, "HEALTH_LOG_CREATION_FAILED")
        return page_view(page, 201)


@health_bp.route('/pets/<string:pet_id>/health/history', methods=['GET'])
@login_required
def health_history(pet_id: str):
    days = request.args.get('days', 30, type=int)
    with HealthHistoryPage(current_app.services, pet_id, days) as page:
        page.load()
        return page_view(page)


@health_bp.route('/ai/feeding', methods=['POST'])
@login_required
def feeding_recommendation():
    """체중과 활동량으로 하루 권장 칼로리와 끼니별 급여량을 계산합니다."""
    try:
        data = FeedingRequestSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    page = AdvisorPage(current_app.services['advisor'])
    if page.feeding(data) is None:
        return jsonify({"error_code": "FEEDING_FAILED", "message": page.error}), 502
    return jsonify(page.to_view()), 200


@health_bp.route('/ai/analyze-image', methods=['POST'])
@login_required
def analyze_image():
    upload = request.files.get('image')
    if upload is None or not upload.filename:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": {"image": ["请上传图片"]}}), 400

    page = AdvisorPage(current_app.services['advisor'])
    if page.analyze_image(upload.read(), request.form.get('type', 'breed')) is None:
        return jsonify({"error_code": "IMAGE_ANALYSIS_FAILED", "message": page.error}), 502
    return jsonify(page.to_view()), 200


@health_bp.route('/ai/avatar', methods=['POST'])
@login_required
def generate_avatar():
    page = AdvisorPage(current_app.services['advisor'])
    if page.generate_avatar(json_body()) is None:
        return jsonify({"error_code": "AVATAR_GENERATION_FAILED", "message": page.error}), 502
    return jsonify(page.to_view()), 200


@health_bp.route('/ai/avatar/<string:task_id>', methods=['GET'])
@login_required
def avatar_status(task_id: str):
    page = AdvisorPage(current_app.services['advisor'])
    if page.avatar_status(task_id) is None:
        return jsonify({"error_code": "AVATAR_STATUS_FAILED", "message": page.error}), 502
    return jsonify(page.to_view()), 200
