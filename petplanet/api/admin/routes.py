# petplanet/api/admin/routes.py
from flask import Blueprint, abort, current_app, request
from marshmallow import ValidationError

from petplanet.api.admin.pages import ADMIN_RESOURCES, AdminContentPage, AdminDashboardPage
from petplanet.api.feedback.pages import AdminFeedbackPage
from petplanet.api.feedback.schemas import FeedbackUpdateSchema
from petplanet.api.pet_services.schemas import ServiceCreateSchema
from petplanet.api.products.schemas import ProductCreateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import admin_required

admin_bp = Blueprint('admin_bp', __name__)

SAVE_SCHEMAS = {
    'products': ProductCreateSchema,
    'services': ServiceCreateSchema,
}


def _content_page(kind: str) -> AdminContentPage:
    if kind not in ADMIN_RESOURCES:
        abort(404)
    return AdminContentPage(current_app.services, kind, request.args.get('search'))


def _load_save_form(kind: str, partial: bool = False):
    if kind not in SAVE_SCHEMAS:
        abort(405)
    return SAVE_SCHEMAS[kind]().load(json_body(), partial=partial)


@admin_bp.route('/admin', methods=['GET'])
@admin_required
def dashboard():
    with AdminDashboardPage(current_app.services) as page:
        page.load()
        return page_view(page)


@admin_bp.route('/admin/feedback', methods=['GET'])
@admin_required
def feedback_list():
    with AdminFeedbackPage(current_app.services, request.args.get('status')) as page:
        page.load()
        return page_view(page)


@admin_bp.route('/admin/feedback/<string:feedback_id>', methods=['PUT'])
@admin_required
def update_feedback(feedback_id: str):
    try:
        data = FeedbackUpdateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with AdminFeedbackPage(current_app.services) as page:
        page.load()
        if page.update(feedback_id, data) is None and page.error:
            return page_error(page, "FEEDBACK_UPDATE_FAILED")
        return page_view(page)


@admin_bp.route('/admin/<string:kind>', methods=['GET'])
@admin_required
def content_list(kind: str):
    with _content_page(kind) as page:
        page.load()
        return page_view(page)


@admin_bp.route('/admin/<string:kind>', methods=['POST'])
@admin_required
def create_content(kind: str):
    try:
        data = _load_save_form(kind)
    except ValidationError as err:
        return validation_error(err)

    with _content_page(kind) as page:
        if page.save(data) is None:
            return page_error(page, "ADMIN_SAVE_FAILED")
        return page_view(page, 201)


@admin_bp.route('/admin/<string:kind>/<string:item_id>', methods=['PUT'])
@admin_required
def update_content(kind: str, item_id: str):
    try:
        data = _load_save_form(kind, partial=True)
    except ValidationError as err:
        return validation_error(err)

    with _content_page(kind) as page:
        if page.save(data, item_id) is None:
            return page_error(page, "ADMIN_SAVE_FAILED")
        return page_view(page)


@admin_bp.route('/admin/<string:kind>/<string:item_id>', methods=['DELETE'])
@admin_required
def delete_content(kind: str, item_id: str):
    with _content_page(kind) as page:
        page.load()
        if not page.delete(item_id):
            return page_error(page, "ADMIN_DELETE_FAILED")
        return page_view(page)
