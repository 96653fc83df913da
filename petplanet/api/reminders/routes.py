# petplanet/api/reminders/routes.py
from flask import Blueprint, current_app, request
from marshmallow import ValidationError

from petplanet.api.reminders.pages import RemindersPage
from petplanet.api.reminders.schemas import ReminderCreateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import login_required

reminders_bp = Blueprint('reminders_bp', __name__)


@reminders_bp.route('/reminders', methods=['GET'])
@login_required
def reminder_list():
    with RemindersPage(current_app.services, request.args.get('status'), request.args.get('petId')) as page:
        page.load()
        return page_view(page)


@reminders_bp.route('/reminders', methods=['POST'])
@login_required
def create_reminder():
    try:
        data = ReminderCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with RemindersPage(current_app.services) as page:
        if page.create(data) is None:
            return page_error(page, "REMINDER_CREATE_FAILED")
        return page_view(page, 201)


@reminders_bp.route('/reminders/<string:reminder_id>/complete', methods=['POST'])
@login_required
def complete_reminder(reminder_id: str):
    with RemindersPage(current_app.services) as page:
        page.load()
        if page.complete(reminder_id) is None and page.error:
            return page_error(page, "REMINDER_COMPLETE_FAILED")
        return page_view(page)


@reminders_bp.route('/reminders/<string:reminder_id>', methods=['DELETE'])
@login_required
def delete_reminder(reminder_id: str):
    with RemindersPage(current_app.services) as page:
        page.load()
        if not page.delete(reminder_id):
            return page_error(page, "REMINDER_DELETE_FAILED")
        return page_view(page)
