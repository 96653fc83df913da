# petplanet/api/feedback/routes.py
from flask import Blueprint, current_app
from marshmallow import ValidationError

from petplanet.api.feedback.pages import HelpPage
from petplanet.api.feedback.schemas import FeedbackCreateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import login_required

feedback_bp = Blueprint('feedback_bp', __name__)


@feedback_bp.route('/help', methods=['GET'])
@login_required
def help_page():
    with HelpPage(current_app.services) as page:
        page.load()
        return page_view(page)


@feedback_bp.route('/help/feedback', methods=['POST'])
@login_required
def submit_feedback():
    try:
        data = FeedbackCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with HelpPage(current_app.services) as page:
        page.load()
        if page.submit(data) is None:
            return page_error(page, "FEEDBACK_SUBMIT_FAILED")
        return page_view(page, 201)
