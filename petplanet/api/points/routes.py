# petplanet/api/points/routes.py
from flask import Blueprint, current_app
from marshmallow import ValidationError

from petplanet.api.points.pages import PointsMallPage
from petplanet.api.points.schemas import ExchangeSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import login_required

points_bp = Blueprint('points_bp', __name__)


@points_bp.route('/points', methods=['GET'])
@login_required
def points_mall():
    with PointsMallPage(current_app.services) as page:
        page.load()
        return page_view(page)


@points_bp.route('/points/exchange', methods=['POST'])
@login_required
def exchange():
    try:
        item = ExchangeSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with PointsMallPage(current_app.services) as page:
        page.load()
        if page.exchange(item) is None:
            return page_error(page, "EXCHANGE_FAILED")
        return page_view(page)
