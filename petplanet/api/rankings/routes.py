# petplanet/api/rankings/routes.py
from flask import Blueprint, current_app, request
from marshmallow import ValidationError

from petplanet.api.rankings.pages import RankingsPage
from petplanet.api.rankings.schemas import VoteSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import login_required

rankings_bp = Blueprint('rankings_bp', __name__)


@rankings_bp.route('/rankings', methods=['GET'])
def ranking_list():
    with RankingsPage(current_app.services, request.args.get('category')) as page:
        page.load()
        return page_view(page)


@rankings_bp.route('/rankings/vote', methods=['POST'])
@login_required
def vote():
    try:
        data = VoteSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with RankingsPage(current_app.services, data['category']) as page:
        if page.vote(data['petId']) is None:
            return page_error(page, "VOTE_FAILED")
        return page_view(page)
