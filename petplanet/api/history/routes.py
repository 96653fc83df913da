# petplanet/api/history/routes.py
from flask import Blueprint, current_app, request

from petplanet.api.history.pages import BrowsingHistoryPage
from petplanet.api.responses import page_error, page_view
from petplanet.core.security import login_required

history_bp = Blueprint('history_bp', __name__)


@history_bp.route('/history', methods=['GET'])
@login_required
def history_list():
    with BrowsingHistoryPage(current_app.services, request.args.get('itemType')) as page:
        page.load()
        return page_view(page)


@history_bp.route('/history', methods=['DELETE'])
@login_required
def clear_history():
    with BrowsingHistoryPage(current_app.services, request.args.get('itemType')) as page:
        if not page.clear():
            return page_error(page, "HISTORY_CLEAR_FAILED")
        return page_view(page)


@history_bp.route('/history/<string:history_id>', methods=['DELETE'])
@login_required
def delete_history_item(history_id: str):
    with BrowsingHistoryPage(current_app.services, request.args.get('itemType')) as page:
        page.load()
        if not page.delete_item(history_id):
            return page_error(page, "HISTORY_DELETE_FAILED")
        return page_view(page)
