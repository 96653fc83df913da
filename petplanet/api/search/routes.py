# petplanet/api/search/routes.py
from flask import Blueprint, current_app, request

from petplanet.api.responses import page_view
from petplanet.api.search.pages import SearchPage

search_bp = Blueprint('search_bp', __name__)


@search_bp.route('/search', methods=['GET'])
def search():
    """로그인 없이 사용할 수 있습니다."""
    with SearchPage(current_app.services, request.args.get('q', ''), request.args.get('tab', 'all')) as page:
        page.load()
        return page_view(page)
