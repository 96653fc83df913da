# petplanet/api/bookmarks/routes.py
from flask import Blueprint, current_app

from petplanet.api.bookmarks.pages import BookmarksPage
from petplanet.api.responses import page_error, page_view
from petplanet.core.security import login_required

bookmarks_bp = Blueprint('bookmarks_bp', __name__)


@bookmarks_bp.route('/bookmarks', methods=['GET'])
@login_required
def bookmark_list():
    with BookmarksPage(current_app.services) as page:
        page.load()
        return page_view(page)


@bookmarks_bp.route('/bookmarks/<string:post_id>', methods=['DELETE'])
@login_required
def remove_bookmark(post_id: str):
    with BookmarksPage(current_app.services) as page:
        page.load()
        if not page.remove(post_id):
            return page_error(page, "BOOKMARK_REMOVE_FAILED")
        return page_view(page)
