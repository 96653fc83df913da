# petplanet/api/posts/routes.py
from flask import Blueprint, current_app, request
from marshmallow import ValidationError

from petplanet.api.posts.pages import CreatePostPage, HashtagPostsPage, HomeFeedPage, PostDetailPage, UserPostsPage
from petplanet.api.posts.schemas import CommentCreateSchema, PostCreateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import get_auth, login_required

posts_bp = Blueprint('posts_bp', __name__)


@posts_bp.route('/', methods=['GET'])
@login_required
def home():
    """
    홈 피드. ?category= 로 분류를 고를 수 있으며 'all'이면 전체를 보여줍니다.
    """
    with HomeFeedPage(current_app.services) as page:
        page.load(request.args.get('category'))
        return page_view(page)


@posts_bp.route('/posts/<string:post_id>', methods=['GET'])
@login_required
def post_detail(post_id: str):
    with PostDetailPage(current_app.services, post_id, user=get_auth().get_current_user()) as page:
        page.open()
        return page_view(page)


@posts_bp.route('/posts/<string:post_id>', methods=['DELETE'])
@login_required
def delete_post(post_id: str):
    """작성자 본인만 삭제할 수 있습니다."""
    with PostDetailPage(current_app.services, post_id, user=get_auth().get_current_user()) as page:
        page.load()
        if not page.delete():
            return page_error(page, "POST_DELETE_FAILED")
        return page_view(page)


@posts_bp.route('/posts/<string:post_id>/like', methods=['POST'])
@login_required
def like_post(post_id: str):
    """좋아요 토글. 최신 likesCount/isLiked가 반영된 게시글을 돌려줍니다."""
    with PostDetailPage(current_app.services, post_id, user=get_auth().get_current_user()) as page:
        page.load()
        if page.like() is None:
            return page_error(page, "LIKE_TOGGLE_FAILED")
        return page_view(page)


@posts_bp.route('/posts/<string:post_id>/comments', methods=['POST'])
@login_required
def add_comment(post_id: str):
    try:
        data = CommentCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with PostDetailPage(current_app.services, post_id, user=get_auth().get_current_user()) as page:
        page.load()
        if page.comment(data['content']) is None:
            return page_error(page, "COMMENT_CREATION_FAILED")
        return page_view(page, 201)


@posts_bp.route('/posts/<string:post_id>/bookmark', methods=['POST'])
@login_required
def toggle_bookmark(post_id: str):
    with PostDetailPage(current_app.services, post_id, user=get_auth().get_current_user()) as page:
        page.load()
        if page.toggle_bookmark() is None:
            return page_error(page, "BOOKMARK_TOGGLE_FAILED")
        return page_view(page)


@posts_bp.route('/community/hashtag/<string:hashtag>', methods=['GET'])
@login_required
def hashtag_posts(hashtag: str):
    with HashtagPostsPage(current_app.services, hashtag) as page:
        page.load()
        return page_view(page)


@posts_bp.route('/posts/create', methods=['GET'])
@login_required
def create_post_form():
    with CreatePostPage(current_app.services) as page:
        return page_view(page)


@posts_bp.route('/posts/create', methods=['POST'])
@login_required
def create_post():
    """
    새 게시글을 작성합니다.
    - JSON 또는 multipart 폼을 받으며, multipart인 경우 'media' 필드의 파일을 함께 올립니다.
    - 해시태그는 '#猫咪, 日常' 같은 문자열로 받아 리스트로 바꿉니다.
    """
    try:
        data = PostCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    uploads = request.files.getlist('media')
    files = [(f.filename, f.stream, f.mimetype) for f in uploads if f and f.filename] or None
    if files:
        # multipart 폼 필드는 문자열만 보낼 수 있습니다.
        data['hashtags'] = ','.join(data['hashtags'])
        is_video = any((mimetype or '').startswith('video/') for _, _, mimetype in files)
        data['mediaType'] = 'video' if is_video else 'image'

    with CreatePostPage(current_app.services) as page:
        if page.submit(data, files=files) is None:
            return page_error(page, "POST_CREATION_FAILED")
        return page_view(page, 201)


@posts_bp.route('/users/<string:user_id>/posts', methods=['GET'])
@login_required
def user_posts(user_id: str):
    """특정 사용자의 게시글 목록 (내 글 보기 포함)."""
    with UserPostsPage(current_app.services, user_id) as page:
        page.load()
        return page_view(page)
