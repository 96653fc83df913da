# petplanet/api/posts/test_post_pages.py
import requests

from petplanet.api.posts.pages import CreatePostPage, HashtagPostsPage, HomeFeedPage, PostDetailPage
from petplanet.api.posts.schemas import PostCreateSchema, parse_hashtags

POST = {
    '_id': 'p1', 'content': '今天去公园啦', 'author': {'_id': 'u1', 'username': 'alice'},
    'isLiked': False, 'likesCount': 2, 'commentsCount': 0, 'comments': [],
    'createdAt': '2024-01-15T02:00:00Z',
}


def test_home_feed_category_param(services, fake_http):
    fake_http.on('GET', '/posts', {'success': True, 'data': [POST]})
    page = HomeFeedPage(services)

    page.load('daily')

    assert fake_http.calls[0]['params'] == {'category': 'daily'}
    view = page.to_view()
    assert view['posts'][0]['id'] == 'p1'
    assert view['posts'][0]['createdAtDisplay'] == '2024/1/15 10:00:00'


def test_home_feed_all_sends_no_category(services, fake_http):
    fake_http.on('GET', '/posts', [])
    page = HomeFeedPage(services)
    page.load('all')
    assert fake_http.calls[0]['params'] is None
    assert page.to_view()['empty']['message'] == '还没有帖子，快来发布第一条吧！'


def test_home_feed_failure_shows_empty_state(services, fake_http):
    fake_http.on('GET', '/posts', {'message': 'boom'}, status=500)
    page = HomeFeedPage(services)
    assert page.load() is True
    assert page.to_view()['posts'] == []
    assert page.to_view()['empty'] is not None


def test_like_uses_server_counts(services, fake_http):
    fake_http.on('GET', '/posts', [POST])
    fake_http.on('PUT', '/posts/p1/like', {'success': True, 'data': {'likesCount': 7, 'isLiked': True}})
    page = HomeFeedPage(services)
    page.load()

    post = page.like('p1')

    assert post['likesCount'] == 7 and post['isLiked'] is True


def test_detail_merges_bookmark_state_and_records_view(services, fake_http):
    fake_http.on('GET', '/posts/p1', {'success': True, 'data': POST})
    fake_http.on('GET', '/bookmarks/check/p1', {'success': True, 'data': {'isBookmarked': True}})
    fake_http.on('POST', '/history', {'success': True})
    page = PostDetailPage(services, 'p1', user={'_id': 'u1'})

    page.open()

    assert page.post['isBookmarked'] is True
    assert fake_http.find('POST', '/history')[0]['json'] == {'itemType': 'post', 'itemId': 'p1'}
    assert page.to_view()['isOwner'] is True


def test_detail_survives_bookmark_check_failure(services, fake_http):
    fake_http.on('GET', '/posts/p1', {'success': True, 'data': POST})
    fake_http.on('GET', '/bookmarks/check/p1', {'message': 'down'}, status=503)
    page = PostDetailPage(services, 'p1')
    page.load()
    assert page.post['content'] == '今天去公园啦'
    assert 'isBookmarked' not in page.post


def test_load_alone_does_not_record_view(services, fake_http):
    fake_http.on('GET', '/posts/p1', {'data': POST})
    fake_http.on('POST', '/history', {'success': True})
    page = PostDetailPage(services, 'p1')

    page.load()

    assert fake_http.find('POST', '/history') == []


def test_mutations_refused_when_post_missing(services, fake_http):
    fake_http.on('GET', '/posts/p1', raises=requests.ConnectionError('down'))
    fake_http.on('PUT', '/posts/p1/like', {'success': True})
    page = PostDetailPage(services, 'p1', user={'_id': 'u1'})
    page.load()

    assert page.like() is None
    assert page.toggle_bookmark() is None
    assert page.comment('hi') is None
    assert page.delete() is False
    assert page.error_status == 404
    assert page.error == '帖子不存在或已被删除'
    assert fake_http.find('PUT', '/posts/p1/like') == []
    assert fake_http.find('POST', '/posts/p1/comments') == []


def test_comment_and_bookmark_toggle(services, fake_http):
    fake_http.on('GET', '/posts/p1', {'data': POST})
    fake_http.on('POST', '/posts/p1/comments', {'success': True, 'data': {'_id': 'c1', 'content': '好可爱'}})
    fake_http.on('POST', '/bookmarks/p1', {'success': True})
    page = PostDetailPage(services, 'p1')
    page.load()

    page.comment('好可爱')
    page.toggle_bookmark()

    assert page.post['commentsCount'] == 1
    assert page.post['comments'][0]['content'] == '好可爱'
    assert page.post['isBookmarked'] is True


def test_only_author_can_delete(services, fake_http):
    fake_http.on('GET', '/posts/p1', {'data': POST})
    page = PostDetailPage(services, 'p1', user={'_id': 'someone-else'})
    page.load()

    assert page.delete() is False
    assert page.error_status == 403
    assert fake_http.find('DELETE', '/posts/p1') == []


def test_author_delete_removes_post(services, fake_http):
    fake_http.on('GET', '/posts/p1', {'data': POST})
    fake_http.on('DELETE', '/posts/p1', {'success': True})
    page = PostDetailPage(services, 'p1', user={'_id': 'u1'})
    page.load()

    assert page.delete() is True
    assert page.to_view()['deleted'] is True


def test_hashtag_page_loads_posts_and_trending(services, fake_http):
    fake_http.on('GET', '/posts/hashtag/%E7%8C%AB%E5%92%AA', {'data': [POST]})
    fake_http.on('GET', '/posts/trending/hashtags', {'data': [{'_id': '猫咪', 'count': 12}]})
    page = HashtagPostsPage(services, '#猫咪')

    page.load()

    view = page.to_view()
    assert view['hashtag'] == '猫咪'
    assert len(view['posts']) == 1
    assert view['trending'][0]['count'] == 12


def test_create_post_requires_content(services, fake_http):
    page = CreatePostPage(services)
    assert page.submit({'content': '   '}) is None
    assert page.error == '请输入内容'
    assert fake_http.calls == []


def test_create_post_failure_message(services, fake_http):
    fake_http.on('POST', '/posts', {'message': 'db down'}, status=500)
    page = CreatePostPage(services)
    assert page.submit({'content': 'hi'}) is None
    assert page.error == '发布失败，请重试'


def test_parse_hashtags():
    assert parse_hashtags('#猫咪, 日常，萌宠  #可爱') == ['猫咪', '日常', '萌宠', '可爱']
    assert parse_hashtags('') == []
    assert parse_hashtags(['#a', 'b']) == ['a', 'b']


def test_post_create_schema_defaults():
    data = PostCreateSchema().load({'content': '  hello  ', 'hashtags': '#a #b'})
    assert data == {'content': 'hello', 'hashtags': ['a', 'b'], 'category': 'daily', 'mediaType': 'text'}
