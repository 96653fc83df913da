# petplanet/api/test_services.py
"""
리소스 서비스 모듈이 올바른 메서드/경로로 요청하는지 확인합니다.
모든 경로는 base URL('/api') 뒤에 붙는 부분입니다.
"""
import pytest

from petplanet.api.admin.services import StatsService
from petplanet.api.auth.services import AuthService
from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.bookings.services import BookingService
from petplanet.api.bookmarks.services import BookmarkService
from petplanet.api.documents.services import DocumentService
from petplanet.api.feedback.services import FeedbackService
from petplanet.api.health.services import HealthService
from petplanet.api.history.services import HistoryService
from petplanet.api.orders.services import OrderService
from petplanet.api.pet_services.services import PetCareServiceService
from petplanet.api.pets.services import PetRatingService, PetService
from petplanet.api.points.services import PointsService
from petplanet.api.posts.services import PostService
from petplanet.api.products.services import ProductService
from petplanet.api.rankings.services import RankingService
from petplanet.api.reminders.services import ReminderService
from petplanet.api.settings.services import SettingsService
from petplanet.api.users.services import UserService
from petplanet.core.errors import ApiError

CASES = [
    # auth
    (AuthService, lambda s: s.register({'username': 'a'}), 'POST', '/auth/register'),
    (AuthService, lambda s: s.login({'email': 'a'}), 'POST', '/auth/login'),
    (AuthService, lambda s: s.get_current_user(), 'GET', '/auth/me'),
    (AuthService, lambda s: s.update_profile({'bio': 'x'}), 'PUT', '/auth/updatedetails'),
    (AuthService, lambda s: s.update_password({'currentPassword': 'a'}), 'PUT', '/auth/updatepassword'),
    (AuthService, lambda s: s.logout(), 'POST', '/auth/logout'),
    # posts
    (PostService, lambda s: s.get_posts({'category': 'daily'}), 'GET', '/posts'),
    (PostService, lambda s: s.get_post('p1'), 'GET', '/posts/p1'),
    (PostService, lambda s: s.create_post({'content': 'hi'}), 'POST', '/posts'),
    (PostService, lambda s: s.update_post('p1', {}), 'PUT', '/posts/p1'),
    (PostService, lambda s: s.delete_post('p1'), 'DELETE', '/posts/p1'),
    (PostService, lambda s: s.like_post('p1'), 'PUT', '/posts/p1/like'),
    (PostService, lambda s: s.add_comment('p1', '赞'), 'POST', '/posts/p1/comments'),
    (PostService, lambda s: s.get_user_posts('u1'), 'GET', '/posts/user/u1'),
    (PostService, lambda s: s.get_trending_hashtags(), 'GET', '/posts/trending/hashtags'),
    (PostService, lambda s: s.get_posts_by_hashtag('猫咪'), 'GET', '/posts/hashtag/%E7%8C%AB%E5%92%AA'),
    # pets
    (PetService, lambda s: s.get_pets(), 'GET', '/pets'),
    (PetService, lambda s: s.get_pet('x1'), 'GET', '/pets/x1'),
    (PetService, lambda s: s.create_pet({}), 'POST', '/pets'),
    (PetService, lambda s: s.update_pet('x1', {}), 'PUT', '/pets/x1'),
    (PetService, lambda s: s.delete_pet('x1'), 'DELETE', '/pets/x1'),
    (PetService, lambda s: s.add_health_record('x1', {}), 'POST', '/pets/x1/health'),
    (PetService, lambda s: s.add_reminder('x1', {}), 'POST', '/pets/x1/reminders'),
    (PetRatingService, lambda s: s.get_pet_ratings('x1'), 'GET', '/pets/x1/ratings'),
    (PetRatingService, lambda s: s.add_rating('x1', {}), 'POST', '/pets/x1/ratings'),
    (PetRatingService, lambda s: s.get_my_rating('x1'), 'GET', '/pets/x1/ratings/me'),
    (PetRatingService, lambda s: s.delete_rating('x1', 'r1'), 'DELETE', '/pets/x1/ratings/r1'),
    (PetRatingService, lambda s: s.mark_helpful('x1', 'r1'), 'PUT', '/pets/x1/ratings/r1/helpful'),
    # products / services
    (ProductService, lambda s: s.get_products(), 'GET', '/products'),
    (ProductService, lambda s: s.get_featured_products(), 'GET', '/products/featured'),
    (ProductService, lambda s: s.add_review('g1', {}), 'POST', '/products/g1/reviews'),
    (ProductService, lambda s: s.delete_product('g1'), 'DELETE', '/products/g1'),
    (PetCareServiceService, lambda s: s.get_service('s1'), 'GET', '/services/s1'),
    (PetCareServiceService, lambda s: s.get_nearby_services({'lng': 1, 'lat': 2}), 'GET', '/services/nearby'),
    (PetCareServiceService, lambda s: s.add_review('s1', {}), 'POST', '/services/s1/reviews'),
    # orders / bookings
    (OrderService, lambda s: s.create_order({}), 'POST', '/orders'),
    (OrderService, lambda s: s.update_payment('o1', {}), 'PUT', '/orders/o1/payment'),
    (OrderService, lambda s: s.update_order_status('o1', {}), 'PUT', '/orders/o1/status'),
    (OrderService, lambda s: s.cancel_order('o1'), 'PUT', '/orders/o1/cancel'),
    (BookingService, lambda s: s.get_bookings(), 'GET', '/bookings'),
    (BookingService, lambda s: s.cancel_booking('b1'), 'PUT', '/bookings/b1/cancel'),
    (BookingService, lambda s: s.delete_booking('b1'), 'DELETE', '/bookings/b1'),
    # users
    (UserService, lambda s: s.get_user_profile('u1'), 'GET', '/users/u1'),
    (UserService, lambda s: s.get_user_stats('u1'), 'GET', '/users/u1/stats'),
    (UserService, lambda s: s.get_followers('u1'), 'GET', '/users/u1/followers'),
    (UserService, lambda s: s.get_following('u1'), 'GET', '/users/u1/following'),
    (UserService, lambda s: s.follow_user('u1'), 'POST', '/users/u1/follow'),
    (UserService, lambda s: s.unfollow_user('u1'), 'DELETE', '/users/u1/follow'),
    (UserService, lambda s: s.upload_avatar(('a.png', b'x', 'image/png')), 'POST', '/users/avatar'),
    # health
    (HealthService, lambda s: s.get_health_logs('x1'), 'GET', '/health/x1'),
    (HealthService, lambda s: s.create_health_log('x1', {}), 'POST', '/health/x1'),
    (HealthService, lambda s: s.get_health_analytics('x1'), 'GET', '/health/x1/analytics'),
    # 나머지
    (FeedbackService, lambda s: s.submit_feedback({}), 'POST', '/feedback'),
    (FeedbackService, lambda s: s.get_all_feedback(), 'GET', '/feedback/all'),
    (FeedbackService, lambda s: s.update_feedback('f1', {}), 'PUT', '/feedback/f1'),
    (HistoryService, lambda s: s.add_to_history('post', 'p1'), 'POST', '/history'),
    (HistoryService, lambda s: s.delete_history_item('h1'), 'DELETE', '/history/h1'),
    (BookmarkService, lambda s: s.bookmark_post('p1'), 'POST', '/bookmarks/p1'),
    (BookmarkService, lambda s: s.remove_bookmark('p1'), 'DELETE', '/bookmarks/p1'),
    (BookmarkService, lambda s: s.check_bookmark('p1'), 'GET', '/bookmarks/check/p1'),
    (DocumentService, lambda s: s.get_stats(), 'GET', '/documents/stats'),
    (DocumentService, lambda s: s.upload_document({'title': 't'}, ('a.pdf', b'x', 'application/pdf')),
     'POST', '/documents'),
    (PointsService, lambda s: s.get_balance(), 'GET', '/points/balance'),
    (PointsService, lambda s: s.get_transactions(), 'GET', '/points/transactions'),
    (PointsService, lambda s: s.exchange_points({}), 'POST', '/points/exchange'),
    (RankingService, lambda s: s.get_rankings({'category': 'cute'}), 'GET', '/rankings'),
    (RankingService, lambda s: s.get_all_rankings(), 'GET', '/rankings/all'),
    (RankingService, lambda s: s.vote_for_pet({}), 'POST', '/rankings/vote'),
    (ReminderService, lambda s: s.get_stats(), 'GET', '/reminders/stats'),
    (ReminderService, lambda s: s.complete_reminder('m1'), 'PUT', '/reminders/m1/complete'),
    (SettingsService, lambda s: s.update_settings({}), 'PUT', '/settings'),
    (SettingsService, lambda s: s.update_appearance({}), 'PUT', '/settings/appearance'),
    (SettingsService, lambda s: s.update_notifications({}), 'PUT', '/settings/notifications'),
    (SettingsService, lambda s: s.update_privacy({}), 'PUT', '/settings/privacy'),
    (StatsService, lambda s: s.get_stats(), 'GET', '/stats'),
]


@pytest.mark.parametrize('service_cls, call, method, path', CASES)
def test_request_path(api_client, fake_http, service_cls, call, method, path):
    fake_http.on(method, path, {'success': True})
    response = call(service_cls(api_client))
    assert response.status == 200
    assert [(c['method'], c['path']) for c in fake_http.calls] == [(method, path)]


def test_query_and_body_payloads(api_client, fake_http):
    fake_http.on('GET', '/posts/trending/hashtags', []).on('POST', '/history', {}) \
        .on('DELETE', '/history', {}).on('POST', '/posts/p1/comments', {})

    PostService(api_client).get_trending_hashtags()
    HistoryService(api_client).add_to_history('product', 'g1')
    HistoryService(api_client).clear_history('post')
    PostService(api_client).add_comment('p1', '好可爱')

    trending, added, cleared, comment = fake_http.calls
    assert trending['params'] == {'limit': 10}
    assert added['json'] == {'itemType': 'product', 'itemId': 'g1'}
    assert cleared['params'] == {'itemType': 'post'}
    assert comment['json'] == {'content': '好可爱'}


def test_clear_all_history_has_no_filter(api_client, fake_http):
    fake_http.on('DELETE', '/history', {})
    HistoryService(api_client).clear_history()
    assert fake_http.calls[0]['params'] is None


def test_toggle_bookmark_picks_direction(api_client, fake_http):
    fake_http.on('POST', '/bookmarks/p1', {}).on('DELETE', '/bookmarks/p1', {})
    bookmarks = BookmarkService(api_client)
    bookmarks.toggle_bookmark('p1', is_bookmarked=False)
    bookmarks.toggle_bookmark('p1', is_bookmarked=True)
    assert [c['method'] for c in fake_http.calls] == ['POST', 'DELETE']


def test_create_post_with_files_is_multipart(api_client, fake_http):
    fake_http.on('POST', '/posts', {})
    PostService(api_client).create_post({'content': 'hi'}, files=[('a.jpg', b'x', 'image/jpeg')])
    call = fake_http.calls[0]
    assert call['data'] == {'content': 'hi'}
    assert call['files'] == [('media', ('a.jpg', b'x', 'image/jpeg'))]


def test_identifier_shape_is_not_validated(api_client, fake_http):
    fake_http.on('GET', '/pets/not%2Fan%20id', {})
    PetService(api_client).get_pet('not/an id')
    assert fake_http.calls[0]['path'] == '/pets/not%2Fan%20id'


def test_errors_propagate(api_client, fake_http):
    fake_http.on('GET', '/orders/o1', {'message': '订单不存在'}, status=404)
    with pytest.raises(ApiError):
        OrderService(api_client).get_order('o1')


@pytest.mark.parametrize('data, expected', [
    ([{'_id': 1}], [{'_id': 1}]),
    ({'success': True, 'data': [{'_id': 1}]}, [{'_id': 1}]),
    ({'success': True, 'count': 1, 'data': [{'_id': 1}]}, [{'_id': 1}]),
    (None, []),
    ({'success': True}, []),
])
def test_unwrap_list(data, expected):
    assert unwrap_list(data) == expected


def test_unwrap_record():
    assert unwrap_record({'success': True, 'data': {'_id': 'x'}}) == {'_id': 'x'}
    assert unwrap_record({'_id': 'x'}) == {'_id': 'x'}
    assert unwrap_record({'success': True, 'message': 'ok'}) is None
    assert unwrap_record([1]) is None
