# petplanet/api/pet_services/test_service_pages.py
from petplanet.api.pet_services.pages import CreateBookingPage, ServicesPage
from petplanet.core.storage import USER_LOCATION_KEY, MemoryStorage

CLINIC = {
    '_id': 's1', 'name': '爱宠医院', 'category': 'hospital',
    'pricing': {'services': [{'name': '体检', 'price': 200}, {'name': '疫苗', 'price': 120}]},
}


def test_location_is_persisted_and_sent_as_city(services, fake_http):
    fake_http.on('GET', '/services', [CLINIC])
    storage = MemoryStorage()
    page = ServicesPage(services, storage)

    page.set_location(' 上海 ')
    page.load()

    assert storage.get(USER_LOCATION_KEY) == '上海'
    assert fake_http.calls[0]['params'] == {'city': '上海'}


def test_saved_location_applies_on_next_visit(services, fake_http):
    fake_http.on('GET', '/services', [])
    page = ServicesPage(services, MemoryStorage({USER_LOCATION_KEY: '北京'}))
    page.set_filters(category='grooming')

    page.load()

    assert fake_http.calls[0]['params'] == {'category': 'grooming', 'city': '北京'}
    assert page.to_view()['empty']['message'] == '附近暂无相关服务'


def test_clearing_location_removes_it(services):
    storage = MemoryStorage({USER_LOCATION_KEY: '北京'})
    page = ServicesPage(services, storage)
    page.set_location('')
    assert storage.get(USER_LOCATION_KEY) is None
    assert page.location is None


def test_nearby_ignores_location(services, fake_http):
    fake_http.on('GET', '/services/nearby', [CLINIC])
    page = ServicesPage(services, MemoryStorage({USER_LOCATION_KEY: '北京'}))

    page.load_nearby({'lat': 31.2, 'lng': 121.4})

    assert fake_http.calls[0]['params'] == {'lat': 31.2, 'lng': 121.4}
    assert len(page.store) == 1


def test_booking_submit_adds_service_id(services, fake_http):
    fake_http.on('GET', '/services/s1', {'data': CLINIC})
    fake_http.on('POST', '/bookings', {'success': True, 'data': {'_id': 'b1', 'status': 'pending'}})
    page = CreateBookingPage(services, 's1')
    page.load()

    booking = page.submit({'serviceType': '体检', 'date': '2024-02-01', 'time': '10:00'})

    assert booking['_id'] == 'b1'
    assert fake_http.find('POST', '/bookings')[0]['json']['service'] == 's1'
    view = page.to_view()
    assert view['serviceTypes'] == ['体检', '疫苗']
    assert view['redirect'] == '/services'


def test_booking_failure_keeps_form(services, fake_http):
    fake_http.on('POST', '/bookings', {'message': 'slot taken'}, status=409)
    page = CreateBookingPage(services, 's1')

    assert page.submit({'serviceType': '体检'}) is None
    assert page.error == '预约失败，请重试'
    assert page.to_view()['message'] is None
