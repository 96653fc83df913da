# petplanet/api/bookings/test_booking_pages.py
from petplanet.api.bookings.pages import BookingsPage
from petplanet.api.orders.pages import OrdersPage

BOOKINGS = [
    {'_id': 'b1', 'status': 'pending', 'service': {'_id': 's1', 'name': '爱宠医院'}},
    {'_id': 'b2', 'status': 'completed', 'service': 's2'},
]
ORDERS = [
    {'_id': 'o1', 'status': 'pending', 'payment': {'method': 'alipay', 'status': 'pending'}},
    {'_id': 'o2', 'status': 'shipped'},
]


def test_bookings_status_filter(services, fake_http):
    fake_http.on('GET', '/bookings', BOOKINGS)
    BookingsPage(services, 'pending').load()
    BookingsPage(services, 'all').load()
    assert fake_http.calls[0]['params'] == {'status': 'pending'}
    assert fake_http.calls[1]['params'] is None


def test_cancel_pending_booking(services, fake_http):
    fake_http.on('GET', '/bookings', BOOKINGS)
    fake_http.on('PUT', '/bookings/b1/cancel', {'success': True})
    page = BookingsPage(services)
    page.load()

    assert page.cancel('b1') is True
    assert page.store.get('b1')['status'] == 'cancelled'


def test_completed_booking_cannot_be_cancelled(services, fake_http):
    fake_http.on('GET', '/bookings', BOOKINGS)
    page = BookingsPage(services)
    page.load()

    assert page.cancel('b2') is False
    assert page.error_status == 409
    assert fake_http.find('PUT', '/bookings/b2/cancel') == []


def test_booking_view_accepts_bare_service_id(services, fake_http):
    fake_http.on('GET', '/bookings', BOOKINGS)
    page = BookingsPage(services)
    page.load()
    view = page.to_view()
    assert len(view['bookings']) == 2


def test_cancel_order_with_reason(services, fake_http):
    fake_http.on('GET', '/orders', ORDERS)
    fake_http.on('PUT', '/orders/o1/cancel', {'data': {'_id': 'o1', 'status': 'cancelled'}})
    page = OrdersPage(services)
    page.load()

    assert page.cancel('o1', '不想要了') is True
    assert fake_http.find('PUT', '/orders/o1/cancel')[0]['json'] == {'reason': '不想要了'}
    assert page.store.get('o1')['status'] == 'cancelled'


def test_shipped_order_cannot_be_cancelled(services, fake_http):
    fake_http.on('GET', '/orders', ORDERS)
    page = OrdersPage(services)
    page.load()
    assert page.cancel('o2') is False
    assert page.error == '该订单无法取消'


def test_pay_uses_server_payment(services, fake_http):
    fake_http.on('GET', '/orders', ORDERS)
    fake_http.on('PUT', '/orders/o1/payment', {
        'data': {'_id': 'o1', 'status': 'confirmed', 'payment': {'method': 'alipay', 'status': 'paid'}}
    })
    page = OrdersPage(services)
    page.load()

    assert page.pay('o1', {'status': 'paid'}) is True
    order = page.store.get('o1')
    assert order['payment']['status'] == 'paid'
    assert order['status'] == 'confirmed'


def test_pay_without_record_patches_payment_status(services, fake_http):
    fake_http.on('GET', '/orders', ORDERS)
    fake_http.on('PUT', '/orders/o1/payment', {'success': True})
    page = OrdersPage(services)
    page.load()

    page.pay('o1', {'status': 'paid'})

    order = page.store.get('o1')
    assert order['payment'] == {'method': 'alipay', 'status': 'paid'}
    assert order['status'] == 'pending'
