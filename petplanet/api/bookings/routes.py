# petplanet/api/bookings/routes.py
from flask import Blueprint, current_app, request

from petplanet.api.bookings.pages import BookingsPage
from petplanet.api.responses import page_error, page_view
from petplanet.core.security import login_required

bookings_bp = Blueprint('bookings_bp', __name__)


@bookings_bp.route('/bookings', methods=['GET'])
@login_required
def booking_list():
    with BookingsPage(current_app.services, request.args.get('status')) as page:
        page.load()
        return page_view(page)


@bookings_bp.route('/bookings/<string:booking_id>/cancel', methods=['POST'])
@login_required
def cancel_booking(booking_id: str):
    with BookingsPage(current_app.services) as page:
        page.load()
        if not page.cancel(booking_id):
            return page_error(page, "BOOKING_CANCEL_FAILED")
        return page_view(page)
