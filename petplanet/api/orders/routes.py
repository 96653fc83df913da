# petplanet/api/orders/routes.py
from flask import Blueprint, current_app, request
from marshmallow import ValidationError

from petplanet.api.orders.pages import OrdersPage
from petplanet.api.orders.schemas import CancelSchema, PaymentSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import login_required

orders_bp = Blueprint('orders_bp', __name__)


@orders_bp.route('/orders', methods=['GET'])
@login_required
def order_list():
    with OrdersPage(current_app.services, request.args.get('status')) as page:
        page.load()
        return page_view(page)


@orders_bp.route('/orders/<string:order_id>/cancel', methods=['POST'])
@login_required
def cancel_order(order_id: str):
    try:
        data = CancelSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with OrdersPage(current_app.services) as page:
        page.load()
        if not page.cancel(order_id, data.get('reason')):
            return page_error(page, "ORDER_CANCEL_FAILED")
        return page_view(page)


@orders_bp.route('/orders/<string:order_id>/pay', methods=['POST'])
@login_required
def pay_order(order_id: str):
    try:
        data = PaymentSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with OrdersPage(current_app.services) as page:
        page.load()
        if not page.pay(order_id, data):
            return page_error(page, "PAYMENT_FAILED")
        return page_view(page)
