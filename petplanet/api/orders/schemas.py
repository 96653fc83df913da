# petplanet/api/orders/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.users.schemas import RecordSchema
from petplanet.models.enums import OrderStatus, PaymentMethod, values
from petplanet.utils.image_utils import get_image_url

# 사용자가 직접 취소할 수 있는 주문 상태
CANCELLABLE_ORDER_STATUSES = (OrderStatus.PENDING.value, OrderStatus.CONFIRMED.value)


class OrderItemSchema(Schema):
    product = fields.Str(required=True)
    quantity = fields.Int(required=True, validate=validate.Range(min=1))
    variant = fields.Str()


class ShippingAddressSchema(Schema):
    recipient = fields.Str(required=True)
    phone = fields.Str(required=True)
    province = fields.Str()
    city = fields.Str()
    district = fields.Str()
    address = fields.Str(required=True)
    postalCode = fields.Str()


class OrderCreateSchema(Schema):
    """상품 상세에서 바로 주문할 때의 폼"""
    items = fields.List(fields.Nested(OrderItemSchema), required=True, validate=validate.Length(min=1))
    shippingAddress = fields.Nested(ShippingAddressSchema, required=True)
    paymentMethod = fields.Str(required=True, validate=validate.OneOf(values(PaymentMethod)))

    class Meta:
        unknown = EXCLUDE


class PaymentSchema(Schema):
    status = fields.Str(load_default='paid', validate=validate.OneOf(['pending', 'paid', 'failed', 'refunded']))
    transactionId = fields.Str()

    class Meta:
        unknown = EXCLUDE


class CancelSchema(Schema):
    reason = fields.Str(validate=validate.Length(max=200))

    class Meta:
        unknown = EXCLUDE


class OrderSchema(RecordSchema):
    orderNumber = fields.Str()
    items = fields.Method("get_items")
    shippingAddress = fields.Dict()
    pricing = fields.Dict()
    payment = fields.Dict()
    status = fields.Str()
    canCancel = fields.Method("get_can_cancel")

    def get_items(self, obj):
        items = []
        for item in obj.get('items') or []:
            item = dict(item)
            item['image'] = get_image_url(item.get('image'))
            items.append(item)
        return items

    def get_can_cancel(self, obj):
        return obj.get('status') in CANCELLABLE_ORDER_STATUSES
