# petplanet/api/points/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.users.schemas import RecordSchema


class ExchangeSchema(Schema):
    """포인트몰 교환 요청"""
    itemId = fields.Str(required=True)
    itemName = fields.Str(required=True)
    pointsCost = fields.Int(required=True, validate=validate.Range(min=1))

    class Meta:
        unknown = EXCLUDE


class TransactionSchema(RecordSchema):
    amount = fields.Int()
    type = fields.Str()
    source = fields.Str()
    description = fields.Str()
    signedAmount = fields.Method("get_signed_amount")

    def get_signed_amount(self, obj):
        amount = obj.get('amount') or 0
        return -abs(amount) if obj.get('type') == 'spend' else abs(amount)
