# petplanet/api/pet_services/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.products.schemas import ReviewSchema
from petplanet.api.users.schemas import RecordSchema
from petplanet.models.enums import ServiceCategory, ServiceSort, values
from petplanet.utils.image_utils import get_image_url


class ServiceQuerySchema(Schema):
    category = fields.Str(validate=validate.OneOf(['all'] + values(ServiceCategory)))
    city = fields.Str()
    province = fields.Str()
    minRating = fields.Float(validate=validate.Range(min=0, max=5))
    search = fields.Str()
    sort = fields.Str(validate=validate.OneOf(values(ServiceSort)))
    page = fields.Int(validate=validate.Range(min=1))
    limit = fields.Int(validate=validate.Range(min=1, max=100))

    class Meta:
        unknown = EXCLUDE


class NearbyQuerySchema(Schema):
    """주변 서비스 검색. distance 단위는 미터입니다."""
    lng = fields.Float(required=True, validate=validate.Range(min=-180, max=180))
    lat = fields.Float(required=True, validate=validate.Range(min=-90, max=90))
    distance = fields.Int(load_default=10000, validate=validate.Range(min=1))
    category = fields.Str(validate=validate.OneOf(values(ServiceCategory)))

    class Meta:
        unknown = EXCLUDE


class ServiceCreateSchema(Schema):
    """관리자 서비스 등록/수정 폼"""
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    category = fields.Str(required=True, validate=validate.OneOf(values(ServiceCategory)))
    description = fields.Str(required=True)
    location = fields.Dict(required=True)
    contact = fields.Dict()
    pricing = fields.Dict()
    features = fields.List(fields.Str())

    class Meta:
        unknown = EXCLUDE


class ServiceSchema(RecordSchema):
    name = fields.Str()
    category = fields.Str()
    description = fields.Str()
    images = fields.Method("get_images")
    location = fields.Dict()
    contact = fields.Dict()
    businessHours = fields.List(fields.Dict())
    pricing = fields.Dict()
    features = fields.List(fields.Str())
    rating = fields.Dict()
    starLevel = fields.Int()
    isVerified = fields.Bool(dump_default=False)
    reviews = fields.Method("get_reviews")

    def get_images(self, obj):
        return [get_image_url(path) for path in obj.get('images') or []]

    def get_reviews(self, obj):
        return ReviewSchema(many=True).dump(obj.get('reviews') or [])
