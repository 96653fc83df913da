# petplanet/api/products/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.users.schemas import AuthorSchema, RecordSchema
from petplanet.models.enums import ProductCategory, ProductSort, values
from petplanet.utils.datetime_utils import format_datetime
from petplanet.utils.image_utils import get_image_url, get_media_url


class ProductQuerySchema(Schema):
    """GET /shop 쿼리스트링. 'all' 카테고리는 필터 없음과 같습니다."""
    category = fields.Str(validate=validate.OneOf(['all'] + values(ProductCategory)))
    search = fields.Str()
    sort = fields.Str(validate=validate.OneOf(values(ProductSort)))
    petType = fields.Str()
    minPrice = fields.Float()
    maxPrice = fields.Float()
    page = fields.Int(validate=validate.Range(min=1))
    limit = fields.Int(validate=validate.Range(min=1, max=100))

    class Meta:
        unknown = EXCLUDE


class ReviewCreateSchema(Schema):
    """상품/서비스 리뷰 작성 폼"""
    rating = fields.Int(required=True, validate=validate.Range(min=1, max=5, error="评分范围为1-5"))
    content = fields.Str(validate=validate.Length(max=1000))

    class Meta:
        unknown = EXCLUDE


class ProductCreateSchema(Schema):
    """관리자 상품 등록/수정 폼"""
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    description = fields.Str(required=True)
    category = fields.Str(required=True, validate=validate.OneOf(values(ProductCategory)))
    brand = fields.Str()
    pricing = fields.Dict(required=True)
    inventory = fields.Dict(required=True)
    petTypes = fields.List(fields.Str())
    isFeatured = fields.Bool()

    class Meta:
        unknown = EXCLUDE


class ReviewSchema(Schema):
    user = fields.Method("get_user")
    rating = fields.Int()
    content = fields.Str()
    createdAtDisplay = fields.Method("get_created_display")

    def get_user(self, obj):
        return AuthorSchema().dump(obj.get('user') or {})

    def get_created_display(self, obj):
        return format_datetime(obj.get('createdAt'))


class ProductSchema(RecordSchema):
    name = fields.Str()
    description = fields.Str()
    category = fields.Method("get_category")
    brand = fields.Str()
    images = fields.Method("get_images")
    cover = fields.Method("get_cover")
    pricing = fields.Dict()
    inventory = fields.Dict()
    rating = fields.Dict()
    salesCount = fields.Int(dump_default=0)
    isFeatured = fields.Bool(dump_default=False)
    reviews = fields.Method("get_reviews")

    def get_category(self, obj):
        # 백엔드가 {main, sub} 형태로 줄 때가 있습니다.
        category = obj.get('category')
        if isinstance(category, dict):
            return category.get('main')
        return category

    def get_images(self, obj):
        return [get_media_url(image) for image in obj.get('images') or []]

    def get_cover(self, obj):
        images = obj.get('images') or []
        return get_media_url(images[0]) if images else get_image_url(None)

    def get_reviews(self, obj):
        return ReviewSchema(many=True).dump(obj.get('reviews') or [])
