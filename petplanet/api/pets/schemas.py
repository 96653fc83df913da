# petplanet/api/pets/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.users.schemas import DATE_STRING, AuthorSchema, RecordSchema
from petplanet.models.enums import ActivityLevel, PetGender, PetSpecies, values
from petplanet.utils.datetime_utils import DateTimeUtils, format_date
from petplanet.utils.image_utils import get_image_url

RATING_RANGE = validate.Range(min=1, max=5, error="评分范围为1-5")


class AppearanceSchema(Schema):
    color = fields.Str()
    weight = fields.Float(validate=validate.Range(min=0))
    height = fields.Float(validate=validate.Range(min=0))
    distinctiveFeatures = fields.Str()


class PersonalitySchema(Schema):
    traits = fields.List(fields.Str())
    temperament = fields.Str()
    activityLevel = fields.Str(validate=validate.OneOf(values(ActivityLevel)))


class PetCreateSchema(Schema):
    """
    POST /pets/new
    반려동물 등록 폼. 이름/종/품종은 필수이며 나머지는 선택 입력입니다.
    """
    name = fields.Str(required=True, validate=validate.Length(min=1, max=30),
                      error_messages={"required": "请输入宠物名字"})
    species = fields.Str(required=True, validate=validate.OneOf(values(PetSpecies)),
                         error_messages={"required": "请选择宠物种类"})
    breed = fields.Str(required=True, validate=validate.Length(min=1))
    gender = fields.Str(load_default=PetGender.UNKNOWN.value, validate=validate.OneOf(values(PetGender)))
    birthDate = fields.Str(validate=DATE_STRING)
    appearance = fields.Nested(AppearanceSchema)
    personality = fields.Nested(PersonalitySchema)

    class Meta:
        unknown = EXCLUDE


class PetSchema(RecordSchema):
    name = fields.Str()
    species = fields.Str()
    breed = fields.Str()
    gender = fields.Str()
    birthDate = fields.Raw()
    birthDateDisplay = fields.Method("get_birth_display")
    age = fields.Method("get_age")
    avatar = fields.Method("get_avatar")
    appearance = fields.Dict()
    personality = fields.Dict()
    health = fields.Dict()

    def get_birth_display(self, obj):
        return format_date(obj.get('birthDate'))

    def get_age(self, obj):
        years, months = DateTimeUtils.calculate_age(obj.get('birthDate'))
        return {"years": years, "months": months}

    def get_avatar(self, obj):
        return get_image_url(obj.get('avatar'))


class RatingScoresSchema(Schema):
    overall = fields.Int(required=True, validate=RATING_RANGE)
    stickiness = fields.Int(validate=RATING_RANGE)
    intelligence = fields.Int(validate=RATING_RANGE)
    activeness = fields.Int(validate=RATING_RANGE)
    shedding = fields.Int(validate=RATING_RANGE)


class RatingCreateSchema(Schema):
    """POST /pets/<pet_id>/ratings 평가 작성 폼"""
    ratings = fields.Nested(RatingScoresSchema, required=True)
    title = fields.Str(validate=validate.Length(max=100))
    content = fields.Str(validate=validate.Length(max=1000))

    class Meta:
        unknown = EXCLUDE


class RatingSchema(RecordSchema):
    user = fields.Method("get_user")
    ratings = fields.Method("get_ratings")
    title = fields.Str()
    content = fields.Str()
    helpfulCount = fields.Int(dump_default=0)

    def get_user(self, obj):
        return AuthorSchema().dump(obj.get('user') or {})

    def get_ratings(self, obj):
        # 백엔드 버전에 따라 점수가 ratings 아래에 있거나 최상위에 있습니다.
        scores = obj.get('ratings') or obj
        return {k: scores.get(k) for k in ('overall', 'stickiness', 'intelligence', 'activeness', 'shedding')
                if scores.get(k) is not None}
