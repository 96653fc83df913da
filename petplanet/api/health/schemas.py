# petplanet/api/health/schemas.py
from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from petplanet.api.users.schemas import DATE_STRING, RecordSchema
from petplanet.models.enums import ActivityLevel, Appetite, EnergyLevel, Mood, StoolConsistency, values
from petplanet.utils.datetime_utils import format_date


class DietSchema(Schema):
    foodAmount = fields.Float(allow_none=True, validate=validate.Range(min=0))
    waterAmount = fields.Float(allow_none=True, validate=validate.Range(min=0))
    appetite = fields.Str(validate=validate.OneOf(values(Appetite)))


class BowelMovementSchema(Schema):
    frequency = fields.Int(allow_none=True, validate=validate.Range(min=0))
    consistency = fields.Str(validate=validate.OneOf(values(StoolConsistency)))
    notes = fields.Str()


class EnergySchema(Schema):
    level = fields.Str(validate=validate.OneOf(values(EnergyLevel)))
    playfulness = fields.Int(allow_none=True)
    notes = fields.Str()


class HealthLogCreateSchema(Schema):
    """
    POST /pets/<pet_id>/health/add
    하루치 건강 기록. 빈 문자열로 들어온 항목은 입력하지 않은 것으로 봅니다.
    """
    date = fields.Str(validate=DATE_STRING)
    weight = fields.Float(allow_none=True, validate=validate.Range(min=0))
    temperature = fields.Float(allow_none=True, validate=validate.Range(min=0))
    diet = fields.Nested(DietSchema)
    bowelMovement = fields.Nested(BowelMovementSchema)
    energy = fields.Nested(EnergySchema)
    mood = fields.Str(validate=validate.OneOf(values(Mood)))
    symptoms = fields.List(fields.Str())
    notes = fields.Str(validate=validate.Length(max=500, error="备注最多500个字符"))

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def drop_blank(self, data, **kwargs):
        return _drop_blank(data)


def _drop_blank(data):
    if isinstance(data, dict):
        return {k: _drop_blank(v) for k, v in data.items() if v != ''}
    return data


class FeedingRequestSchema(Schema):
    """급식 추천 요청. 체중(kg)과 활동량으로 하루 칼로리를 계산합니다."""
    weight = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    activityLevel = fields.Str(load_default=ActivityLevel.MEDIUM.value, validate=validate.OneOf(values(ActivityLevel)))
    healthIssues = fields.List(fields.Str(), load_default=list)
    petType = fields.Str()
    age = fields.Float()

    class Meta:
        unknown = EXCLUDE


class HealthLogSchema(RecordSchema):
    date = fields.Raw()
    dateDisplay = fields.Method("get_date_display")
    weight = fields.Float(allow_none=True)
    temperature = fields.Float(allow_none=True)
    diet = fields.Dict()
    bowelMovement = fields.Dict()
    energy = fields.Dict()
    mood = fields.Str()
    symptoms = fields.List(fields.Str())
    notes = fields.Str()
    alerts = fields.List(fields.Dict())

    def get_date_display(self, obj):
        return format_date(obj.get('date'))
