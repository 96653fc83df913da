# petplanet/api/feedback/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.users.schemas import AuthorSchema, RecordSchema
from petplanet.models.enums import FeedbackStatus, FeedbackType, values


class FeedbackCreateSchema(Schema):
    """도움말 페이지의 의견 보내기 폼"""
    type = fields.Str(load_default=FeedbackType.SUGGESTION.value, validate=validate.OneOf(values(FeedbackType)))
    content = fields.Str(required=True, validate=validate.Length(min=1, max=1000, error="反馈内容为1-1000个字符"),
                         error_messages={"required": "请输入反馈内容"})
    contact = fields.Str(validate=validate.Length(max=100))

    class Meta:
        unknown = EXCLUDE


class FeedbackUpdateSchema(Schema):
    """관리자 처리 상태/답변 갱신"""
    status = fields.Str(validate=validate.OneOf(values(FeedbackStatus)))
    response = fields.Str(validate=validate.Length(max=1000))

    class Meta:
        unknown = EXCLUDE


class FeedbackSchema(RecordSchema):
    user = fields.Method("get_user")
    type = fields.Str()
    content = fields.Str()
    contact = fields.Str()
    status = fields.Str(dump_default=FeedbackStatus.PENDING.value)
    response = fields.Str()

    def get_user(self, obj):
        return AuthorSchema().dump(obj.get('user') or {})
