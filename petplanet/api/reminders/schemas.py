# petplanet/api/reminders/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.users.schemas import DATE_STRING, RecordSchema
from petplanet.models.enums import ReminderRepeat, ReminderStatus, ReminderType, values
from petplanet.utils.datetime_utils import format_date


class ReminderCreateSchema(Schema):
    pet = fields.Str(required=True, error_messages={"required": "请选择宠物"})
    type = fields.Str(required=True, validate=validate.OneOf(values(ReminderType)))
    title = fields.Str(required=True, validate=validate.Length(min=1, max=100),
                       error_messages={"required": "请输入提醒标题"})
    date = fields.Str(required=True, validate=DATE_STRING)
    time = fields.Str(validate=validate.Regexp(r'^\d{2}:\d{2}$'))
    repeat = fields.Str(load_default=ReminderRepeat.ONCE.value, validate=validate.OneOf(values(ReminderRepeat)))
    notes = fields.Str(validate=validate.Length(max=500))

    class Meta:
        unknown = EXCLUDE


class ReminderSchema(RecordSchema):
    pet = fields.Raw()
    type = fields.Str()
    title = fields.Str()
    date = fields.Raw()
    dateDisplay = fields.Method("get_date_display")
    time = fields.Str()
    repeat = fields.Str()
    status = fields.Str(dump_default=ReminderStatus.PENDING.value)
    notes = fields.Str()

    def get_date_display(self, obj):
        return format_date(obj.get('date'))
