# petplanet/api/bookings/schemas.py
from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from petplanet.api.users.schemas import DATE_STRING, RecordSchema
from petplanet.models.enums import BookingStatus, PetSpecies, values
from petplanet.utils.datetime_utils import format_date

CANCELLABLE_BOOKING_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)


class BookingCreateSchema(Schema):
    """
    POST /services/<service_id>/book
    예약 폼. 날짜/시간과 반려동물 이름은 필수입니다.
    """
    date = fields.Str(required=True, validate=DATE_STRING,
                      error_messages={"required": "请选择预约日期和时间"})
    time = fields.Str(required=True, validate=validate.Regexp(r'^\d{2}:\d{2}$'),
                      error_messages={"required": "请选择预约日期和时间"})
    petName = fields.Str(required=True, validate=validate.Length(min=1, error="请输入宠物名称"),
                         error_messages={"required": "请输入宠物名称"})
    petType = fields.Str(load_default=PetSpecies.DOG.value, validate=validate.OneOf(values(PetSpecies)))
    pet = fields.Str()
    serviceType = fields.Str()
    notes = fields.Str(validate=validate.Length(max=500))

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def strip_pet_name(self, data, **kwargs):
        if isinstance(data.get('petName'), str):
            data = dict(data, petName=data['petName'].strip())
        return data


class BookingSchema(RecordSchema):
    service = fields.Raw()
    pet = fields.Raw()
    petName = fields.Str()
    serviceType = fields.Str()
    scheduledDate = fields.Raw()
    scheduledDateDisplay = fields.Method("get_scheduled_display")
    scheduledTime = fields.Str()
    notes = fields.Str()
    status = fields.Str()
    canCancel = fields.Method("get_can_cancel")

    def get_scheduled_display(self, obj):
        return format_date(obj.get('scheduledDate') or obj.get('date'))

    def get_can_cancel(self, obj):
        return obj.get('status') in CANCELLABLE_BOOKING_STATUSES
