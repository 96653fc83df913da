# petplanet/api/settings/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.models.enums import Theme, Visibility, values

TIME_OF_DAY = validate.Regexp(r'^\d{2}:\d{2}$')


class AppearanceSchema(Schema):
    theme = fields.Str(validate=validate.OneOf(values(Theme)))
    customLayout = fields.List(fields.Str())

    class Meta:
        unknown = EXCLUDE


class DoNotDisturbSchema(Schema):
    enabled = fields.Bool()
    startTime = fields.Str(validate=TIME_OF_DAY)
    endTime = fields.Str(validate=TIME_OF_DAY)


class NotificationsSchema(Schema):
    push = fields.Bool()
    email = fields.Bool()
    sms = fields.Bool()
    doNotDisturb = fields.Nested(DoNotDisturbSchema)

    class Meta:
        unknown = EXCLUDE


class PrivacySchema(Schema):
    contentVisibility = fields.Str(validate=validate.OneOf(values(Visibility)))
    showLocation = fields.Bool()
    hidePersonalInfo = fields.Bool()

    class Meta:
        unknown = EXCLUDE


class SettingsSchema(Schema):
    """
    사용자 설정 전체. 화면에 내려줄 때도, 한 번에 저장할 때도 같은 형식을 씁니다.
    """
    appearance = fields.Nested(AppearanceSchema)
    notifications = fields.Nested(NotificationsSchema)
    privacy = fields.Nested(PrivacySchema)

    class Meta:
        unknown = EXCLUDE
