# petplanet/api/documents/schemas.py
from marshmallow import EXCLUDE, Schema, fields, validate

from petplanet.api.users.schemas import DATE_STRING, RecordSchema
from petplanet.models.enums import DocumentType, values
from petplanet.utils.datetime_utils import DateTimeUtils, format_date
from petplanet.utils.image_utils import get_image_url


class DocumentUploadSchema(Schema):
    """multipart 폼의 텍스트 필드. 파일 자체는 'file' 필드로 따로 받습니다."""
    petId = fields.Str(required=True, error_messages={"required": "请选择宠物"})
    type = fields.Str(required=True, validate=validate.OneOf(values(DocumentType)))
    title = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    issueDate = fields.Str(validate=DATE_STRING)
    expiryDate = fields.Str(validate=DATE_STRING)

    class Meta:
        unknown = EXCLUDE


class DocumentUpdateSchema(Schema):
    type = fields.Str(validate=validate.OneOf(values(DocumentType)))
    title = fields.Str(validate=validate.Length(min=1, max=100))
    issueDate = fields.Str(validate=DATE_STRING)
    expiryDate = fields.Str(validate=DATE_STRING)

    class Meta:
        unknown = EXCLUDE


class DocumentSchema(RecordSchema):
    pet = fields.Raw()
    type = fields.Str()
    title = fields.Str()
    issueDateDisplay = fields.Method("get_issue_display")
    expiryDateDisplay = fields.Method("get_expiry_display")
    isExpired = fields.Method("get_is_expired")
    fileUrl = fields.Method("get_file_url")
    fileType = fields.Str()
    thumbnail = fields.Method("get_thumbnail")

    def get_issue_display(self, obj):
        return format_date(obj.get('issueDate'))

    def get_expiry_display(self, obj):
        return format_date(obj.get('expiryDate'))

    def get_is_expired(self, obj):
        return DateTimeUtils.is_past(obj.get('expiryDate'))

    def get_file_url(self, obj):
        return get_image_url(obj.get('fileUrl'))

    def get_thumbnail(self, obj):
        return get_image_url(obj.get('thumbnail') or obj.get('fileUrl'))
