# petplanet/api/auth/schemas.py
from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema


class LoginSchema(Schema):
    """POST /login 로그인 폼"""
    email = fields.Email(required=True, error_messages={"invalid": "请输入有效的邮箱地址"})
    password = fields.Str(required=True, validate=validate.Length(min=1))

    class Meta:
        unknown = EXCLUDE


class RegisterSchema(Schema):
    """
    POST /register 회원가입 폼.
    confirmPassword는 검증에만 쓰고 백엔드로 보내지 않습니다.
    """
    username = fields.Str(required=True, validate=validate.Length(min=3, max=30, error="用户名长度为3-30个字符"))
    email = fields.Email(required=True, error_messages={"invalid": "请输入有效的邮箱地址"})
    password = fields.Str(required=True, validate=validate.Length(min=6, error="密码至少6个字符"))
    confirmPassword = fields.Str(load_only=True)

    class Meta:
        unknown = EXCLUDE

    @validates_schema
    def validate_passwords_match(self, data, **kwargs):
        confirm = data.get('confirmPassword')
        if confirm is not None and confirm != data.get('password'):
            raise ValidationError("两次输入的密码不一致", field_name="confirmPassword")

    @post_load
    def drop_confirmation(self, data, **kwargs):
        data.pop('confirmPassword', None)
        return data


class ProfileUpdateSchema(Schema):
    username = fields.Str(validate=validate.Length(min=3, max=30))
    email = fields.Email()
    bio = fields.Str(validate=validate.Length(max=200))
    location = fields.Str()

    class Meta:
        unknown = EXCLUDE


class PasswordUpdateSchema(Schema):
    currentPassword = fields.Str(required=True)
    newPassword = fields.Str(required=True, validate=validate.Length(min=6, error="密码至少6个字符"))

    class Meta:
        unknown = EXCLUDE
