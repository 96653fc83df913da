# petplanet/api/users/schemas.py
from marshmallow import Schema, fields, validate

from petplanet.core.store import record_id
from petplanet.utils.datetime_utils import format_datetime
from petplanet.utils.image_utils import get_avatar_url

DATE_STRING = validate.Regexp(r'^\d{4}-\d{2}-\d{2}$', error="日期格式应为YYYY-MM-DD")


class RecordSchema(Schema):
    """
    백엔드 레코드를 화면용 딕셔너리로 바꾸는 스키마의 공통 부모.
    - id: Mongo `_id`를 문자열 id로 통일
    - createdAt: 원본 값 유지, createdAtDisplay: 화면 표시용 문자열
    """
    id = fields.Method("get_id", dump_only=True)
    createdAt = fields.Raw(dump_only=True)
    createdAtDisplay = fields.Method("get_created_display", dump_only=True)

    def get_id(self, obj):
        return record_id(obj)

    def get_created_display(self, obj):
        return format_datetime(obj.get('createdAt'))


class AuthorSchema(Schema):
    """게시글/댓글/리뷰 작성자. 백엔드가 populate하지 않은 경우 id 문자열만 올 수 있습니다."""
    id = fields.Method("get_id")
    username = fields.Method("get_username")
    avatar = fields.Method("get_avatar")

    def _as_dict(self, obj):
        return obj if isinstance(obj, dict) else {'_id': obj}

    def get_id(self, obj):
        return record_id(self._as_dict(obj))

    def get_username(self, obj):
        return self._as_dict(obj).get('username')

    def get_avatar(self, obj):
        return get_avatar_url(self._as_dict(obj).get('avatar'))


class UserProfileSchema(RecordSchema):
    username = fields.Str()
    email = fields.Str()
    role = fields.Str()
    bio = fields.Str()
    location = fields.Str()
    avatar = fields.Method("get_avatar")
    points = fields.Int()
    followersCount = fields.Method("get_followers_count")
    followingCount = fields.Method("get_following_count")
    isFollowing = fields.Bool(dump_default=False)

    def get_avatar(self, obj):
        return get_avatar_url(obj.get('avatar'))

    def get_followers_count(self, obj):
        if obj.get('followersCount') is not None:
            return obj['followersCount']
        return len(obj.get('followers') or [])

    def get_following_count(self, obj):
        if obj.get('followingCount') is not None:
            return obj['followingCount']
        return len(obj.get('following') or [])


class UserStatsSchema(Schema):
    postsCount = fields.Int(dump_default=0)
    petsCount = fields.Int(dump_default=0)
    followersCount = fields.Int(dump_default=0)
    followingCount = fields.Int(dump_default=0)
    likesReceived = fields.Int(dump_default=0)
