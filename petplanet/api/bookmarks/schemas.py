# petplanet/api/bookmarks/schemas.py
from marshmallow import fields

from petplanet.api.posts.schemas import PostSchema
from petplanet.api.users.schemas import RecordSchema
from petplanet.utils.datetime_utils import format_date


class BookmarkSchema(RecordSchema):
    post = fields.Method("get_post")
    savedAtDisplay = fields.Method("get_saved_display")

    def get_post(self, obj):
        post = obj.get('post')
        return PostSchema().dump(post) if isinstance(post, dict) else None

    def get_saved_display(self, obj):
        return format_date(obj.get('createdAt'))
