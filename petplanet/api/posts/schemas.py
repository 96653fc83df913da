# petplanet/api/posts/schemas.py
import re

from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from petplanet.api.users.schemas import AuthorSchema, RecordSchema
from petplanet.models.enums import MediaType, PostCategory, values
from petplanet.utils.image_utils import get_media_url

HASHTAG_SEPARATOR = re.compile(r'[,，\s]+')


def parse_hashtags(raw) -> list:
    """'#猫咪, 日常 #萌宠' 같은 입력을 ['猫咪', '日常', '萌宠']로 나눕니다."""
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        raw = ' '.join(str(tag) for tag in raw)
    tags = []
    for token in HASHTAG_SEPARATOR.split(str(raw)):
        tag = token.strip().lstrip('#').strip()
        if tag:
            tags.append(tag)
    return tags


class PostCreateSchema(Schema):
    """
    POST /posts/create
    게시글 작성 폼. 해시태그는 쉼표/공백으로 구분된 문자열로 받아 리스트로 바꿉니다.
    첨부 파일이 없는 글은 mediaType이 'text'입니다.
    """
    content = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=2000, error="内容长度为1-2000个字符"),
        error_messages={"required": "请输入内容"},
    )
    category = fields.Str(load_default=PostCategory.DAILY.value, validate=validate.OneOf(values(PostCategory)))
    hashtags = fields.List(fields.Str(), load_default=list)
    mediaType = fields.Str(load_default=MediaType.TEXT.value, validate=validate.OneOf(values(MediaType)))

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def normalize(self, data, **kwargs):
        data = dict(data)
        content = data.get('content')
        if isinstance(content, str):
            data['content'] = content.strip()
        if 'hashtags' in data:
            data['hashtags'] = parse_hashtags(data.get('hashtags'))
        return data


class CommentCreateSchema(Schema):
    content = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=500, error="评论长度为1-500个字符"),
        error_messages={"required": "请输入评论内容"},
    )

    class Meta:
        unknown = EXCLUDE


class CommentSchema(RecordSchema):
    author = fields.Method("get_author")
    content = fields.Str()

    def get_author(self, obj):
        return AuthorSchema().dump(obj.get('user') or obj.get('author') or {})


class PostSchema(RecordSchema):
    """게시글 화면 모델. 미디어 경로는 절대 URL로 바꿔서 내려줍니다."""
    author = fields.Method("get_author")
    content = fields.Str()
    category = fields.Str()
    hashtags = fields.List(fields.Str())
    mediaType = fields.Str()
    media = fields.Method("get_media")
    likesCount = fields.Int(dump_default=0)
    commentsCount = fields.Int(dump_default=0)
    isLiked = fields.Bool(dump_default=False)
    isBookmarked = fields.Bool(dump_default=False)
    comments = fields.Method("get_comments")

    def get_author(self, obj):
        return AuthorSchema().dump(obj.get('author') or {})

    def get_media(self, obj):
        return [get_media_url(m) for m in obj.get('media') or []]

    def get_comments(self, obj):
        return CommentSchema(many=True).dump(obj.get('comments') or [])


class HashtagSchema(Schema):
    tag = fields.Method("get_tag")
    count = fields.Method("get_count")

    def get_tag(self, obj):
        if isinstance(obj, str):
            return obj
        return obj.get('tag') or obj.get('_id') or obj.get('name')

    def get_count(self, obj):
        if isinstance(obj, str):
            return 0
        return obj.get('count') or 0
