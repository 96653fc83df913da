# petplanet/api/history/schemas.py
from marshmallow import fields

from petplanet.api.users.schemas import RecordSchema
from petplanet.core.store import record_id
from petplanet.utils.datetime_utils import format_datetime
from petplanet.utils.image_utils import get_image_url, get_media_url

# itemType별 상세 화면 경로
DETAIL_PATHS = {
    'post': '/posts/{}',
    'pet': '/pets/{}',
    'product': '/shop/{}',
    'service': '/services/{}',
}


class HistoryItemSchema(RecordSchema):
    """
    최근 본 항목 한 줄. 백엔드는 itemType에 따라 post/pet/product/service 중
    하나를 populate해서 돌려주며, 원본이 삭제된 항목은 title이 None입니다.
    """
    itemType = fields.Str()
    itemId = fields.Method("get_item_id")
    title = fields.Method("get_title")
    subtitle = fields.Method("get_subtitle")
    image = fields.Method("get_image")
    href = fields.Method("get_href")
    viewedAtDisplay = fields.Method("get_viewed_display")

    def _item(self, obj):
        return obj.get(obj.get('itemType') or '') or {}

    def get_item_id(self, obj):
        item_id = obj.get('itemId')
        if isinstance(item_id, dict):
            return record_id(item_id)
        return str(item_id) if item_id is not None else None

    def get_title(self, obj):
        item = self._item(obj)
        if obj.get('itemType') == 'post':
            return (item.get('content') or '')[:100] or None
        return item.get('name')

    def get_subtitle(self, obj):
        item = self._item(obj)
        item_type = obj.get('itemType')
        if item_type == 'post':
            return f"作者: {(item.get('author') or {}).get('username') or '未知'}"
        if item_type == 'pet':
            return item.get('species')
        if item_type == 'product':
            pricing = item.get('pricing') or {}
            return f"¥{pricing.get('currentPrice') or pricing.get('originalPrice')}"
        if item_type == 'service':
            return (item.get('location') or {}).get('address')
        return None

    def get_image(self, obj):
        item = self._item(obj)
        item_type = obj.get('itemType')
        if item_type == 'post':
            media = item.get('media') or []
            return get_media_url(media[0]) if media else None
        if item_type == 'pet':
            return get_image_url(item.get('avatar'))
        if item_type == 'product':
            images = item.get('images') or []
            return get_media_url(images[0]) if images else None
        if item_type == 'service':
            images = item.get('images') or []
            return get_image_url(images[0]) if images else None
        return None

    def get_href(self, obj):
        template = DETAIL_PATHS.get(obj.get('itemType'))
        item_id = self.get_item_id(obj)
        return template.format(item_id) if template and item_id else None

    def get_viewed_display(self, obj):
        return format_datetime(obj.get('viewedAt') or obj.get('createdAt'))
