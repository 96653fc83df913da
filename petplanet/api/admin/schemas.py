# petplanet/api/admin/schemas.py
from marshmallow import Schema, fields

from petplanet.api.posts.schemas import PostSchema


class CountsSchema(Schema):
    """대시보드 카드 숫자. 백엔드가 주지 않은 항목은 0으로 표시합니다."""
    users = fields.Int(dump_default=0)
    pets = fields.Int(dump_default=0)
    posts = fields.Int(dump_default=0)
    products = fields.Int(dump_default=0)
    services = fields.Int(dump_default=0)
    orders = fields.Int(dump_default=0)
    bookings = fields.Int(dump_default=0)


class DashboardStatsSchema(Schema):
    counts = fields.Method("get_counts")
    recentPosts = fields.Method("get_recent_posts")
    recentOrders = fields.Method("get_recent_orders")
    topPosts = fields.Method("get_top_posts")

    def get_counts(self, obj):
        return CountsSchema().dump(obj.get('counts') or {})

    def get_recent_posts(self, obj):
        return PostSchema(many=True).dump((obj.get('recent') or {}).get('posts') or [])

    def get_recent_orders(self, obj):
        return list((obj.get('recent') or {}).get('orders') or [])

    def get_top_posts(self, obj):
        return PostSchema(many=True).dump((obj.get('top') or {}).get('posts') or [])
