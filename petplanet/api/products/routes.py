# petplanet/api/products/routes.py
from flask import Blueprint, current_app, request
from marshmallow import ValidationError

from petplanet.api.orders.schemas import OrderCreateSchema
from petplanet.api.products.pages import ProductDetailPage, ShopPage
from petplanet.api.products.schemas import ProductQuerySchema, ReviewCreateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.live_search import session_search_key
from petplanet.core.security import login_required

products_bp = Blueprint('products_bp', __name__)


@products_bp.route('/shop', methods=['GET'])
@login_required
def shop():
    """
    상품 목록. ?category=&sort=&search= 를 지원합니다.
    검색어가 없을 때만 추천 상품을 함께 보여줍니다.
    """
    try:
        query = ProductQuerySchema().load(request.args.to_dict())
    except ValidationError as err:
        return validation_error(err)

    with ShopPage(current_app.services, current_app.config['SEARCH_DEBOUNCE_SECONDS']) as page:
        page.set_filters(query.get('category'), query.get('sort'), query.get('search'))
        page.load(with_featured=not page.search)
        return page_view(page)


@products_bp.route('/shop/search', methods=['GET'])
@login_required
def live_search_products():
    """
    검색창 입력 한 번(?search=). 같은 세션의 입력이 멈춘 뒤 마지막 검색어로 한 번만 조회합니다.
    """
    try:
        query = ProductQuerySchema().load(request.args.to_dict())
    except ValidationError as err:
        return validation_error(err)

    services = current_app.services
    interval = current_app.config['SEARCH_DEBOUNCE_SECONDS']
    return current_app.live_search.search(
        ('shop', session_search_key()),
        lambda: ShopPage(services, interval),
        query.get('search', ''),
        page_view,
        prepare=lambda page: page.set_filters(query.get('category'), query.get('sort')),
    )


@products_bp.route('/shop/<string:product_id>', methods=['GET'])
@login_required
def product_detail(product_id: str):
    with ProductDetailPage(current_app.services, product_id) as page:
        page.open()
        return page_view(page)


@products_bp.route('/shop/<string:product_id>/reviews', methods=['POST'])
@login_required
def add_product_review(product_id: str):
    try:
        data = ReviewCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with ProductDetailPage(current_app.services, product_id) as page:
        if page.review(data) is None:
            return page_error(page, "REVIEW_CREATION_FAILED")
        return page_view(page, 201)


@products_bp.route('/shop/<string:product_id>/orders', methods=['POST'])
@login_required
def buy_product(product_id: str):
    """상품 상세에서 바로 주문합니다. items를 생략하면 이 상품 1개로 주문합니다."""
    body = json_body()
    body.setdefault('items', [{'product': product_id, 'quantity': 1}])
    try:
        data = OrderCreateSchema().load(body)
    except ValidationError as err:
        return validation_error(err)

    with ProductDetailPage(current_app.services, product_id) as page:
        page.load()
        if page.buy(data) is None:
            return page_error(page, "ORDER_CREATION_FAILED")
        return page_view(page, 201)
