# petplanet/api/pet_services/routes.py
from flask import Blueprint, current_app, request
from marshmallow import ValidationError

from petplanet.api.bookings.schemas import BookingCreateSchema
from petplanet.api.pet_services.pages import CreateBookingPage, ServiceDetailPage, ServicesPage
from petplanet.api.pet_services.schemas import NearbyQuerySchema, ServiceQuerySchema
from petplanet.api.products.schemas import ReviewCreateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.live_search import session_search_key
from petplanet.core.security import login_required
from petplanet.core.storage import FlaskSessionStorage

pet_services_bp = Blueprint('pet_services_bp', __name__)


def _services_page() -> ServicesPage:
    return ServicesPage(current_app.services, FlaskSessionStorage(), current_app.config['SEARCH_DEBOUNCE_SECONDS'])


@pet_services_bp.route('/services', methods=['GET'])
@login_required
def service_list():
    """
    서비스 목록. ?category=&sort=&search= 를 지원하며,
    저장된 지역 설정이 있으면 해당 도시의 서비스만 보여줍니다.
    """
    try:
        query = ServiceQuerySchema().load(request.args.to_dict())
    except ValidationError as err:
        return validation_error(err)

    with _services_page() as page:
        page.set_filters(query.get('category'), query.get('sort'), query.get('search'))
        page.load()
        return page_view(page)


@pet_services_bp.route('/services/search', methods=['GET'])
@login_required
def live_search_services():
    """검색창 입력 한 번(?search=). 저장된 지역 설정도 함께 적용됩니다."""
    try:
        query = ServiceQuerySchema().load(request.args.to_dict())
    except ValidationError as err:
        return validation_error(err)

    return current_app.live_search.search(
        ('services', session_search_key()),
        _services_page,
        query.get('search', ''),
        page_view,
        prepare=lambda page: page.set_filters(query.get('category'), query.get('sort')),
    )


@pet_services_bp.route('/services/location', methods=['PUT'])
@login_required
def set_location():
    """지역 설정 저장. city가 비어 있으면 설정을 지웁니다."""
    with _services_page() as page:
        page.set_location(json_body().get('city'))
        page.load()
        return page_view(page)


@pet_services_bp.route('/services/nearby', methods=['GET'])
@login_required
def nearby_services():
    try:
        query = NearbyQuerySchema().load(request.args.to_dict())
    except ValidationError as err:
        return validation_error(err)

    with _services_page() as page:
        page.load_nearby(query)
        return page_view(page)


@pet_services_bp.route('/services/<string:service_id>', methods=['GET'])
@login_required
def service_detail(service_id: str):
    with ServiceDetailPage(current_app.services, service_id) as page:
        page.open()
        return page_view(page)


@pet_services_bp.route('/services/<string:service_id>/reviews', methods=['POST'])
@login_required
def add_service_review(service_id: str):
    try:
        data = ReviewCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with ServiceDetailPage(current_app.services, service_id) as page:
        if page.review(data) is None:
            return page_error(page, "REVIEW_CREATION_FAILED")
        return page_view(page, 201)


@pet_services_bp.route('/services/<string:service_id>/book', methods=['GET'])
@login_required
def booking_form(service_id: str):
    with CreateBookingPage(current_app.services, service_id) as page:
        page.load()
        return page_view(page)


@pet_services_bp.route('/services/<string:service_id>/book', methods=['POST'])
@login_required
def create_booking(service_id: str):
    """
    서비스 예약을 생성합니다.
    - 날짜/시간과 반려동물 이름은 필수입니다.
    - 성공 시 확인 안내 문구와 이동할 경로를 함께 반환합니다.
    """
    try:
        data = BookingCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with CreateBookingPage(current_app.services, service_id) as page:
        if page.submit(data) is None:
            return page_error(page, "BOOKING_CREATION_FAILED")
        return page_view(page, 201)
