# petplanet/api/pets/routes.py
from flask import Blueprint, current_app
from marshmallow import ValidationError

from petplanet.api.pets.pages import AddPetPage, PetDetailPage, PetsListPage
from petplanet.api.pets.schemas import PetCreateSchema, RatingCreateSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import login_required

pets_bp = Blueprint('pets_bp', __name__)


@pets_bp.route('/pets', methods=['GET'])
@login_required
def pet_list():
    with PetsListPage(current_app.services) as page:
        page.load()
        return page_view(page)


@pets_bp.route('/pets/new', methods=['GET'])
@login_required
def add_pet_form():
    with AddPetPage(current_app.services) as page:
        return page_view(page)


@pets_bp.route('/pets/new', methods=['POST'])
@login_required
def add_pet():
    """
    새 반려동물을 등록합니다.
    - 이름, 종, 품종은 필수입니다.
    - 성공 시 등록된 반려동물 정보를 201과 함께 반환합니다.
    """
    try:
        data = PetCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with AddPetPage(current_app.services) as page:
        if page.submit(data) is None:
            return page_error(page, "PET_CREATION_FAILED")
        return page_view(page, 201)


@pets_bp.route('/pets/<string:pet_id>', methods=['GET'])
@login_required
def pet_detail(pet_id: str):
    with PetDetailPage(current_app.services, pet_id) as page:
        page.open()
        return page_view(page)


@pets_bp.route('/pets/<string:pet_id>', methods=['DELETE'])
@login_required
def delete_pet(pet_id: str):
    with PetsListPage(current_app.services) as page:
        page.load()
        if not page.delete(pet_id):
            return page_error(page, "PET_DELETE_FAILED")
        return page_view(page)


@pets_bp.route('/pets/<string:pet_id>/ratings', methods=['POST'])
@login_required
def add_rating(pet_id: str):
    try:
        data = RatingCreateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with PetDetailPage(current_app.services, pet_id) as page:
        page.load()
        if page.rate(data) is None:
            return page_error(page, "RATING_CREATION_FAILED")
        return page_view(page, 201)


@pets_bp.route('/pets/<string:pet_id>/ratings/<string:rating_id>', methods=['DELETE'])
@login_required
def delete_rating(pet_id: str, rating_id: str):
    with PetDetailPage(current_app.services, pet_id) as page:
        page.load()
        if not page.delete_rating(rating_id):
            return page_error(page, "RATING_DELETE_FAILED")
        return page_view(page)


@pets_bp.route('/pets/<string:pet_id>/ratings/<string:rating_id>/helpful', methods=['POST'])
@login_required
def mark_rating_helpful(pet_id: str, rating_id: str):
    with PetDetailPage(current_app.services, pet_id) as page:
        page.load()
        if page.mark_helpful(rating_id) is None:
            return page_error(page, "RATING_HELPFUL_FAILED")
        return page_view(page)
