# petplanet/api/documents/routes.py
from flask import Blueprint, current_app, request
from marshmallow import ValidationError

from petplanet.api.documents.pages import DocumentsPage
from petplanet.api.documents.schemas import DocumentUpdateSchema, DocumentUploadSchema
from petplanet.api.responses import json_body, page_error, page_view, validation_error
from petplanet.core.security import login_required

documents_bp = Blueprint('documents_bp', __name__)


@documents_bp.route('/documents', methods=['GET'])
@login_required
def document_list():
    with DocumentsPage(current_app.services, request.args.get('type'), request.args.get('petId')) as page:
        page.load()
        return page_view(page)


@documents_bp.route('/documents', methods=['POST'])
@login_required
def upload_document():
    """multipart 폼: 텍스트 필드 + 'file'"""
    try:
        form = DocumentUploadSchema().load(request.form.to_dict())
    except ValidationError as err:
        return validation_error(err)

    f = request.files.get('file')
    file = (f.filename, f.stream, f.mimetype) if f else None
    with DocumentsPage(current_app.services) as page:
        if page.upload(form, file) is None:
            return page_error(page, "DOCUMENT_UPLOAD_FAILED")
        return page_view(page, 201)


@documents_bp.route('/documents/<string:document_id>', methods=['PUT'])
@login_required
def update_document(document_id: str):
    try:
        data = DocumentUpdateSchema().load(json_body())
    except ValidationError as err:
        return validation_error(err)

    with DocumentsPage(current_app.services) as page:
        page.load()
        if page.update(document_id, data) is None and page.error:
            return page_error(page, "DOCUMENT_UPDATE_FAILED")
        return page_view(page)


@documents_bp.route('/documents/<string:document_id>', methods=['DELETE'])
@login_required
def delete_document(document_id: str):
    with DocumentsPage(current_app.services) as page:
        page.load()
        if not page.delete(document_id):
            return page_error(page, "DOCUMENT_DELETE_FAILED")
        return page_view(page)
