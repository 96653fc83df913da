# petplanet/api/responses.py
"""
라우트에서 공통으로 쓰는 응답 형식.
- 성공: 페이지 컨트롤러의 view model(JSON)
- 실패: {"error_code", "message"}
"""
from flask import jsonify, request
from marshmallow import ValidationError

from petplanet.core.page import PageController


def page_view(page: PageController, status: int = 200):
    return jsonify(page.to_view()), status


def page_error(page: PageController, error_code: str):
    """변경 요청 실패. 백엔드가 준 상태 코드가 있으면 그대로 사용합니다."""
    return jsonify({"error_code": error_code, "message": page.error}), page.error_status or 400


def validation_error(err: ValidationError):
    return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400


def json_body() -> dict:
    """JSON 본문 또는 폼 필드. 본문이 없으면 빈 딕셔너리."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return data
