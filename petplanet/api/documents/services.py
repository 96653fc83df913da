# petplanet/api/documents/services.py
from typing import Any, Dict, Optional

from petplanet.api.base import BaseResourceService
from petplanet.core.http import ApiResponse


class DocumentService(BaseResourceService):
    """반려동물 서류(예방접종 증명서 등, /documents) 서비스."""
    resource = 'documents'

    def get_documents(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.list(params, **kwargs)

    def get_stats(self, **kwargs) -> ApiResponse:
        return self.client.get(self._path('stats'), **kwargs)

    def get_document(self, document_id: str, **kwargs) -> ApiResponse:
        return self.get(document_id, **kwargs)

    def upload_document(self, form: Dict[str, Any], file: Any) -> ApiResponse:
        """form 필드와 파일을 multipart로 업로드합니다."""
        return self.client.post(self._path(), data=form, files={'file': file})

    def update_document(self, document_id: str, data: Dict[str, Any]) -> ApiResponse:
        return self.update(document_id, data)

    def delete_document(self, document_id: str) -> ApiResponse:
        return self.delete(document_id)
