# petplanet/api/documents/pages.py
from typing import Any, Dict, List, Optional

from petplanet.api.base import unwrap_list, unwrap_record
from petplanet.api.documents.schemas import DocumentSchema
from petplanet.api.pets.schemas import PetSchema
from petplanet.core.page import EmptyState, PageController
from petplanet.core.store import PATCHED, REMOVED
from petplanet.models.enums import DocumentType, values

ALL_TYPES = 'all'


class DocumentsPage(PageController):
    """
    반려동물 서류 보관함. 서류 목록과 종류별 통계, 업로드 폼의 반려동물 선택지를 불러옵니다.
    """
    empty_state = EmptyState('📄', '还没有上传证件', '上传证件', None)

    def __init__(self, services, doc_type: Optional[str] = None, pet_id: Optional[str] = None):
        super().__init__(services)
        self.doc_type = doc_type if doc_type in values(DocumentType) else ALL_TYPES
        self.pet_id = pet_id
        self.stats: Dict[str, Any] = {}
        self.pets: List[Dict[str, Any]] = []
        self.uploaded: Optional[Dict[str, Any]] = None

    def _query(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.doc_type != ALL_TYPES:
            params['type'] = self.doc_type
        if self.pet_id:
            params['petId'] = self.pet_id
        return params

    def load(self) -> bool:
        documents = self.services['documents']
        pets = self.services['pets']
        token = self.cancel_token
        params = self._query()

        def fetch():
            return self._gather(
                [
                    lambda: unwrap_list(documents.get_documents(params, cancel_token=token).data),
                    lambda: unwrap_record(documents.get_stats(cancel_token=token).data),
                    lambda: unwrap_list(pets.get_pets(cancel_token=token).data),
                ],
                fallbacks=[[], {}, []],
                label='서류',
            )

        def apply(result):
            items, stats, self.pets = result
            self.stats = stats or {}
            self.store.replace_all(items)

        return self._load(fetch, apply, label='서류')

    def upload(self, form: Dict[str, Any], file: Any) -> Optional[Dict[str, Any]]:
        if file is None:
            self.error = '请选择要上传的文件'
            self.error_status = 400
            return None
        response = self._mutate(
            lambda: self.services['documents'].upload_document(form, file),
            '上传失败，请重试', '서류 업로드', prefer_server_message=True
        )
        if response is None:
            return None
        self.uploaded = unwrap_record(response.data)
        self.load()
        return self.uploaded

    def update(self, document_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._mutate(
            lambda: self.services['documents'].update_document(document_id, data),
            '保存失败，请重试', '서류 수정'
        )
        if response is None:
            return None
        updated = unwrap_record(response.data) or data
        return self.store.dispatch(PATCHED, document_id, **updated)

    def delete(self, document_id: str) -> bool:
        if self._mutate(lambda: self.services['documents'].delete_document(document_id), '删除失败，请重试', '서류 삭제') is None:
            return False
        self.store.dispatch(REMOVED, document_id)
        return True

    def to_view(self):
        documents = self.store.all()
        return {
            "loading": self.loading,
            "type": self.doc_type,
            "types": [ALL_TYPES] + values(DocumentType),
            "petId": self.pet_id,
            "stats": self.stats,
            "pets": PetSchema(many=True, only=('id', 'name', 'species')).dump(self.pets),
            "documents": DocumentSchema(many=True).dump(documents),
            "message": '证件上传成功！' if self.uploaded else None,
            "empty": self.empty_view(documents),
            "error": self.error,
        }
