# petplanet/api/base.py
"""
리소스 서비스 모듈의 공통 기반.

각 서비스는 REST 리소스 하나를 맡아 연산마다 함수 하나를 제공하며,
경로 조립과 파라미터 전달 외의 로직은 두지 않습니다.
에러는 잡지 않고 호출한 쪽(페이지)으로 그대로 전파합니다.
"""
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from petplanet.core.http import ApiClient, ApiResponse


def unwrap_list(data: Any) -> List[Any]:
    """목록 응답을 리스트로 정규화합니다. 배열, {data: [...]}, {data, count} 모두 허용."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        inner = data.get('data')
        if isinstance(inner, list):
            return inner
    return []


def unwrap_record(data: Any) -> Optional[Dict[str, Any]]:
    """단건 응답을 레코드로 정규화합니다. {data: {...}} 또는 레코드 자체."""
    if isinstance(data, dict):
        inner = data.get('data')
        if isinstance(inner, dict):
            return inner
        if 'success' in data and set(data.keys()) <= {'success', 'message'}:
            return None
        return data
    return None


class BaseResourceService:
    """
    REST 리소스 하나에 대한 기본 CRUD를 제공하는 범용 서비스.
    하위 클래스는 `resource`만 지정하고 리소스 고유의 동작을 추가합니다.
    """
    resource: str = ''

    def __init__(self, client: ApiClient):
        self.client = client

    def _path(self, *segments: Any) -> str:
        """'/resource/seg1/seg2' 경로를 만듭니다. 식별자 형식은 검증하지 않습니다."""
        parts = [self.resource] if self.resource else []
        parts.extend(quote(str(s), safe='') for s in segments)
        return '/' + '/'.join(parts)

    def list(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> ApiResponse:
        return self.client.get(self._path(), params=params or {}, **kwargs)

    def get(self, resource_id: Any, **kwargs) -> ApiResponse:
        return self.client.get(self._path(resource_id), **kwargs)

    def create(self, data: Dict[str, Any], **kwargs) -> ApiResponse:
        return self.client.post(self._path(), json=data, **kwargs)

    def update(self, resource_id: Any, data: Dict[str, Any], **kwargs) -> ApiResponse:
        return self.client.put(self._path(resource_id), json=data, **kwargs)

    def delete(self, resource_id: Any, **kwargs) -> ApiResponse:
        return self.client.delete(self._path(resource_id), **kwargs)
