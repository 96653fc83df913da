# petplanet/utils/user_utils.py
from typing import Any, Dict, Optional


def get_user_id(user: Optional[Dict[str, Any]]) -> Optional[Any]:
    """사용자 레코드의 id. `_id`가 있으면 우선합니다."""
    if not user:
        return None
    return user.get('_id') or user.get('id') or None


def _owner_id(owner: Any) -> Optional[Any]:
    if isinstance(owner, dict):
        return owner.get('_id') or owner.get('id')
    return owner


def is_owner(user: Optional[Dict[str, Any]], resource: Optional[Dict[str, Any]],
             owner_field: str = 'author') -> bool:
    """
    user가 resource의 소유자인지 확인합니다.
    owner_field 값은 사용자 객체({_id|id})이거나 id 자체일 수 있으며, 문자열로 비교합니다.
    """
    if not user or not resource:
        return False

    user_id = get_user_id(user)
    owner_id = _owner_id(resource.get(owner_field))

    if not user_id or not owner_id:
        return False
    return str(user_id) == str(owner_id)


def is_following(viewer: Optional[Dict[str, Any]], profile: Optional[Dict[str, Any]]) -> bool:
    """
    viewer가 profile 사용자를 팔로우 중인지 확인합니다.
    isFollowing 값이 있으면 그대로 쓰고, 없으면 followers 배열(id 또는 {_id})에서 viewer를 찾습니다.
    """
    if not viewer or not profile:
        return False
    if profile.get('isFollowing') is not None:
        return bool(profile['isFollowing'])
    viewer_id = get_user_id(viewer)
    if not viewer_id:
        return False
    return any(str(_owner_id(f)) == str(viewer_id) for f in profile.get('followers') or [])
