# petplanet/core/tokens.py
"""
백엔드가 발급한 JWT를 서명 검증 없이 읽는 도구.

서명 검증은 백엔드의 몫이며, 프론트엔드는 만료 여부만 확인해
이미 만료된 토큰으로 /auth/me를 호출하는 일을 피합니다.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import jwt

logger = logging.getLogger(__name__)


def read_claims(token: str) -> Optional[Dict[str, Any]]:
    """토큰의 payload를 반환합니다. JWT 형식이 아니면 None."""
    try:
        return jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
    except jwt.PyJWTError as e:
        logger.debug(f"JWT 해독 불가: {e}")
        return None


def is_token_expired(token: str, now: Optional[datetime] = None) -> bool:
    """
    exp 클레임이 현재 시각 이전이면 True.
    exp가 없거나 JWT가 아닌 불투명 토큰이면 판단할 수 없으므로 False를 반환합니다.
    """
    claims = read_claims(token)
    if not claims or 'exp' not in claims:
        return False
    now = now or datetime.now(timezone.utc)
    try:
        return float(claims['exp']) <= now.timestamp()
    except (TypeError, ValueError):
        return False
