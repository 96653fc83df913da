# petplanet/core/config.py

import os


DEFAULT_API_URL = 'http://localhost:5000/api'


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # Flask 세션 쿠키 서명 키. 브라우저에 저장되는 토큰이 이 쿠키에 담깁니다.
    SECRET_KEY = os.getenv('SECRET_KEY', 'petplanet-dev-secret')
    # 백엔드 REST API 주소. '/api'를 뗀 부분이 이미지 등 정적 자원의 origin이 됩니다.
    VITE_API_URL = os.getenv('VITE_API_URL') or DEFAULT_API_URL
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', 10))
    # 상품/서비스 검색창 입력 후 재조회까지 기다리는 시간(초)
    SEARCH_DEBOUNCE_SECONDS = float(os.getenv('SEARCH_DEBOUNCE_SECONDS', 0.5))
    # Mock AI 응답에 주는 인위적인 지연(초)
    ADVISOR_DELAY_SECONDS = float(os.getenv('ADVISOR_DELAY_SECONDS', 1.0))
    OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
    OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')
    JSON_SORT_KEYS = False


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    VITE_API_URL = DEFAULT_API_URL
    SEARCH_DEBOUNCE_SECONDS = 0.0
    ADVISOR_DELAY_SECONDS = 0.0
    OPENAI_API_KEY = None


class ProductionConfig(Config):
    DEBUG = False


# app 팩토리에서 FLASK_ENV 값에 따라 설정 클래스를 고르는 데 사용합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
