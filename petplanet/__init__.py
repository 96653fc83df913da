# petplanet/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, g, has_request_context, jsonify, redirect, url_for
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정
from petplanet.core.config import config_by_name

# - 공용 클라이언트/세션
from petplanet.core.errors import ApiError, UnauthorizedError
from petplanet.core.http import ApiClient
from petplanet.core.live_search import LiveSearch
from petplanet.core.session import AuthSession
from petplanet.core.storage import TOKEN_KEY, FlaskSessionStorage

# - 페이지 블루프린트
from petplanet.api.auth.routes import auth_bp
from petplanet.api.posts.routes import posts_bp
from petplanet.api.users.routes import users_bp
from petplanet.api.pets.routes import pets_bp
from petplanet.api.health.routes import health_bp
from petplanet.api.products.routes import products_bp
from petplanet.api.pet_services.routes import pet_services_bp
from petplanet.api.bookings.routes import bookings_bp
from petplanet.api.orders.routes import orders_bp
from petplanet.api.bookmarks.routes import bookmarks_bp
from petplanet.api.history.routes import history_bp
from petplanet.api.search.routes import search_bp
from petplanet.api.settings.routes import settings_bp
from petplanet.api.feedback.routes import feedback_bp
from petplanet.api.points.routes import points_bp
from petplanet.api.rankings.routes import rankings_bp
from petplanet.api.reminders.routes import reminders_bp
from petplanet.api.documents.routes import documents_bp
from petplanet.api.admin.routes import admin_bp

# - 리소스 서비스 모듈
from petplanet.api.auth.services import AuthService
from petplanet.api.posts.services import PostService
from petplanet.api.users.services import UserService
from petplanet.api.pets.services import PetRatingService, PetService
from petplanet.api.health.services import HealthService
from petplanet.api.products.services import ProductService
from petplanet.api.pet_services.services import PetCareServiceService
from petplanet.api.orders.services import OrderService
from petplanet.api.bookings.services import BookingService
from petplanet.api.bookmarks.services import BookmarkService
from petplanet.api.history.services import HistoryService
from petplanet.api.feedback.services import FeedbackService
from petplanet.api.points.services import PointsService
from petplanet.api.rankings.services import RankingService
from petplanet.api.reminders.services import ReminderService
from petplanet.api.settings.services import SettingsService
from petplanet.api.documents.services import DocumentService
from petplanet.api.admin.services import StatsService

# - AI 어드바이저
from petplanet.services.health_advisor import MockHealthAdvisor, OpenAIHealthAdvisor


def _current_token():
    """요청 처리 중에만 세션 쿠키의 토큰을 읽습니다."""
    if not has_request_context():
        return None
    return FlaskSessionStorage().get(TOKEN_KEY)


def _drop_session():
    """401 응답을 받으면 저장된 토큰과 현재 사용자를 비웁니다."""
    if not has_request_context():
        return
    auth = g.get('auth')
    if auth is not None:
        auth.invalidate()
    else:
        FlaskSessionStorage().remove(TOKEN_KEY)


def create_app(config_name=None, http=None, advisor=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param http: 백엔드 호출에 사용할 requests.Session (테스트에서는 가짜 전송 계층)
    :param advisor: HealthAdvisor 구현. 없으면 설정에 따라 Mock 또는 OpenAI를 사용합니다.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 공용 HTTP 클라이언트
    # =====================================================================================
    client = ApiClient(
        base_url=app.config['VITE_API_URL'],
        token_provider=_current_token,
        timeout=app.config['API_TIMEOUT'],
        on_unauthorized=_drop_session,
        http=http
    )
    logging.info(f"API client initialized (base_url: {client.base_url})")

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    # 5-1. REST 리소스 서비스
    app.services['auth'] = AuthService(client)
    app.services['posts'] = PostService(client)
    app.services['users'] = UserService(client)
    app.services['pets'] = PetService(client)
    app.services['ratings'] = PetRatingService(client)
    app.services['health'] = HealthService(client)
    app.services['products'] = ProductService(client)
    app.services['pet_services'] = PetCareServiceService(client)
    app.services['orders'] = OrderService(client)
    app.services['bookings'] = BookingService(client)
    app.services['bookmarks'] = BookmarkService(client)
    app.services['history'] = HistoryService(client)
    app.services['feedback'] = FeedbackService(client)
    app.services['points'] = PointsService(client)
    app.services['rankings'] = RankingService(client)
    app.services['reminders'] = ReminderService(client)
    app.services['settings'] = SettingsService(client)
    app.services['documents'] = DocumentService(client)
    app.services['stats'] = StatsService(client)

    # 5-2. AI 어드바이저 (키가 없으면 Mock)
    if advisor is None:
        mock_advisor = MockHealthAdvisor(delay=app.config['ADVISOR_DELAY_SECONDS'])
        if app.config.get('OPENAI_API_KEY'):
            try:
                advisor = OpenAIHealthAdvisor(fallback=mock_advisor)
                advisor.init_app(app)
            except Exception as e:
                logging.error(f"Failed to initialize OpenAI advisor: {e}")
                raise
        else:
            advisor = mock_advisor
    app.services['advisor'] = advisor
    logging.info(f"Health advisor initialized: {type(advisor).__name__}")

    # 5-3. 요청마다 만드는 로그인 세션
    app.session_factory = lambda: AuthSession(app.services['auth'], FlaskSessionStorage())

    # 5-4. 상품/서비스 검색창 실시간 입력 (세션별로 디바운스)
    app.live_search = LiveSearch(timeout=app.config['SEARCH_DEBOUNCE_SECONDS'] + app.config['API_TIMEOUT'])

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(auth_bp)
    app.register_blueprint(posts_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(pets_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(pet_services_bp)
    app.register_blueprint(bookings_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(bookmarks_bp)
    app.register_blueprint(history_bp)
    app.register_blueprint(search_bp)
    app.register_blueprint(settings_bp)
    app.register_blueprint(feedback_bp)
    app.register_blueprint(points_bp)
    app.register_blueprint(rankings_bp)
    app.register_blueprint(reminders_bp)
    app.register_blueprint(documents_bp)
    app.register_blueprint(admin_bp)

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(UnauthorizedError)
    def handle_unauthorized(err):
        # 토큰 만료: 세션을 비우고 로그인 페이지로 보냅니다.
        logging.info(f"Forced logout after 401: {err.message}")
        _drop_session()
        return redirect(url_for('auth_bp.login_page'))

    @app.errorhandler(ApiError)
    def handle_api_error(err):
        response = {"error_code": "API_ERROR", "message": err.message}
        return jsonify(response), err.status

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        if isinstance(err, HTTPException):
            return err
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "服务器内部错误，请稍后再试"}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
