# petplanet/api/health/test_health_pages.py
from conftest import FakeResponse

from petplanet.api.health.pages import AddHealthLogPage, AdvisorPage, HealthCenterPage, HealthHistoryPage, advisor_metrics
from petplanet.services.health_advisor import MockHealthAdvisor

TODAY_LOG = {'_id': 'h1', 'weight': 5.2, 'diet': {'foodAmount': 80, 'waterAmount': 250}, 'mood': 'happy'}


def _logs_by_params(call):
    # 오늘 기록(startDate/endDate)과 최근 기록(limit)을 같은 경로로 조회합니다.
    if 'limit' in (call['params'] or {}):
        return FakeResponse(200, {'data': [TODAY_LOG, {'_id': 'h0'}]})
    return FakeResponse(200, {'data': [TODAY_LOG]})


def test_advisor_metrics():
    assert advisor_metrics(TODAY_LOG) == {'weight': 5.2, 'foodIntake': 80, 'waterIntake': 250, 'mood': 'happy'}
    assert advisor_metrics(None) == {}


def test_health_center_runs_advisor_on_today_log(services, fake_http):
    fake_http.on('GET', '/pets/pet1', {'data': {'_id': 'pet1', 'name': '咪咪'}})
    fake_http.on('GET', '/health/pet1', handler=_logs_by_params)
    fake_http.on('GET', '/health/pet1/analytics', {'data': {'days': 30}})
    page = HealthCenterPage(services, 'pet1')

    page.load()

    view = page.to_view()
    assert view['todayLog']['id'] == 'h1'
    assert view['empty'] is None
    insights = view['insights']
    assert insights['healthScore'] == MockHealthAdvisor.health_score('pet1')
    assert insights['insights']['overall'].startswith('咪咪')
    assert insights['insights']['alerts'][0]['title'] == '饮水量偏低'


def test_health_center_without_today_log(services, fake_http):
    fake_http.on('GET', '/health/pet1', [])
    page = HealthCenterPage(services, 'pet1')

    page.load()

    view = page.to_view()
    assert view['todayLog'] is None
    assert view['empty']['action_href'] == '/pets/pet1/health/add'
    assert view['insights']['insights']['alerts'] == []


def test_add_health_log_defaults_date(services, fake_http):
    fake_http.on('POST', '/health/pet1', {'data': {'_id': 'h2'}})
    page = AddHealthLogPage(services, 'pet1')

    page.submit({'weight': 5.0})

    sent = fake_http.find('POST', '/health/pet1')[0]['json']
    assert sent['weight'] == 5.0
    assert len(sent['date']) == 10
    assert page.to_view()['redirect'] == '/pets/pet1/health'


def test_history_days_choice(services, fake_http):
    fake_http.on('GET', '/health/pet1', [])
    fake_http.on('GET', '/health/pet1/analytics', {})
    page = HealthHistoryPage(services, 'pet1', days=45)

    page.load()

    assert page.days == 30
    assert set(fake_http.find('GET', '/health/pet1')[0]['params']) == {'startDate', 'endDate'}
    assert fake_http.find('GET', '/health/pet1/analytics')[0]['params'] == {'days': 30}
    assert page.to_view()['empty']['action_href'] == '/pets/pet1/health/add'


def test_advisor_page_feeding():
    page = AdvisorPage(MockHealthAdvisor())
    result = page.feeding({'weight': 10, 'activityLevel': 'high'})
    assert result['dailyCalories'] == 420
    assert page.to_view()['error'] is None
