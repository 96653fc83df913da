# petplanet/services/test_health_advisor.py
from types import SimpleNamespace

import pytest

from petplanet.services.health_advisor import (
    MockHealthAdvisor, OpenAIHealthAdvisor, build_meal_plan, calculate_daily_calories, round_half_up
)


@pytest.mark.parametrize('weight, level, expected', [
    (10, 'high', 420),
    (10, 'medium', 360),
    (10, 'low', 300),
    (10, None, 300),
    (20, 'medium', 720),
    (0.75, 'low', 23),
])
def test_daily_calories(weight, level, expected):
    assert calculate_daily_calories(weight, level) == expected


def test_meal_plan_split():
    plan = build_meal_plan(720)
    assert plan['breakfast']['amount'] == '54g'
    assert plan['lunch']['amount'] == '54g'
    assert plan['dinner']['amount'] == '72g'
    assert plan['breakfast']['foods']


@pytest.mark.parametrize('value, expected', [(4.5, 5), (22.5, 23), (0.5, 1), (4.49, 4), (6.0, 6)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_meal_plan_rounds_halves_up():
    result = MockHealthAdvisor().feeding_recommendation({'weight': 2, 'activityLevel': 'low'})
    plan = result['data']['mealPlan']
    assert result['data']['dailyCalories'] == 60
    assert plan['breakfast']['amount'] == '5g'
    assert plan['lunch']['amount'] == '5g'
    assert plan['dinner']['amount'] == '6g'


def test_feeding_recommendation_warns_on_health_issues():
    advisor = MockHealthAdvisor()
    result = advisor.feeding_recommendation({'weight': 10, 'activityLevel': 'high', 'healthIssues': ['肥胖']})
    assert result['success'] is True
    assert result['data']['dailyCalories'] == 420
    assert result['data']['mealPlan']['dinner']['amount'] == '42g'
    assert len(result['data']['warnings']) == 1

    healthy = advisor.feeding_recommendation({'weight': 10, 'activityLevel': 'high'})
    assert healthy['data']['warnings'] == []


def test_health_analysis_low_water_alert():
    advisor = MockHealthAdvisor()
    low = advisor.analyze_health('p1', {'name': '豆豆'}, {'waterIntake': 300})
    assert low['success'] is True
    alerts = low['data']['insights']['alerts']
    assert len(alerts) == 1 and '300ml' in alerts[0]['description']
    assert '豆豆' in low['data']['insights']['overall']

    ok = advisor.analyze_health('p1', None, {'waterIntake': 400})
    assert ok['data']['insights']['alerts'] == []


def test_health_score_is_deterministic():
    advisor = MockHealthAdvisor()
    first = advisor.analyze_health('pet-42', None, {})['data']['healthScore']
    second = advisor.analyze_health('pet-42', None, {})['data']['healthScore']
    assert first == second
    assert 85 <= first <= 95


def test_avatar_and_image():
    advisor = MockHealthAdvisor()
    avatar = advisor.generate_avatar({'petType': 'dog', 'breed': 'corgi', 'style': 'cartoon'})
    assert avatar['data']['imageUrl'] == '/api/placeholder/avatar/dog_corgi_cartoon.png'
    assert avatar['data']['taskId'].startswith('avatar_')

    status = advisor.check_avatar_status('avatar_1')
    assert status['data']['status'] == 'completed'

    image = advisor.analyze_image(b'fake-bytes')
    assert image['data']['predictions'][0]['confidence'] == 0.92


class FailingCompletions:
    def create(self, **kwargs):
        raise RuntimeError('quota exceeded')


class FailingImages:
    def generate(self, **kwargs):
        raise RuntimeError('quota exceeded')


def test_openai_advisor_falls_back_to_mock():
    client = SimpleNamespace(chat=SimpleNamespace(completions=FailingCompletions()), images=FailingImages())
    advisor = OpenAIHealthAdvisor(client=client)

    result = advisor.analyze_health('p1', {'name': '咪咪'}, {'waterIntake': 100})
    assert result['success'] is True
    assert result['data']['insights']['alerts']

    feeding = advisor.feeding_recommendation({'weight': 10, 'activityLevel': 'high'})
    assert feeding['data']['dailyCalories'] == 420

    avatar = advisor.generate_avatar({'petType': 'cat'})
    assert avatar['success'] is False


def test_openai_advisor_uses_model_answer():
    answer = '{"overall": "状态很好", "recommendations": ["多喝水"]}'
    message = SimpleNamespace(content=answer)

    class Completions:
        def create(self, **kwargs):
            return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    advisor = OpenAIHealthAdvisor(client=SimpleNamespace(chat=SimpleNamespace(completions=Completions())))
    result = advisor.analyze_health('p1', None, {})
    assert result['data']['insights']['overall'] == '状态很好'
    assert result['data']['insights']['recommendations'] == ['多喝水']
