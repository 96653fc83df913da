# petplanet/services/health_advisor.py
"""
반려동물 건강 분석/급식 추천/품종 인식/아바타 생성을 담당하는 어드바이저.

기본 구현(MockHealthAdvisor)은 외부 호출 없이 정해진 문구와 계산식으로 응답하며,
OPENAI_API_KEY가 설정된 경우 OpenAIHealthAdvisor가 실제 모델을 호출합니다.
호출하는 쪽은 HealthAdvisor 인터페이스만 알면 됩니다.
"""
import json
import logging
import math
import time
import zlib
from typing import Any, Dict, List, Optional

from flask import Flask
from openai import OpenAI

logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS = {
    'high': 1.4,
    'medium': 1.2,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.0
CALORIES_PER_KG = 30
# 아침/점심/저녁 칼로리 배분 비율
MEAL_SPLIT = (('breakfast', 0.3), ('lunch', 0.3), ('dinner', 0.4))
MEAL_FOODS = {
    'breakfast': ['优质狗粮', '鸡胸肉', '南瓜泥'],
    'lunch': ['狗粮', '胡萝卜', '鸡蛋'],
    'dinner': ['狗粮', '牛肉', '西兰花', '糙米'],
}
LOW_WATER_THRESHOLD_ML = 400


def _ok(data: Dict[str, Any]) -> Dict[str, Any]:
    return {"success": True, "data": data}


def _fail(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


def round_half_up(value: float) -> int:
    """반올림. .5는 항상 올립니다(round()는 짝수 쪽으로 보냄)."""
    return int(math.floor(value + 0.5))


def calculate_daily_calories(weight: float, activity_level: Optional[str]) -> int:
    """일일 권장 칼로리 = 체중(kg) x 30 x 활동량 계수(high 1.4 / medium 1.2 / 그 외 1.0)."""
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)
    return round_half_up(weight * CALORIES_PER_KG * multiplier)


def build_meal_plan(daily_calories: int) -> Dict[str, Dict[str, Any]]:
    """끼니별 급여량(g). 칼로리 배분 비율을 적용한 뒤 4로 나눕니다."""
    return {
        meal: {
            "amount": f"{round_half_up(daily_calories * ratio / 4)}g",
            "foods": list(MEAL_FOODS[meal]),
        }
        for meal, ratio in MEAL_SPLIT
    }


class HealthAdvisor:
    """어드바이저 인터페이스. 모든 메서드는 {success, data|message} 딕셔너리를 반환합니다."""

    def analyze_health(self, pet_id: str, pet: Optional[Dict[str, Any]],
                       health_data: Optional[Dict[str, Any]],
                       historical_data: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
        raise NotImplementedError

    def feeding_recommendation(self, pet_data: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def analyze_image(self, image: Any, analysis_type: str = 'breed') -> Dict[str, Any]:
        raise NotImplementedError

    def generate_avatar(self, pet_data: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def check_avatar_status(self, task_id: str) -> Dict[str, Any]:
        raise NotImplementedError


class MockHealthAdvisor(HealthAdvisor):
    """
    네트워크 호출 없이 결정적인 응답을 돌려주는 기본 구현.
    실제 서비스처럼 보이도록 delay초 만큼 기다린 뒤 응답합니다.
    """

    def __init__(self, delay: float = 0.0):
        self.delay = delay

    def _wait(self, factor: float = 1.0):
        if self.delay > 0:
            time.sleep(self.delay * factor)

    @staticmethod
    def health_score(pet_id: str) -> int:
        """pet_id로부터 정해지는 85~95 사이 점수."""
        return 85 + zlib.crc32(str(pet_id).encode('utf-8')) % 11

    def build_health_insights(self, pet_id: str, pet: Optional[Dict[str, Any]],
                              health_data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        pet_name = (pet or {}).get('name') or '您的宠物'
        water_intake = (health_data or {}).get('waterIntake')

        alerts = []
        if water_intake is not None and water_intake < LOW_WATER_THRESHOLD_ML:
            alerts.append({
                "level": "warning",
                "title": "饮水量偏低",
                "description": f"当前日均饮水量为{water_intake}ml，低于推荐值20%。长期饮水不足可能导致泌尿系统问题。",
                "suggestions": [
                    "在多个位置放置水碗",
                    "使用流动水饮水器",
                    "在食物中增加水分",
                    "定时提醒宠物饮水",
                ],
            })

        return {
            "insights": {
                "overall": f"{pet_name}整体健康状况良好，各项指标稳定。建议继续保持当前的饮食和运动习惯。",
                "trends": [
                    {"metric": "体重", "trend": "stable", "prediction": "体重保持稳定，预计下周变化不超过±0.2kg"},
                    {"metric": "饮水量", "trend": "down", "prediction": "饮水量略有下降，建议增加引导饮水"},
                    {"metric": "活动量", "trend": "up", "prediction": "活动量呈上升趋势，健康指标良好"},
                ],
                "alerts": alerts,
                "recommendations": [
                    "每日保持30分钟以上的户外活动",
                    "定期检查口腔卫生，预防牙周病",
                    "根据季节调整饮食量，冬季可适当增加10-15%",
                    "每月进行一次体重监测，及时发现异常",
                ],
            },
            "healthScore": self.health_score(pet_id),
        }

    def build_feeding_plan(self, pet_data: Dict[str, Any]) -> Dict[str, Any]:
        weight = float(pet_data.get('weight') or 0)
        daily_calories = calculate_daily_calories(weight, pet_data.get('activityLevel'))
        warnings = []
        if pet_data.get('healthIssues'):
            warnings.append('注意：该宠物有特殊健康问题，建议咨询兽医后再调整饮食')
        return {
            "dailyCalories": daily_calories,
            "mealPlan": build_meal_plan(daily_calories),
            "supplements": ['复合维生素', 'Omega-3脂肪酸', '益生菌'],
            "warnings": warnings,
        }

    def analyze_health(self, pet_id, pet, health_data, historical_data=None):
        self._wait(1.0)
        return _ok(self.build_health_insights(pet_id, pet, health_data))

    def feeding_recommendation(self, pet_data):
        self._wait(0.8)
        return _ok(self.build_feeding_plan(pet_data))

    def analyze_image(self, image, analysis_type='breed'):
        self._wait(1.5)
        return _ok({
            "predictions": [
                {"label": "金毛寻回犬", "confidence": 0.92, "description": "友善、聪明、忠诚的大型犬"},
                {"label": "拉布拉多", "confidence": 0.06, "description": "温顺、活泼的伴侣犬"},
                {"label": "黄色拉布拉多", "confidence": 0.02, "description": "性格温和的工作犬"},
            ],
            "suggestions": [
                "该品种需要大量运动，建议每天至少1-2小时户外活动",
                "金毛易患髋关节发育不良，建议定期检查",
                "注意控制饮食，避免肥胖",
            ],
        })

    def generate_avatar(self, pet_data):
        self._wait(2.0)
        pet_type = pet_data.get('petType')
        breed = pet_data.get('breed')
        style = pet_data.get('style')
        return _ok({
            "imageUrl": f"/api/placeholder/avatar/{pet_type}_{breed}_{style}.png",
            "taskId": f"avatar_{int(time.time() * 1000)}",
            "status": "completed",
            "message": "头像生成成功！",
        })

    def check_avatar_status(self, task_id):
        return _ok({
            "status": "completed",
            "imageUrl": f"/api/placeholder/avatar/{task_id}.png",
        })


class OpenAIHealthAdvisor(HealthAdvisor):
    """
    OpenAI API를 사용하는 어드바이저.
    응답을 받지 못하면 MockHealthAdvisor의 결과로 대체합니다.
    급여량 계산은 항상 결정적인 계산식을 따릅니다.
    """

    def __init__(self, client: Optional[OpenAI] = None, model: str = 'gpt-4o-mini',
                 fallback: Optional[MockHealthAdvisor] = None):
        self.client = client
        self.model = model
        self.fallback = fallback or MockHealthAdvisor()

    def init_app(self, app: Flask):
        """Flask 앱 초기화 과정에서 호출되어 OpenAI 클라이언트를 설정합니다."""
        api_key = app.config.get('OPENAI_API_KEY')
        if not api_key:
            raise ValueError("OPENAI_API_KEY 설정이 .env 파일에 필요합니다.")
        self.client = OpenAI(api_key=api_key)
        self.model = app.config.get('OPENAI_MODEL', self.model)
        logger.info("OpenAIHealthAdvisor: OpenAI API 서비스가 성공적으로 초기화되었습니다.")

    def _ask_json(self, prompt: str) -> Dict[str, Any]:
        if not self.client:
            raise RuntimeError("OpenAIHealthAdvisor가 초기화되지 않았습니다. init_app을 먼저 호출해주세요.")
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": "你是一名宠物健康顾问。只用JSON回答，使用简体中文。"},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
            max_tokens=800,
        )
        return json.loads(response.choices[0].message.content)

    def analyze_health(self, pet_id, pet, health_data, historical_data=None):
        baseline = self.fallback.build_health_insights(pet_id, pet, health_data)
        prompt = (
            "根据以下宠物信息和健康数据，返回JSON对象，字段为 overall(字符串)、"
            "trends(数组，元素含 metric/trend/prediction)、recommendations(字符串数组)。\n"
            f"宠物: {json.dumps(pet or {}, ensure_ascii=False, default=str)}\n"
            f"当前数据: {json.dumps(health_data or {}, ensure_ascii=False, default=str)}\n"
            f"历史记录条数: {len(historical_data or [])}"
        )
        try:
            answer = self._ask_json(prompt)
        except Exception as e:
            logger.error(f"OpenAI 건강 분석 실패, 기본 응답으로 대체: {e}", exc_info=True)
            return _ok(baseline)

        insights = baseline['insights']
        for key in ('overall', 'trends', 'recommendations'):
            if answer.get(key):
                insights[key] = answer[key]
        return _ok(baseline)

    def feeding_recommendation(self, pet_data):
        return _ok(self.fallback.build_feeding_plan(pet_data))

    def analyze_image(self, image, analysis_type='breed'):
        # 업로드 이미지 분석은 아직 기본 응답을 사용합니다.
        return self.fallback.analyze_image(image, analysis_type)

    def generate_avatar(self, pet_data):
        if not self.client:
            return self.fallback.generate_avatar(pet_data)
        prompt = (
            f"A cute {pet_data.get('style') or 'cartoon'} style avatar of a "
            f"{pet_data.get('breed') or ''} {pet_data.get('petType') or 'pet'}, "
            "bright cheerful colors, centered portrait, plain background"
        )
        try:
            response = self.client.images.generate(
                model="dall-e-3",
                prompt=prompt,
                size="1024x1024",
                quality="standard",
                n=1
            )
        except Exception as e:
            logger.error(f"OpenAI 아바타 생성 실패: {e}", exc_info=True)
            return _fail('头像生成失败，请稍后再试')
        return _ok({
            "imageUrl": response.data[0].url,
            "taskId": f"avatar_{int(time.time() * 1000)}",
            "status": "completed",
            "message": "头像生成成功！",
        })

    def check_avatar_status(self, task_id):
        return self.fallback.check_avatar_status(task_id)
