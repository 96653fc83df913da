# petplanet/models/enums.py
"""
백엔드 모델이 허용하는 선택값 모음.
폼 스키마의 OneOf 검증과 화면의 필터 목록이 같은 값을 쓰도록 한 곳에 둡니다.
"""
from enum import Enum
from typing import List, Type


def values(enum_cls: Type[Enum]) -> List[str]:
    return [e.value for e in enum_cls]


class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"


class PetSpecies(Enum):
    CAT = "cat"
    DOG = "dog"
    RABBIT = "rabbit"
    HAMSTER = "hamster"
    BIRD = "bird"
    FISH = "fish"
    OTHER = "other"


class PetGender(Enum):
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


class ActivityLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PostCategory(Enum):
    DAILY = "daily"
    MEDICAL = "medical"
    TRAINING = "training"
    FOOD = "food"
    TRAVEL = "travel"
    FUNNY = "funny"
    OTHER = "other"


class MediaType(Enum):
    IMAGE = "image"
    VIDEO = "video"
    TEXT = "text"


class ProductCategory(Enum):
    FOOD = "food"
    SUPPLIES = "supplies"
    HEALTH = "health"
    GROOMING = "grooming"
    TOYS = "toys"
    CLOTHING = "clothing"
    OTHER = "other"


class ServiceCategory(Enum):
    HOSPITAL = "hospital"
    GROOMING = "grooming"
    BOARDING = "boarding"
    FEEDING = "feeding"
    TRAINING = "training"
    TRANSPORT = "transport"
    FUNERAL = "funeral"
    PHOTOGRAPHY = "photography"
    DAYCARE = "daycare"


class BookingStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentMethod(Enum):
    ALIPAY = "alipay"
    WECHAT = "wechat"
    CARD = "card"
    COD = "cod"


class FeedbackType(Enum):
    BUG = "bug"
    SUGGESTION = "suggestion"
    QUESTION = "question"
    OTHER = "other"


class FeedbackStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    RESOLVED = "resolved"
    CLOSED = "closed"


class ReminderType(Enum):
    VACCINE = "vaccine"
    DEWORMING = "deworming"
    GROOMING = "grooming"
    CHECKUP = "checkup"
    FEEDING = "feeding"
    TRAINING = "training"
    SEASONAL = "seasonal"


class ReminderRepeat(Enum):
    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class ReminderStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class DocumentType(Enum):
    VACCINE = "vaccine"
    QUARANTINE = "quarantine"
    CHIP = "chip"
    INSURANCE = "insurance"
    LICENSE = "license"


class RankingCategory(Enum):
    CUTE = "cute"
    WELL_BEHAVED = "wellBehaved"
    ACTIVE = "active"
    SMART = "smart"


class HistoryItemType(Enum):
    POST = "post"
    PET = "pet"
    PRODUCT = "product"
    SERVICE = "service"


class Appetite(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class StoolConsistency(Enum):
    NORMAL = "normal"
    SOFT = "soft"
    HARD = "hard"
    DIARRHEA = "diarrhea"


class EnergyLevel(Enum):
    VERY_LOW = "very-low"
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    VERY_HIGH = "very-high"


class Mood(Enum):
    HAPPY = "happy"
    NORMAL = "normal"
    ANXIOUS = "anxious"
    SAD = "sad"
    IRRITABLE = "irritable"


class Theme(Enum):
    DEFAULT = "default"
    CUTE = "cute"
    SIMPLE = "simple"
    DARK = "dark"


class Visibility(Enum):
    PUBLIC = "public"
    FRIENDS = "friends"
    PRIVATE = "private"


class ProductSort(Enum):
    NEWEST = "newest"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    SALES = "sales"
    RATING = "rating"


class ServiceSort(Enum):
    NEWEST = "newest"
    RATING = "rating"
    REVIEWS = "reviews"
