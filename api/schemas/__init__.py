"""
Pydantic schemas for API requests.

Organized by feature/domain:
- plans: Plan and customer-state bodies
- coach: Context, summary, nutrition, meal photo and speech bodies
- accounts: Register/login bodies
"""

from api.schemas.accounts import CredentialsRequest
from api.schemas.coach import (
    DailySummaryRequest,
    MealPhotoRequest,
    NutritionRequest,
    SpeechRequest,
    UserContextRequest,
)
from api.schemas.plans import CustomerRequest, GetDailyLogsRequest, SavePlanRequest

__all__ = [
    "CredentialsRequest",
    "CustomerRequest",
    "DailySummaryRequest",
    "GetDailyLogsRequest",
    "MealPhotoRequest",
    "NutritionRequest",
    "SavePlanRequest",
    "SpeechRequest",
    "UserContextRequest",
]
