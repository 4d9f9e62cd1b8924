"""
Router package for the PJiFitness Coach API.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- plans: Starter plan generation and stored plan state
- workouts: Next-workout prescription
- logs: Daily logs and onboarding
- coach: Chat, daily context/summary, meal photo and speech
- nutrition: Meal text nutrition estimates
- account: Sheet-backed register/login
"""

from api.routers.account import router as account_router
from api.routers.coach import router as coach_router
from api.routers.health import router as health_router
from api.routers.logs import router as logs_router
from api.routers.nutrition import router as nutrition_router
from api.routers.plans import router as plans_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "account_router",
    "coach_router",
    "health_router",
    "logs_router",
    "nutrition_router",
    "plans_router",
    "workouts_router",
]
