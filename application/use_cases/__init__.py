"""
Application Use Cases for the PJiFitness Coach API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain functions and ports
- Dependencies are injected via constructors for testability
- Failures are raised as application.exceptions.ServiceError subclasses

Usage:
    from application.use_cases import CreateWorkoutPlanUseCase, SavePlanUseCase

    plan_use_case = CreateWorkoutPlanUseCase(model=gateway)
    result = await plan_use_case.execute({"days_per_week": 4, "equipment": ["dumbbells"]})

    save_use_case = SavePlanUseCase(store=customer_store)
    await save_use_case.execute(customer_id="123", plan=result.plan.model_dump())
"""

from application.use_cases.accounts import AccountResult, LoginUserUseCase, RegisterUserUseCase
from application.use_cases.coach_chat import CoachChatResult, CoachChatUseCase
from application.use_cases.create_workout_plan import (
    CreateWorkoutPlanResult,
    CreateWorkoutPlanUseCase,
)
from application.use_cases.daily_logs import (
    GetDailyLogsUseCase,
    SaveDailyLogResult,
    SaveDailyLogUseCase,
)
from application.use_cases.daily_summary import DailySummaryUseCase
from application.use_cases.estimate_nutrition import EstimateNutritionUseCase
from application.use_cases.generate_next_workout import (
    GenerateNextWorkoutResult,
    GenerateNextWorkoutUseCase,
)
from application.use_cases.generate_speech import GenerateSpeechUseCase
from application.use_cases.meal_photo import MealPhotoEstimateUseCase
from application.use_cases.plan_state import GetPlanUseCase, GetStateUseCase, SavePlanUseCase
from application.use_cases.save_onboarding import SaveOnboardingUseCase

__all__ = [
    # Plans
    "CreateWorkoutPlanUseCase",
    "CreateWorkoutPlanResult",
    "GenerateNextWorkoutUseCase",
    "GenerateNextWorkoutResult",
    "GetPlanUseCase",
    "SavePlanUseCase",
    "GetStateUseCase",
    # Daily logs
    "SaveDailyLogUseCase",
    "SaveDailyLogResult",
    "GetDailyLogsUseCase",
    "SaveOnboardingUseCase",
    # Coaching
    "CoachChatUseCase",
    "CoachChatResult",
    "DailySummaryUseCase",
    "MealPhotoEstimateUseCase",
    "GenerateSpeechUseCase",
    # Nutrition
    "EstimateNutritionUseCase",
    # Accounts
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "AccountResult",
]
