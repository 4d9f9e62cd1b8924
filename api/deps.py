"""
FastAPI Dependency Providers for the PJiFitness Coach API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings are cached per-process (lru_cache in backend.settings)
- The OpenAI gateway is cached per-process so its HTTP connection pool is reused
- Other adapters are built from settings per request; none connect at construction
- Use-case providers compose adapters

Usage in routers:
    from api.deps import get_save_plan_use_case
    from application.use_cases import SavePlanUseCase

    @router.post("/api/save-plan")
    async def save_plan(use_case: SavePlanUseCase = Depends(get_save_plan_use_case)):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_customer_store] = lambda: FakeCustomerStore()
"""

from functools import lru_cache

from fastapi import Depends

# Protocol types (interfaces)
from application.ports import CustomerStore, FoodLookup, LanguageModel, SheetTable
from application.use_cases import (
    CoachChatUseCase,
    CreateWorkoutPlanUseCase,
    DailySummaryUseCase,
    EstimateNutritionUseCase,
    GenerateNextWorkoutUseCase,
    GenerateSpeechUseCase,
    GetDailyLogsUseCase,
    GetPlanUseCase,
    GetStateUseCase,
    LoginUserUseCase,
    MealPhotoEstimateUseCase,
    RegisterUserUseCase,
    SaveDailyLogUseCase,
    SaveOnboardingUseCase,
    SavePlanUseCase,
)

# Concrete implementations
from backend.services.openai_gateway import OpenAIGateway
from backend.settings import Settings, get_settings as _get_settings
from infrastructure import (
    GoogleSheetTable,
    ShopifyAdminClient,
    ShopifyCustomerStore,
    USDAFoodClient,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Adapter Providers
# =============================================================================


@lru_cache
def _shared_gateway() -> OpenAIGateway:
    return OpenAIGateway(_get_settings())


def get_language_model() -> LanguageModel:
    """
    Get LanguageModel implementation (cached).

    One gateway, and so one AsyncOpenAI connection pool, serves every
    request for the lifetime of the process. The client inside it is created
    on first call, so requests that never reach the model do not need
    OPENAI_API_KEY.
    """
    return _shared_gateway()


def get_customer_store(settings: Settings = Depends(get_settings)) -> CustomerStore:
    """
    Get CustomerStore implementation.

    Returns a ShopifyCustomerStore over an Admin GraphQL client built from
    settings. Missing credentials surface as a 500 on first use.

    Returns:
        CustomerStore: Customer metafield persistence
    """
    client = ShopifyAdminClient(
        store_domain=settings.shopify_store_domain,
        access_token=settings.shopify_admin_api_access_token,
        api_version=settings.shopify_api_version,
        timeout=settings.shopify_timeout_seconds,
    )
    return ShopifyCustomerStore(client)


def get_sheet_table(settings: Settings = Depends(get_settings)) -> SheetTable:
    """Get SheetTable implementation for the coaching spreadsheet."""
    return GoogleSheetTable(
        spreadsheet_id=settings.sheet_id,
        service_account_json=settings.google_service_account_json,
    )


def get_food_lookup(settings: Settings = Depends(get_settings)) -> FoodLookup:
    """Get FoodLookup implementation (disabled when USDA_API_KEY is unset)."""
    return USDAFoodClient(api_key=settings.usda_api_key, timeout=settings.usda_timeout_seconds)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_create_workout_plan_use_case(
    model: LanguageModel = Depends(get_language_model),
) -> CreateWorkoutPlanUseCase:
    return CreateWorkoutPlanUseCase(model=model)


def get_generate_next_workout_use_case(
    model: LanguageModel = Depends(get_language_model),
) -> GenerateNextWorkoutUseCase:
    return GenerateNextWorkoutUseCase(model=model)


def get_get_plan_use_case(store: CustomerStore = Depends(get_customer_store)) -> GetPlanUseCase:
    return GetPlanUseCase(store=store)


def get_save_plan_use_case(store: CustomerStore = Depends(get_customer_store)) -> SavePlanUseCase:
    return SavePlanUseCase(store=store)


def get_state_use_case(store: CustomerStore = Depends(get_customer_store)) -> GetStateUseCase:
    return GetStateUseCase(store=store)


def get_save_daily_log_use_case(
    store: CustomerStore = Depends(get_customer_store),
) -> SaveDailyLogUseCase:
    return SaveDailyLogUseCase(store=store)


def get_daily_logs_use_case(store: CustomerStore = Depends(get_customer_store)) -> GetDailyLogsUseCase:
    return GetDailyLogsUseCase(store=store)


def get_save_onboarding_use_case(
    store: CustomerStore = Depends(get_customer_store),
) -> SaveOnboardingUseCase:
    return SaveOnboardingUseCase(store=store)


def get_coach_chat_use_case(
    model: LanguageModel = Depends(get_language_model),
    daily_logs: SaveDailyLogUseCase = Depends(get_save_daily_log_use_case),
) -> CoachChatUseCase:
    """
    Get CoachChatUseCase.

    Shares the request's customer store with the daily log use case so a
    DAILY_LOG in the reply is saved through the same adapter.
    """
    return CoachChatUseCase(model=model, daily_logs=daily_logs)


def get_daily_summary_use_case(
    sheets: SheetTable = Depends(get_sheet_table),
    model: LanguageModel = Depends(get_language_model),
) -> DailySummaryUseCase:
    return DailySummaryUseCase(sheets=sheets, model=model)


def get_estimate_nutrition_use_case(
    store: CustomerStore = Depends(get_customer_store),
    foods: FoodLookup = Depends(get_food_lookup),
) -> EstimateNutritionUseCase:
    return EstimateNutritionUseCase(store=store, foods=foods)


def get_meal_photo_use_case(
    model: LanguageModel = Depends(get_language_model),
) -> MealPhotoEstimateUseCase:
    return MealPhotoEstimateUseCase(model=model)


def get_generate_speech_use_case(
    model: LanguageModel = Depends(get_language_model),
) -> GenerateSpeechUseCase:
    return GenerateSpeechUseCase(model=model)


def get_register_use_case(sheets: SheetTable = Depends(get_sheet_table)) -> RegisterUserUseCase:
    return RegisterUserUseCase(sheets=sheets)


def get_login_use_case(sheets: SheetTable = Depends(get_sheet_table)) -> LoginUserUseCase:
    return LoginUserUseCase(sheets=sheets)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Adapters
    "get_language_model",
    "get_customer_store",
    "get_sheet_table",
    "get_food_lookup",
    # Use cases
    "get_create_workout_plan_use_case",
    "get_generate_next_workout_use_case",
    "get_get_plan_use_case",
    "get_save_plan_use_case",
    "get_state_use_case",
    "get_save_daily_log_use_case",
    "get_daily_logs_use_case",
    "get_save_onboarding_use_case",
    "get_coach_chat_use_case",
    "get_daily_summary_use_case",
    "get_estimate_nutrition_use_case",
    "get_meal_photo_use_case",
    "get_generate_speech_use_case",
    "get_register_use_case",
    "get_login_use_case",
]
