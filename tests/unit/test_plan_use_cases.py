"""
Unit tests for the plan use cases.

Covers CreateWorkoutPlanUseCase, GenerateNextWorkoutUseCase and the plan
state use cases (get/save plan, coach UI state) against in-memory fakes.
"""

import json

import pytest

from application.exceptions import BadRequestError, NotFoundError, UpstreamError, UpstreamTimeoutError
from application.use_cases import (
    CreateWorkoutPlanUseCase,
    GenerateNextWorkoutUseCase,
    GetPlanUseCase,
    GetStateUseCase,
    SavePlanUseCase,
)
from application.use_cases.plan_state import parse_json_value
from domain.plans.constants import DUMBBELL_EXCLUSION_PATTERN
from tests.fakes import FakeLanguageModel, create_customer_store

CUSTOMER_GID = "gid://shopify/Customer/1001"

LAST_WORKOUT = {
    "date": "2025-03-01",
    "split": "upper_body",
    "exercises": [
        {"name": "Bench Press", "sets": [{"w": 135, "r": 8, "done": True}, {"w": 145, "r": 6, "done": True}]},
    ],
}


# =============================================================================
# CreateWorkoutPlanUseCase
# =============================================================================


@pytest.mark.unit
class TestCreateWorkoutPlan:
    @pytest.mark.asyncio
    async def test_empty_model_output_still_gives_full_plan(self):
        model = FakeLanguageModel()
        result = await CreateWorkoutPlanUseCase(model).execute({})

        assert result.plan.days_per_week == 4
        assert len(result.plan.workouts) == 4
        assert result.debug["equipment_mode"] == "full_gym"
        assert result.debug["ms"] == 12
        assert result.debug["model"] == "fake-model"
        assert model.last_request["kind"] == "json"
        assert model.last_request["feature"] == "create_workout_plan"

    @pytest.mark.asyncio
    async def test_model_draft_normalized_for_dumbbells(self):
        model = FakeLanguageModel()
        model.set_response({
            "plan_title": "Dumbbell Start",
            "workouts": [
                {
                    "title": "Upper",
                    "exercises": [
                        {"name": "Barbell Bench Press", "sets": [{"w": 135, "r": 8}] * 3},
                        {"name": "Dumbbell Row", "sets": [{"w": 50, "r": 10}] * 3},
                    ],
                }
            ],
        })

        result = await CreateWorkoutPlanUseCase(model).execute(
            {"days_per_week": 3, "equipment": ["dumbbells"]}
        )

        assert result.debug["equipment_mode"] == "dumbbells"
        assert len(result.plan.workouts) == 3
        for workout in result.plan.workouts:
            for exercise in workout.exercises:
                assert not DUMBBELL_EXCLUSION_PATTERN.search(exercise.name)
                assert all(s.w == 0 for s in exercise.sets)

    @pytest.mark.asyncio
    async def test_prompt_carries_request(self):
        model = FakeLanguageModel()
        await CreateWorkoutPlanUseCase(model).execute({"days_per_week": 5, "goal": "fat loss"})

        assert "Days per week: 5" in model.last_request["user"]

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        model = FakeLanguageModel()
        model.set_response("Here is your plan!")

        with pytest.raises(UpstreamError, match="Model returned invalid JSON") as exc_info:
            await CreateWorkoutPlanUseCase(model).execute({})

        assert exc_info.value.debug["output_preview"] == "Here is your plan!"
        assert exc_info.value.debug["days"] == 4

    @pytest.mark.asyncio
    async def test_timeout_propagates(self):
        model = FakeLanguageModel()
        model.set_response(UpstreamTimeoutError("OpenAI timeout (took too long). Try again."))

        with pytest.raises(UpstreamTimeoutError):
            await CreateWorkoutPlanUseCase(model).execute({})


# =============================================================================
# GenerateNextWorkoutUseCase
# =============================================================================


@pytest.mark.unit
class TestGenerateNextWorkout:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [{}, {"last_workout": None}, {"last_workout": {"exercises": "bench"}}, {"last_workout": []}],
    )
    async def test_missing_last_workout(self, body):
        model = FakeLanguageModel()

        with pytest.raises(BadRequestError, match="Missing last_workout") as exc_info:
            await GenerateNextWorkoutUseCase(model).execute(body)

        assert exc_info.value.debug["goal"] == "muscle_gain"
        assert model.call_count == 0

    @pytest.mark.asyncio
    async def test_prescription(self):
        model = FakeLanguageModel()
        model.set_response({
            "title": "Upper B",
            "exercises": [{"name": "Bench Press", "sets": [{"w": 150, "r": 6}] * 3, "rest_seconds": 120}],
        })

        result = await GenerateNextWorkoutUseCase(model).execute(
            {"last_workout": LAST_WORKOUT, "time_minutes": "45", "session_type": "upper_body"}
        )

        assert result.workout["title"] == "Upper B"
        assert result.workout["duration_minutes"] == 45
        assert result.workout["exercises"][0]["sets"] == [{"w": 150, "r": 6}] * 3
        assert result.debug["openai_ms"] == 12
        assert result.debug["has_last_workout"] is True
        assert model.last_request["feature"] == "generate_workouts"

    @pytest.mark.asyncio
    async def test_missing_sets_use_last_performance(self):
        model = FakeLanguageModel()
        model.set_response({"exercises": [{"name": "Bench Press"}]})

        result = await GenerateNextWorkoutUseCase(model).execute({"last_workout": LAST_WORKOUT})

        assert result.workout["session_type"] == "full_body"
        assert result.workout["exercises"][0]["sets"] == [{"w": 145, "r": 6}] * 3

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        model = FakeLanguageModel()
        model.set_response("{broken")

        with pytest.raises(UpstreamError, match="Model returned invalid JSON"):
            await GenerateNextWorkoutUseCase(model).execute({"last_workout": LAST_WORKOUT})


# =============================================================================
# Plan state
# =============================================================================


@pytest.mark.unit
class TestGetPlan:
    @pytest.mark.asyncio
    async def test_reads_plan_and_flags(self):
        store = create_customer_store(
            metafields={
                "coach_plan": json.dumps({"plan_title": "Starter"}),
                "onboarding_complete": "TRUE",
                "post_plan_stage": "  ",
            }
        )

        state = await GetPlanUseCase(store).execute("1001")

        assert state == {
            "customerGid": CUSTOMER_GID,
            "onboarding_complete": True,
            "post_plan_stage": None,
            "coach_plan": {"plan_title": "Starter"},
            "plan_json": None,
        }

    @pytest.mark.asyncio
    async def test_missing_customer_id(self):
        with pytest.raises(BadRequestError, match="Missing customerId"):
            await GetPlanUseCase(create_customer_store()).execute(None)

    @pytest.mark.asyncio
    async def test_unknown_customer(self):
        with pytest.raises(NotFoundError):
            await GetPlanUseCase(create_customer_store()).execute("999")


@pytest.mark.unit
class TestSavePlan:
    @pytest.mark.asyncio
    async def test_saves_json(self):
        store = create_customer_store()
        plan = {"plan_title": "Starter", "workouts": []}

        result = await SavePlanUseCase(store).execute(1001, plan)

        assert result["customerGid"] == CUSTOMER_GID
        assert json.loads(store.metafield(CUSTOMER_GID, "coach_plan")) == plan
        assert store.writes[0]["type"] == "json"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("customer_id,plan", [(None, {"a": 1}), ("1001", None), ("1001", {})])
    async def test_missing_fields(self, customer_id, plan):
        with pytest.raises(BadRequestError, match="Missing customerId or plan"):
            await SavePlanUseCase(create_customer_store()).execute(customer_id, plan)


@pytest.mark.unit
class TestGetState:
    @pytest.mark.asyncio
    async def test_state(self):
        store = create_customer_store(num_logs=2, metafields={"post_plan_stage": "week_1"})

        state = await GetStateUseCase(store).execute(CUSTOMER_GID)

        assert state["customerGid"] == CUSTOMER_GID
        assert state["onboarding_complete"] is False
        assert state["post_plan_stage"] == "week_1"
        assert state["coach_plan"] is None
        assert [log["date"] for log in state["daily_logs"]] == ["2025-01-01", "2025-01-02"]

    @pytest.mark.asyncio
    async def test_unknown_customer(self):
        with pytest.raises(NotFoundError):
            await GetStateUseCase(create_customer_store()).execute("42")


@pytest.mark.unit
class TestParseJsonValue:
    @pytest.mark.parametrize(
        "raw,expected",
        [(None, None), ("", None), ('{"a": 1}', {"a": 1}), ("[1]", [1]), ("{bad", None), ({"a": 1}, {"a": 1})],
    )
    def test_values(self, raw, expected):
        assert parse_json_value(raw) == expected
