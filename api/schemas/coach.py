"""
Coaching request schemas: context, summaries, nutrition, meal photos and
speech.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class UserContextRequest(BaseModel):
    """Body for POST /api/get-user-context."""
    model_config = ConfigDict(extra="allow")

    user_id: Optional[str] = None
    clientDate: Optional[str] = Field(default=None, description="Client-local YYYY-MM-DD")
    action: Optional[str] = Field(default=None, description='"generate_summary" to add a summary')


class DailySummaryRequest(BaseModel):
    """Body for POST /api/generate-daily-summary."""
    model_config = ConfigDict(extra="allow")

    user_id: Optional[str] = None
    clientDate: Optional[str] = None


class NutritionRequest(BaseModel):
    """Body for POST /api/nutrition."""
    model_config = ConfigDict(extra="allow")

    text: Optional[str] = Field(default=None, description="Meal text, e.g. '6oz chicken, 1 cup rice'")
    customerId: Optional[Union[str, int]] = None
    email: Optional[str] = None


class MealPhotoRequest(BaseModel):
    """Body for POST /api/meal-photo-estimate."""
    model_config = ConfigDict(extra="allow")

    image_base64: Optional[str] = Field(default=None, description="Image as a data URL")
    email: Optional[str] = None
    customerId: Optional[Union[str, int]] = None


class SpeechRequest(BaseModel):
    """Body for POST /api/generate-speech."""
    text: Optional[str] = None
