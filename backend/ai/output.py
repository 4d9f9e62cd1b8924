"""
Text extraction from model responses.

Responses API and Chat Completions payloads are decoded through one pydantic
model and read in a fixed order:

    output_text -> output[*].content[*] (type output_text) -> choices[0].message.content
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OutputContent(_Lenient):
    type: Optional[str] = None
    text: Optional[str] = None


class OutputItem(_Lenient):
    content: Optional[List[OutputContent]] = None


class ChoiceMessage(_Lenient):
    content: Optional[str] = None


class Choice(_Lenient):
    message: Optional[ChoiceMessage] = None


class ModelOutput(_Lenient):
    """Union of the response shapes that can carry generated text."""

    output_text: Optional[str] = None
    output: Optional[List[OutputItem]] = None
    choices: Optional[List[Choice]] = None

    def text(self) -> Optional[str]:
        if self.output_text:
            return self.output_text
        for item in self.output or []:
            for content in item.content or []:
                if content.type == "output_text" and content.text:
                    return content.text
        if self.choices:
            message = self.choices[0].message
            if message and message.content:
                return message.content
        return None


def extract_output_text(payload: Any) -> Optional[str]:
    """
    Generated text from an SDK response object or its dict form.

    Returns None when no shape carries non-empty text.
    """
    if hasattr(payload, "model_dump"):
        # SDK Response exposes output_text as a property, not a field
        output_text = getattr(payload, "output_text", None)
        payload = payload.model_dump()
        if isinstance(output_text, str):
            payload["output_text"] = output_text
    if not isinstance(payload, dict):
        return None
    try:
        return ModelOutput.model_validate(payload).text()
    except ValidationError:
        return None
