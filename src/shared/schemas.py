"""Pydantic schemas for the structured demo responses.

## Structured Outputs

Gemini is asked to answer with JSON only, but nothing enforces it. These
models are the contract each demo checks the extracted payload against:
1. Required fields must be present
2. Primitive fields use StrictStr / StrictBool, so "true" is not a boolean
   and 5 is not a string
3. Enumerations are Literal unions, so out-of-set values are rejected
4. Nested lists and objects are validated recursively

Unknown extra keys are ignored and dropped from the validated value.

## Library Usage

Pydantic v2 BaseModel with model_validate() on the already-parsed JSON value.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator


# ============================================================================
# Moderation
# ============================================================================

ComplianceCategory = Literal["violence", "sexual", "self_harm"]


class ContentCompliance(BaseModel):
    """Compliance verdict for a piece of user input.

    ``category`` and ``explanation_if_violating`` are required keys whose
    value may be null.

    Example:
        {"is_violating": false, "category": null, "explanation_if_violating": null}
    """

    is_violating: StrictBool
    category: Optional[ComplianceCategory]
    explanation_if_violating: Optional[StrictStr]


# ============================================================================
# Recipe extraction
# ============================================================================

class Recipe(BaseModel):
    """Recipe details extracted from free text."""

    name: StrictStr
    timeToCook: StrictStr
    ingredients: list[StrictStr]


# ============================================================================
# Step-by-step guide
# ============================================================================

class Step(BaseModel):
    """One stage of a guide: what it is about and what it produces."""

    explanation: StrictStr
    output: StrictStr


class GuideSteps(BaseModel):
    steps: list[Step]


# ============================================================================
# CV form definition
# ============================================================================

ElementType = Literal[
    "section-header",
    "text-input",
    "textarea",
    "date-input",
    "email-input",
    "phone-input",
    "url-input",
    "bullet-list-item",
    "submit-button",
]


class CVElement(BaseModel):
    """One renderable unit of a CV form.

    All attributes except ``type`` may be omitted. When present they must
    carry a real value: an explicit null is rejected.
    """

    type: ElementType
    label: Optional[StrictStr] = Field(default=None)
    name: Optional[StrictStr] = Field(default=None)
    required: Optional[StrictBool] = Field(default=None)
    placeholder: Optional[StrictStr] = Field(default=None)
    value: Optional[StrictStr] = Field(default=None)

    @field_validator("label", "name", "required", "placeholder", "value", mode="before")
    @classmethod
    def _reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class CVForm(BaseModel):
    """Root of a generated CV form: a discriminator tag plus ordered elements."""

    type: Literal["cv-form"]
    elements: list[CVElement]
