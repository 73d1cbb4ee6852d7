"""Models for the remote survey API and the survey form schema.

This module contains the response models for the survey endpoints, the
submission payload, and the form schema rendered by the survey widget.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel

LOCATION_SLUG = "location"


class SurveyType(str, Enum):
    """The survey variants shown to administrators."""

    STANDARD = "ai_survey"
    WOO_ONBOARDING = "woo_survey"

    @property
    def context_answer(self) -> str:
        """Answer given to the ``location`` question for this variant."""
        return _CONTEXT_ANSWERS[self]

    @property
    def completion_setting(self) -> str:
        """Settings key marked true once this variant has been submitted."""
        return _COMPLETION_SETTINGS[self]


_CONTEXT_ANSWERS = {
    SurveyType.STANDARD: "wordpress_cms",
    SurveyType.WOO_ONBOARDING: "wordpress_woocommerce_onboarding",
}

_COMPLETION_SETTINGS = {
    SurveyType.STANDARD: "feedback_survey_completed",
    SurveyType.WOO_ONBOARDING: "woocommerce_survey_completed",
}


class SurveyQuestion(BaseModel):
    """A question definition as returned by the survey API."""

    model_config = ConfigDict(extra="ignore")

    slug: Optional[str] = Field(None, description="Question identifier")
    rules: list[str] = Field(default_factory=list, description="Validation rules")

    @field_validator("rules", mode="before")
    @classmethod
    def _string_rules(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            # Only string rules are understood; others are dropped.
            return [rule for rule in value if isinstance(rule, str)]
        return value


class EligibilityResponse(BaseModel):
    """Response model for the client-eligible endpoint."""

    data: StrictBool = Field(..., description="Whether the client may be surveyed")


class QuestionsData(BaseModel):
    """Payload of the survey get endpoint."""

    questions: list[SurveyQuestion] = Field(..., description="Survey questions")


class QuestionsResponse(BaseModel):
    """Response model for the survey get endpoint."""

    data: QuestionsData


class SubmissionAnswer(BaseModel):
    """A single answer sent to the survey store endpoint."""

    question_slug: str = Field(..., description="Slug of the answered question")
    answer: Any = Field(..., description="The answer given")


class SubmissionPayload(BaseModel):
    """Request body for the survey store endpoint."""

    identifier: str = Field(..., description="Survey identifier")
    answers: list[SubmissionAnswer] = Field(..., description="Ordered answers")


class SubmissionResponse(BaseModel):
    """Response model for the survey store endpoint."""

    success: StrictBool = Field(..., description="Whether the answers were stored")


class SubmissionOutcome(BaseModel):
    """Result of a submission as reported back to the admin screen."""

    success: bool
    message: str


class FormElement(BaseModel):
    """A single field of the survey form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str
    name: str
    title: str
    required_error_text: str
    max_length: Optional[int] = None
    rate_min: Optional[int] = None
    rate_max: Optional[int] = None
    min_rate_description: Optional[str] = None
    max_rate_description: Optional[str] = None
    is_required: Optional[bool] = None


class FormPage(BaseModel):
    """A form page, holding exactly one element."""

    name: str
    elements: list[FormElement]


class FormSchema(BaseModel):
    """The survey form as consumed by the form-rendering widget."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    pages: list[FormPage] = Field(default_factory=list)
    show_question_numbers: str = "off"
    show_toc: bool = Field(False, alias="showTOC")
    page_next_text: str = "Next"
    page_prev_text: str = "Previous"
    complete_text: str = "Submit"
    completed_html: str = "Thank you for completing the survey !"
    required_text: str = "*"
