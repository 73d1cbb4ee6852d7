"""Presentation details for survey question slugs.

The survey API only returns a slug and its validation rules for each
question. This module maps a slug to the text shown to the administrator and
the form control used to answer it.
"""

from typing import NamedTuple

from models.survey import SurveyType


class QuestionPresentation(NamedTuple):
    """How a question slug is presented in the survey form.

    type - the form control used to answer the question.
    question - the text shown in the standard survey.
    woo_question - the text shown in the WooCommerce onboarding survey.
    """

    type: str
    question: str
    woo_question: str

    def title_for(self, survey_type: SurveyType) -> str:
        """Returns the question text for the given survey variant."""
        titles = {
            SurveyType.STANDARD: self.question,
            SurveyType.WOO_ONBOARDING: self.woo_question,
        }
        return titles[survey_type]


SURVEY_QUESTIONS: dict[str, QuestionPresentation] = {
    "score": QuestionPresentation(
        type="rating",
        question="How would you rate your experience building a site with our AI tools?",
        woo_question="How would you rate your experience setting up your online store?",
    ),
    "comment": QuestionPresentation(
        type="comment",
        question="How could we improve your experience?",
        woo_question="What could we do to make setting up your store easier?",
    ),
}

DEFAULT_CONTROL = "text"


class SurveyQuestionCatalogue:  # pylint: disable=too-few-public-methods
    """Looks up the presentation for a question slug."""

    def __init__(self, questions: dict[str, QuestionPresentation] | None = None):
        self.questions = SURVEY_QUESTIONS if questions is None else questions

    def map_survey_question(self, slug: str) -> QuestionPresentation:
        """Returns the presentation for ``slug``.

        Unknown slugs are shown as a free text field titled with the slug.
        """
        presentation = self.questions.get(slug)
        if presentation is None:
            return QuestionPresentation(DEFAULT_CONTROL, slug, slug)
        return presentation
