"""Form schema utilities.

Converts survey question definitions into the JSON document rendered by the
survey form widget: one page per question, one field per page.
"""

from collections.abc import Iterable, Sequence
from typing import Optional

from models.question_map import SurveyQuestionCatalogue
from models.survey import FormElement, FormPage, FormSchema, SurveyQuestion, SurveyType

BETWEEN_RULE_PREFIX = "between:"
REQUIRED_RULE = "required"
COMMENT_SLUG = "comment"
COMMENT_MAX_LENGTH = 250
REQUIRED_ERROR_TEXT = "Response required."
MIN_RATE_DESCRIPTION = "Poor"
MAX_RATE_DESCRIPTION = "Excellent"
BETWEEN_VALUES_LEN = 2


def get_between_rule_values(rules: Iterable[str]) -> Optional[tuple[int, int]]:
    """Returns the bounds of the first well-formed ``between:<lo>,<hi>`` rule.

    Args:
        rules: The validation rules of a question.

    Returns:
        tuple[int, int] | None: The lower and upper bound, or None when no
        rule gives two integer bounds.
    """
    for rule in rules:
        if not rule.startswith(BETWEEN_RULE_PREFIX):
            continue

        values = rule[len(BETWEEN_RULE_PREFIX) :].split(",")
        if len(values) != BETWEEN_VALUES_LEN:
            continue

        try:
            return int(values[0]), int(values[1])
        except ValueError:
            continue

    return None


def is_survey_question_required(question: SurveyQuestion) -> bool:
    """Returns True when the question carries the ``required`` rule."""
    return REQUIRED_RULE in question.rules


class FormSchemaBuilder:
    """Builds the survey form schema from question definitions."""

    def __init__(self, catalogue: Optional[SurveyQuestionCatalogue] = None):
        self.catalogue = catalogue or SurveyQuestionCatalogue()

    def build_element(
        self, question: SurveyQuestion, survey_type: SurveyType
    ) -> FormElement:
        """Builds the form field for a single question."""
        slug = question.slug or ""
        presentation = self.catalogue.map_survey_question(slug)

        element = FormElement(
            type=presentation.type,
            name=slug,
            title=presentation.title_for(survey_type),
            required_error_text=REQUIRED_ERROR_TEXT,
        )

        if slug == COMMENT_SLUG:
            element.max_length = COMMENT_MAX_LENGTH

        between = get_between_rule_values(question.rules)
        if between:
            element.rate_min, element.rate_max = between
            element.min_rate_description = MIN_RATE_DESCRIPTION
            element.max_rate_description = MAX_RATE_DESCRIPTION

        if is_survey_question_required(question):
            element.is_required = True

        return element

    def build_schema(
        self,
        questions: Sequence[SurveyQuestion],
        survey_type: SurveyType = SurveyType.STANDARD,
    ) -> FormSchema:
        """Builds the form schema model, one page per question."""
        pages = [
            FormPage(
                name=question.slug or "",
                elements=[self.build_element(question, survey_type)],
            )
            for question in questions
        ]
        return FormSchema(pages=pages)

    def build(
        self,
        questions: Sequence[SurveyQuestion],
        survey_type: SurveyType = SurveyType.STANDARD,
    ) -> str:
        """Builds the form schema and returns it as a JSON string."""
        schema = self.build_schema(questions, survey_type)
        return schema.model_dump_json(by_alias=True, exclude_none=True)
