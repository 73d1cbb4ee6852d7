"""Survey question utilities.

This module fetches survey question definitions from the survey API and
filters them down to the questions asked by the admin survey.
"""

import logging
from collections.abc import Iterable
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from models.survey import QuestionsResponse, SurveyQuestion
from utils.api_utils import is_api_error
from utils.survey_errors import MalformedResponseError, SurveyAPIError

logger = logging.getLogger(__name__)

SUBMIT_SURVEY = "/survey/store"
GET_SURVEY = "/survey/get"
CLIENT_SURVEY_ELIGIBILITY = "/survey/client-eligible"
CLIENT_SURVEY_IDENTIFIER = "customer_satisfaction_score"

WP_SURVEY_QUESTION_SLUGS = ("score", "comment")

T = TypeVar("T", bound=BaseModel)


def validate_api_response(raw, model: type[T], endpoint: str) -> T:
    """Validates a raw ``APIClient`` result against a response model.

    Args:
        raw: The value returned by ``APIClient.get`` or ``APIClient.post``.
        model: The pydantic model describing the expected body.
        endpoint: The endpoint called, used in error messages.

    Returns:
        The validated model instance.

    Raises:
        SurveyAPIError: If the client returned an error tuple.
        MalformedResponseError: If the body does not match ``model``.
    """
    if is_api_error(raw):
        body, status_code = raw
        raise SurveyAPIError(f"{endpoint} failed: {body.get('error')}", status_code)

    try:
        return model.model_validate(raw)
    except ValidationError as ve:
        raise MalformedResponseError(
            f"Unexpected {endpoint} response: {ve}"
        ) from ve


def filter_questions_by_slug(
    all_questions: Iterable[SurveyQuestion], question_slugs: Iterable[str]
) -> list[SurveyQuestion]:
    """Keeps only the questions whose slug is wanted, in the order received.

    Only ``slug`` and ``rules`` are carried over.
    """
    wanted = set(question_slugs)
    return [
        SurveyQuestion(slug=question.slug, rules=list(question.rules))
        for question in all_questions
        if question.slug is not None and question.slug in wanted
    ]


class QuestionFetcher:
    """Retrieves survey question definitions from the survey API."""

    def __init__(self, api_client):
        self.api_client = api_client

    def load_questions(self, identifier: str) -> list[SurveyQuestion]:
        """Fetches the questions for ``identifier``, raising on any failure.

        Raises:
            SurveyAPIError: If the request failed or returned a non-200 status.
            MalformedResponseError: If the body has no ``data.questions`` list.
        """
        raw = self.api_client.get(
            GET_SURVEY, params={"identifier": identifier}, logger_handle=logger
        )
        if not raw and not is_api_error(raw):
            raise MalformedResponseError(f"Empty {GET_SURVEY} response")

        response = validate_api_response(raw, QuestionsResponse, GET_SURVEY)
        return response.data.questions

    def fetch_questions(self, identifier: str) -> list[SurveyQuestion]:
        """Fetches the questions for ``identifier``.

        Returns an empty list when the API cannot be reached or its answer
        cannot be used.
        """
        try:
            return self.load_questions(identifier)
        except (SurveyAPIError, MalformedResponseError) as e:
            logger.warning(f"No survey questions for {identifier}: {e}")
            return []

    def select_by_slug(
        self, all_questions: Iterable[SurveyQuestion], wanted_slugs: Iterable[str]
    ) -> list[SurveyQuestion]:
        """See ``filter_questions_by_slug``."""
        return filter_questions_by_slug(all_questions, wanted_slugs)

    def get_wp_survey_questions(self) -> list[SurveyQuestion]:
        """Returns the questions asked by the admin survey."""
        all_questions = self.fetch_questions(CLIENT_SURVEY_IDENTIFIER)
        return self.select_by_slug(all_questions, WP_SURVEY_QUESTION_SLUGS)
