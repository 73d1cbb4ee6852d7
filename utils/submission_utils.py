"""Survey submission utilities.

This module packages the administrator's answers together with the context
answer identifying this integration, sends them to the survey API and records
the survey as completed once the API confirms it stored them.
"""

import logging
from collections.abc import Mapping
from typing import Any

from models.survey import (
    LOCATION_SLUG,
    SubmissionAnswer,
    SubmissionOutcome,
    SubmissionPayload,
    SubmissionResponse,
    SurveyType,
)
from utils.settings_utils import SettingsStore
from utils.survey_errors import MalformedResponseError, SurveyAPIError
from utils.survey_utils import (
    CLIENT_SURVEY_IDENTIFIER,
    SUBMIT_SURVEY,
    validate_api_response,
)

logger = logging.getLogger(__name__)

SURVEY_COMPLETED = "Survey completed"
SURVEY_FAILED = "Survey failed"


def build_submission_payload(
    answers: Mapping[str, Any], survey_type: SurveyType
) -> SubmissionPayload:
    """Builds the store request: the context answer first, then the caller's answers.

    Args:
        answers: Answers keyed by question slug, sent in mapping order.
        survey_type: The survey being answered.

    Returns:
        SubmissionPayload: The payload for the survey store endpoint.
    """
    submission_answers = [
        SubmissionAnswer(
            question_slug=LOCATION_SLUG, answer=survey_type.context_answer
        )
    ]

    for question_slug, answer in answers.items():
        if question_slug == LOCATION_SLUG:
            logger.warning(f"Ignoring submitted answer for reserved slug {LOCATION_SLUG}")
            continue
        submission_answers.append(
            SubmissionAnswer(question_slug=question_slug, answer=answer)
        )

    return SubmissionPayload(
        identifier=CLIENT_SURVEY_IDENTIFIER, answers=submission_answers
    )


class AnswerSubmitter:
    """Submits survey answers and records completion."""

    def __init__(self, settings: SettingsStore, api_client):
        self.settings = settings
        self.api_client = api_client

    def submit(
        self, answers: Mapping[str, Any], survey_type: SurveyType
    ) -> SubmissionOutcome:
        """Sends the answers to the survey API.

        The survey is marked completed only when the API answers 200 with
        ``{"success": true}``. Every other result is reported as a failure
        and leaves the settings untouched.
        """
        payload = build_submission_payload(answers, survey_type)
        raw = self.api_client.post(
            SUBMIT_SURVEY, body=payload.model_dump(mode="json"), logger_handle=logger
        )

        try:
            response = validate_api_response(raw, SubmissionResponse, SUBMIT_SURVEY)
        except SurveyAPIError as e:
            logger.error(f"Survey submission failed: {e}")
            return SubmissionOutcome(success=False, message=SURVEY_FAILED)
        except MalformedResponseError as e:
            logger.warning(f"Survey submission not confirmed: {e}")
            return SubmissionOutcome(success=False, message=SURVEY_FAILED)

        if not response.success:
            logger.warning(f"Survey API did not store the {survey_type.value} answers")
            return SubmissionOutcome(success=False, message=SURVEY_FAILED)

        self.settings.update_setting(survey_type.completion_setting, True)
        logger.info(f"{survey_type.value} completed")
        return SubmissionOutcome(success=True, message=SURVEY_COMPLETED)
