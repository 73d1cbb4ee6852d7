"""Unit tests for submitting survey answers."""

from http import HTTPStatus

import pytest

from models.survey import SurveyType
from utils.settings_utils import (
    FEEDBACK_SURVEY_COMPLETED,
    WOOCOMMERCE_SURVEY_COMPLETED,
)
from utils.submission_utils import (
    SURVEY_COMPLETED,
    SURVEY_FAILED,
    AnswerSubmitter,
    build_submission_payload,
)
from utils.survey_utils import CLIENT_SURVEY_IDENTIFIER, SUBMIT_SURVEY

# pylint cannot differentiate the use of fixtures in the test functions
# pylint: disable=unused-argument, disable=redefined-outer-name


@pytest.mark.utils
def test_payload_starts_with_context_answer():
    """The context answer comes first, then the caller's answers."""
    payload = build_submission_payload({"comment": "great"}, SurveyType.STANDARD)

    assert payload.model_dump() == {
        "identifier": CLIENT_SURVEY_IDENTIFIER,
        "answers": [
            {"question_slug": "location", "answer": "wordpress_cms"},
            {"question_slug": "comment", "answer": "great"},
        ],
    }


@pytest.mark.utils
def test_woo_payload_context_and_order():
    """The woo survey identifies itself as onboarding; answers keep their order."""
    payload = build_submission_payload(
        {"score": 9, "comment": "easy"}, SurveyType.WOO_ONBOARDING
    )

    assert [(a.question_slug, a.answer) for a in payload.answers] == [
        ("location", "wordpress_woocommerce_onboarding"),
        ("score", 9),
        ("comment", "easy"),
    ]


@pytest.mark.utils
def test_caller_cannot_replace_context_answer():
    """A submitted location answer is dropped so only one context answer is sent."""
    payload = build_submission_payload(
        {"location": "elsewhere", "score": 3}, SurveyType.STANDARD
    )
    locations = [a for a in payload.answers if a.question_slug == "location"]

    assert len(locations) == 1
    assert locations[0].answer == "wordpress_cms"
    assert payload.answers[0] is locations[0]


@pytest.mark.parametrize(
    "survey_type, setting",
    [
        (SurveyType.STANDARD, FEEDBACK_SURVEY_COMPLETED),
        (SurveyType.WOO_ONBOARDING, WOOCOMMERCE_SURVEY_COMPLETED),
    ],
)
@pytest.mark.utils
def test_submit_success_marks_completed(
    settings_store, make_api_client, survey_type, setting
):
    """A confirmed submission marks the matching survey completed."""
    api_client = make_api_client(store={"success": True})
    outcome = AnswerSubmitter(settings_store, api_client).submit(
        {"score": 5}, survey_type
    )

    assert outcome.success is True
    assert outcome.message == SURVEY_COMPLETED
    assert settings_store.get_setting(setting) is True
    other = (
        WOOCOMMERCE_SURVEY_COMPLETED
        if setting == FEEDBACK_SURVEY_COMPLETED
        else FEEDBACK_SURVEY_COMPLETED
    )
    assert settings_store.get_setting(other) is None

    args, kwargs = api_client.post.call_args
    assert args[0] == SUBMIT_SURVEY
    assert kwargs["body"]["answers"][0]["answer"] == survey_type.context_answer


@pytest.mark.parametrize(
    "raw",
    [
        {"success": False},
        {"success": "yes"},
        {},
        None,
        ({"error": "Failed to connect to API"}, HTTPStatus.BAD_GATEWAY),
        ({"error": "HTTP error: 422"}, HTTPStatus.UNPROCESSABLE_ENTITY),
        ({"error": "Unexpected status: 201"}, HTTPStatus.CREATED),
    ],
)
@pytest.mark.utils
def test_submit_failure_leaves_settings(settings_store, make_api_client, raw):
    """Anything but a confirmed store is a failure with no state change."""
    api_client = make_api_client()
    api_client.post.side_effect = None
    api_client.post.return_value = raw
    before = dict(settings_store.settings)

    outcome = AnswerSubmitter(settings_store, api_client).submit(
        {"comment": "great"}, SurveyType.STANDARD
    )

    assert outcome.success is False
    assert outcome.message == SURVEY_FAILED
    assert settings_store.settings == before
