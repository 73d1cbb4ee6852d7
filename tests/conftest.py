"""Pytest configuration and fixtures for the Hostinger survey tests.

This module provides fixtures for the settings store, a mocked survey API
client, and a Flask application instance wired to both.
"""

from http import HTTPStatus
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
from flask import Flask

from hostinger_survey import create_app
from models.survey import SurveyQuestion
from utils.settings_utils import (
    CONTENT_PUBLISHED,
    WEBSITE_TYPE,
    WOO_COMPLETED_TASKS_OPTION,
    InMemorySettingsStore,
)
from utils.survey_utils import (
    CLIENT_SURVEY_ELIGIBILITY,
    GET_SURVEY,
    SUBMIT_SURVEY,
)

# pylint cannot differentiate the use of fixtures in the test functions
# pylint: disable=unused-argument, disable=redefined-outer-name

API_ERROR = ({"error": "Failed to connect to API"}, HTTPStatus.BAD_GATEWAY)

RAW_QUESTIONS = [
    {"slug": "location", "rules": ["required"], "type": "select"},
    {"slug": "score", "rules": ["required", "between:1,10"], "type": "number"},
    {"slug": "reason", "rules": [], "type": "text"},
    {"slug": "comment", "rules": ["max:250"], "type": "text"},
]


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    """Provides a settings store in which both surveys would be shown."""
    return InMemorySettingsStore(
        settings={
            CONTENT_PUBLISHED: True,
            WEBSITE_TYPE: "online-store",
        },
        options={
            WOO_COMPLETED_TASKS_OPTION: ["products", "appearance", "payments"],
        },
    )


@pytest.fixture
def make_api_client() -> Callable[..., MagicMock]:
    """Return a factory for mocked survey API clients.

    The factory takes the value returned for each endpoint; endpoints left
    unset answer with a connection error tuple.
    """

    def _factory(
        eligible: Any = None, questions: Any = None, store: Any = None
    ) -> MagicMock:
        responses = {
            CLIENT_SURVEY_ELIGIBILITY: API_ERROR if eligible is None else eligible,
            GET_SURVEY: API_ERROR if questions is None else questions,
            SUBMIT_SURVEY: API_ERROR if store is None else store,
        }
        client = MagicMock()
        client.get.side_effect = lambda endpoint, **kwargs: responses[endpoint]
        client.post.side_effect = lambda endpoint, **kwargs: responses[endpoint]
        return client

    return _factory


@pytest.fixture
def mock_api_client(make_api_client) -> MagicMock:
    """Provides an API client for an eligible client with questions available."""
    return make_api_client(
        eligible={"data": True},
        questions={"data": {"questions": RAW_QUESTIONS}},
        store={"success": True},
    )


@pytest.fixture
def app(settings_store, mock_api_client) -> Flask:
    """Creates and configures a Flask application instance for testing.

    Returns:
        Flask: A configured Flask application instance with testing enabled.
    """
    test_app = create_app(
        test_config={"TESTING": True},
        settings_store=settings_store,
        api_client=mock_api_client,
    )
    return test_app


@pytest.fixture
def score_question() -> SurveyQuestion:
    """Provides a required rating question."""
    return SurveyQuestion(slug="score", rules=["required", "between:1,5"])


@pytest.fixture
def comment_question() -> SurveyQuestion:
    """Provides an optional comment question."""
    return SurveyQuestion(slug="comment", rules=["max:250"])
