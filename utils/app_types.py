"""Type definitions and custom Flask app class for the Hostinger survey service.

This module provides a custom Flask app class with the survey components
attached by the application factory.
"""

from typing import Any

from flask import Flask


class SurveyFlask(Flask):
    """Custom Flask app class with the survey components attached.

    Attributes:
        api_client (Any): The API client instance for the survey API.
        api_base (str): The base URL for the API.
        api_ver (str): The versioned base path of the survey endpoints.
        settings_store (Any): The persisted settings store.
        eligibility_checker (Any): Decides whether surveys are shown.
        question_fetcher (Any): Fetches survey question definitions.
        form_schema_builder (Any): Builds the survey form schema.
        answer_submitter (Any): Submits survey answers.
    """

    api_client: Any
    api_base: str
    api_ver: str
    settings_store: Any
    eligibility_checker: Any
    question_fetcher: Any
    form_schema_builder: Any
    answer_submitter: Any
