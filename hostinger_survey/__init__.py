"""Flask application setup for the Hostinger admin surveys.

This module builds the Flask application, wires the survey components to the
settings store and the survey API client, and registers the blueprints.
"""

import logging
import os
from typing import Any, Optional

from hostinger_survey.routes import register_blueprints
from utils.api_utils import APIClient
from utils.app_types import SurveyFlask
from utils.eligibility_utils import EligibilityChecker
from utils.form_schema_utils import FormSchemaBuilder
from utils.settings_utils import JSONSettingsStore, SettingsStore
from utils.submission_utils import AnswerSubmitter
from utils.survey_utils import QuestionFetcher

from .versioning import get_app_version

logger = logging.getLogger(__name__)


def create_app(
    test_config: Optional[dict] = None,
    settings_store: Optional[SettingsStore] = None,
    api_client: Optional[Any] = None,
) -> SurveyFlask:
    """Initialises and configures the survey Flask application.

    Args:
        test_config (dict | None): Optional dictionary of test configuration overrides.
        settings_store (SettingsStore | None): Settings store to use instead of
            the JSON file named by ``SURVEY_SETTINGS_FILE``.
        api_client (Any | None): Survey API client to use instead of one built
            from the environment.

    Returns:
        SurveyFlask: The initialised and configured Flask application instance.
    """
    flask_app = SurveyFlask(__name__)
    flask_app.secret_key = os.getenv("FLASK_SECRET_KEY", os.urandom(24))
    flask_app.api_base = os.getenv(
        "BACKEND_API_URL", "https://rest-hosting.hostinger.com"
    )
    flask_app.api_ver = os.getenv("BACKEND_API_VERSION", "/v3/wordpress")

    if settings_store is None:
        settings_store = JSONSettingsStore(
            os.getenv("SURVEY_SETTINGS_FILE", "survey_settings.json")
        )
    flask_app.settings_store = settings_store

    if api_client is None:
        api_client = APIClient(
            base_url=f"{flask_app.api_base}{flask_app.api_ver}",
            token=os.getenv("SURVEY_API_TOKEN", ""),
            domain=os.getenv("SURVEY_SITE_DOMAIN", "localhost"),
            logger_handle=logger,
        )
    flask_app.api_client = api_client

    flask_app.eligibility_checker = EligibilityChecker(settings_store, api_client)
    flask_app.question_fetcher = QuestionFetcher(api_client)
    flask_app.form_schema_builder = FormSchemaBuilder()
    flask_app.answer_submitter = AnswerSubmitter(settings_store, api_client)

    register_blueprints(flask_app)

    # Allow test overrides
    if test_config:
        flask_app.config.update(test_config)

    @flask_app.after_request
    def add_version_header(resp):
        """Add a version header to responses to trace deployed software version."""
        resp.headers["X-App-Version"] = get_app_version()
        resp.headers["X-App-Revision"] = os.environ.get("APP_GIT_SHA", "unknown")
        return resp

    logger.info(f"Hostinger survey service initialised - version {get_app_version()}")

    return flask_app
