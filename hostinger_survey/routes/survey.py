"""Survey routes for the Hostinger admin surveys.

This module defines the endpoints used by the admin screens to fetch the
survey form, submit answers, and render the WooCommerce survey container.
"""

import logging
from http import HTTPStatus
from typing import cast

from flask import Blueprint, Response, current_app, jsonify, render_template, request
from flask.typing import ResponseReturnValue

from models.survey import SurveyType
from utils.app_types import SurveyFlask
from utils.eligibility_utils import RequestContext

survey_blueprint = Blueprint("survey", __name__)

logger = logging.getLogger(__name__)

AJAX_HEADER_VALUE = "XMLHttpRequest"
SURVEY_NOT_AVAILABLE = "Survey not available"


def parse_survey_type(value: str | None) -> SurveyType | None:
    """Maps a request value to a survey type; missing means the standard survey."""
    if value is None:
        return SurveyType.STANDARD
    try:
        return SurveyType(value)
    except ValueError:
        return None


def is_survey_available(app: SurveyFlask, survey_type: SurveyType) -> bool:
    """Returns True when the survey may be fetched or submitted."""
    checker = app.eligibility_checker
    if survey_type is SurveyType.WOO_ONBOARDING:
        return checker.is_woo_survey_available()
    return checker.is_survey_enabled()


def _json_message(success: bool, message: str, status: int) -> ResponseReturnValue:
    return jsonify({"success": success, "data": message}), status


@survey_blueprint.route("/survey/questions", methods=["GET"])
def survey_questions() -> ResponseReturnValue:
    """Returns the survey form schema for the requested survey type.

    Returns:
        ResponseReturnValue: The form schema JSON, or an error message.
    """
    app = cast(SurveyFlask, current_app)

    survey_type = parse_survey_type(request.args.get("survey_type"))
    if survey_type is None:
        return _json_message(False, "Unknown survey type", HTTPStatus.BAD_REQUEST)

    if not is_survey_available(app, survey_type):
        logger.debug(f"{survey_type.value} not available")
        return _json_message(False, SURVEY_NOT_AVAILABLE, HTTPStatus.NOT_FOUND)

    questions = app.question_fetcher.get_wp_survey_questions()
    schema = app.form_schema_builder.build(questions, survey_type)
    return Response(schema, status=HTTPStatus.OK, mimetype="application/json")


@survey_blueprint.route("/survey/submit", methods=["POST"])
def survey_submit() -> ResponseReturnValue:
    """Submits the administrator's answers to the survey API.

    Expects a JSON body ``{"survey_type": ..., "answers": {slug: answer}}``.

    Returns:
        ResponseReturnValue: ``{"success": bool, "data": message}``.
    """
    app = cast(SurveyFlask, current_app)
    body = request.get_json(silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return _json_message(
            False, "Request body must be an object", HTTPStatus.BAD_REQUEST
        )

    survey_type = parse_survey_type(body.get("survey_type"))
    if survey_type is None:
        return _json_message(False, "Unknown survey type", HTTPStatus.BAD_REQUEST)

    answers = body.get("answers")
    if not isinstance(answers, dict):
        return _json_message(
            False, "Answers must be an object", HTTPStatus.BAD_REQUEST
        )

    if not is_survey_available(app, survey_type):
        return _json_message(False, SURVEY_NOT_AVAILABLE, HTTPStatus.NOT_FOUND)

    outcome = app.answer_submitter.submit(answers, survey_type)
    status = HTTPStatus.OK if outcome.success else HTTPStatus.BAD_GATEWAY
    return _json_message(outcome.success, outcome.message, status)


@survey_blueprint.route("/survey/woocommerce-csat", methods=["GET"])
def woocommerce_csat_survey() -> ResponseReturnValue:
    """Renders the WooCommerce survey container for an admin page footer.

    The admin page is passed as ``request_uri``; nothing is rendered unless
    the WooCommerce survey is enabled for that page.
    """
    app = cast(SurveyFlask, current_app)
    context = RequestContext(
        request_uri=request.args.get("request_uri", ""),
        doing_ajax=request.headers.get("X-Requested-With") == AJAX_HEADER_VALUE,
    )

    if not app.eligibility_checker.is_woo_survey_enabled(context):
        return "", HTTPStatus.NO_CONTENT

    return render_template("woocommerce_csat_survey.html")
