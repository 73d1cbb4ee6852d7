"""Meta information routes for the Hostinger survey service.

This module defines a Flask blueprint that exposes version and build details
for health checks and debugging.
"""

import os

from flask import Blueprint, jsonify

from hostinger_survey.versioning import get_app_version

meta_blueprint = Blueprint("meta", __name__)


@meta_blueprint.route("/__meta", methods=["GET"])
def meta():
    """Return metadata related to the survey service."""
    return jsonify(
        {
            "app_version": get_app_version(),
            "git_sha": os.environ.get("APP_GIT_SHA", "unknown"),
            "build_date": os.environ.get("APP_BUILD_DATE", "unknown"),
        }
    )
