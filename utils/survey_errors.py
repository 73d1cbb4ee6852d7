"""Exception types raised by the survey services.

The services raise these internally; the public eligibility and fetch
operations catch them and degrade, while the strict variants let them
propagate to the caller.
"""

from http import HTTPStatus
from typing import Optional


class SurveyError(RuntimeError):
    """Base class for survey service failures."""


class SurveyAPIError(SurveyError):
    """The survey API could not be reached or answered with an unexpected status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code or HTTPStatus.INTERNAL_SERVER_ERROR


class MalformedResponseError(SurveyError):
    """The survey API answered 200 but the body did not have the expected shape."""
