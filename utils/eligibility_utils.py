"""Survey eligibility utilities.

This module decides whether a survey should be shown to the administrator,
combining the locally stored completion flags, the WooCommerce onboarding
progress, the admin page being viewed, and the survey API's eligibility check.
"""

import logging
from dataclasses import dataclass

from models.survey import EligibilityResponse
from utils.settings_utils import (
    CONTENT_PUBLISHED,
    FEEDBACK_SURVEY_COMPLETED,
    WEBSITE_TYPE,
    WOO_COMPLETED_TASKS_OPTION,
    WOOCOMMERCE_SURVEY_COMPLETED,
    SettingsStore,
)
from utils.survey_errors import MalformedResponseError, SurveyAPIError
from utils.survey_utils import (
    CLIENT_SURVEY_ELIGIBILITY,
    CLIENT_SURVEY_IDENTIFIER,
    validate_api_response,
)

logger = logging.getLogger(__name__)

REST_API_PREFIX = "/wp-json/"

REQUIRED_ONBOARDING_ACTIONS = ("products", "appearance", "payments")

WOOCOMMERCE_PAGES = frozenset(
    {
        "/wp-admin/admin.php?page=wc-admin",
        "/wp-admin/edit.php?post_type=shop_order",
        "/wp-admin/admin.php?page=wc-admin&path=/customers",
        "/wp-admin/edit.php?post_type=shop_coupon&legacy_coupon_menu=1",
        "/wp-admin/admin.php?page=wc-admin&path=/marketing",
        "/wp-admin/admin.php?page=wc-reports",
        "/wp-admin/admin.php?page=wc-settings",
        "/wp-admin/admin.php?page=wc-status",
        "/wp-admin/admin.php?page=wc-admin&path=/extensions",
        "/wp-admin/edit.php?post_type=product",
        "/wp-admin/post-new.php?post_type=product",
        "/wp-admin/edit.php?post_type=product&page=product-reviews",
        "/wp-admin/edit.php?post_type=product&page=product_attributes",
        "/wp-admin/edit-tags.php?taxonomy=product_cat&post_type=product",
        "/wp-admin/edit-tags.php?taxonomy=product_tag&post_type=product",
        "/wp-admin/admin.php?page=wc-admin&path=/analytics/overview",
    }
)


@dataclass(frozen=True)
class RequestContext:
    """The admin request a survey decision is made for.

    request_uri - path and query string of the admin page.
    doing_ajax - True for asynchronous background requests.
    """

    request_uri: str
    doing_ajax: bool = False


def is_woocommerce_admin_page(context: RequestContext) -> bool:
    """Returns True when the request renders one of the WooCommerce admin pages."""
    if context.doing_ajax:
        return False

    if REST_API_PREFIX in context.request_uri:
        return False

    return context.request_uri in WOOCOMMERCE_PAGES


class EligibilityChecker:
    """Decides whether the admin surveys should be shown."""

    def __init__(self, settings: SettingsStore, api_client):
        self.settings = settings
        self.api_client = api_client

    def is_survey_enabled(self) -> bool:
        """Returns True when the standard survey should be shown."""
        return (
            not self.settings.get_setting(FEEDBACK_SURVEY_COMPLETED)
            and bool(self.settings.get_setting(CONTENT_PUBLISHED))
            and self.is_client_eligible()
        )

    def is_woo_survey_enabled(self, context: RequestContext) -> bool:
        """Returns True when the WooCommerce survey should be shown on this page."""
        return (
            not self.settings.get_setting(WOOCOMMERCE_SURVEY_COMPLETED)
            and bool(self.settings.get_setting(WEBSITE_TYPE))
            and is_woocommerce_admin_page(context)
            and self.default_woocommerce_survey_completed()
            and self.is_client_eligible()
        )

    def is_woo_survey_available(self) -> bool:
        """Returns True when the WooCommerce survey may be fetched or submitted.

        Same as ``is_woo_survey_enabled`` without the admin page check, which
        only applies when rendering a page.
        """
        return (
            not self.settings.get_setting(WOOCOMMERCE_SURVEY_COMPLETED)
            and bool(self.settings.get_setting(WEBSITE_TYPE))
            and self.default_woocommerce_survey_completed()
            and self.is_client_eligible()
        )

    def default_woocommerce_survey_completed(self) -> bool:
        """Returns True when every required onboarding action has been completed."""
        completed_actions = self.settings.get_option(WOO_COMPLETED_TASKS_OPTION, [])
        if not isinstance(completed_actions, (list, tuple, set)):
            return False
        return set(REQUIRED_ONBOARDING_ACTIONS).issubset(completed_actions)

    def check_client_eligibility(self) -> bool:
        """Asks the survey API whether this client may be surveyed.

        Raises:
            SurveyAPIError: If the request failed or returned a non-200 status.
            MalformedResponseError: If the body is not ``{"data": <bool>}``.
        """
        raw = self.api_client.get(
            CLIENT_SURVEY_ELIGIBILITY,
            params={"identifier": CLIENT_SURVEY_IDENTIFIER},
            logger_handle=logger,
        )
        response = validate_api_response(
            raw, EligibilityResponse, CLIENT_SURVEY_ELIGIBILITY
        )
        return response.data is True

    def is_client_eligible(self) -> bool:
        """Returns True only when the survey API confirms eligibility."""
        try:
            return self.check_client_eligibility()
        except (SurveyAPIError, MalformedResponseError) as e:
            logger.warning(f"Client treated as not eligible for surveys: {e}")
            return False
