"""API utility functions and client for the Hostinger survey service.

This module provides an API client class for making HTTP requests to the
remote survey API and normalising transport and HTTP errors into a single
error shape that the survey services can inspect.
"""

from http import HTTPStatus
from typing import Any, Optional

import requests

API_TIMER_SEC = 20
ERROR_LEN = 2

TOKEN_HEADER = "Authorization"
DOMAIN_HEADER = "X-Hpanel-Domain"


# pylint: disable=too-many-arguments,too-many-positional-arguments
class APIClient:
    """API client for making HTTP requests to the remote survey API.

    Successful calls return the decoded JSON body. Failures (timeouts,
    connection problems, non-200 statuses, undecodable bodies) return an
    ``({"error": message}, status_code)`` tuple, see ``is_api_error``.
    """

    def __init__(
        self, base_url: str, token: str, domain: str, logger_handle
    ):
        """Initialises the API client with base URL, identifying headers and logger.

        Args:
            base_url (str): The versioned base URL for the API.
            token (str): The authentication token for API requests.
            domain (str): The site domain sent with every request.
            logger_handle: Logger instance for logging messages.
        """
        self.base_url = base_url
        self.token = token
        self.domain = domain
        self.logger_handle = logger_handle

    def _default_headers(self):
        """Returns the client-identifying headers for API requests.

        Returns:
            dict: Dictionary containing the authorisation and domain headers.
        """
        return {
            TOKEN_HEADER: f"Bearer {self.token}",
            DOMAIN_HEADER: self.domain,
        }

    def get(
        self,
        endpoint: str,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
        logger_handle=None,
    ):
        """Sends a GET request to the specified API endpoint.

        Args:
            endpoint (str): The API endpoint to send the request to.
            params (dict, optional): Query string parameters.
            headers (dict, optional): Additional headers for the request.
            logger_handle (optional): Logger instance for logging messages.

        Returns:
            dict or tuple: The API response data, or an error tuple.
        """
        return self._request(
            "GET",
            endpoint,
            params=params,
            headers=headers,
            logger_handle=logger_handle,
        )

    def post(
        self,
        endpoint: str,
        body: Optional[dict] = None,
        headers: Optional[dict] = None,
        logger_handle=None,
    ):
        """Sends a POST request to the specified API endpoint.

        Args:
            endpoint (str): The API endpoint to send the request to.
            body (dict, optional): The request body as a dictionary.
            headers (dict, optional): Additional headers for the request.
            logger_handle (optional): Logger instance for logging messages.

        Returns:
            dict or tuple: The API response data, or an error tuple.
        """
        return self._request(
            "POST",
            endpoint,
            body=body,
            headers=headers,
            logger_handle=logger_handle,
        )

    def _request(  # noqa: PLR0913, C901
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        body: Optional[dict] = None,
        headers: Optional[dict] = None,
        logger_handle=None,
    ):
        """Sends an HTTP request to the specified API endpoint.

        Only an HTTP 200 response with a JSON body counts as success.

        Args:
            method (str): The HTTP method ("GET" or "POST").
            endpoint (str): The API endpoint to send the request to.
            params (dict, optional): Query string parameters for GET requests.
            body (dict, optional): The request body for POST requests.
            headers (dict, optional): Additional headers for the request.
            logger_handle (optional): Logger instance for logging messages.

        Returns:
            dict or tuple: The API response data, or error tuple if an error occurs.
        """
        url = f"{self.base_url}{endpoint}"
        combined_headers = {**self._default_headers(), **(headers or {})}

        if logger_handle is None:
            logger_handle = self.logger_handle

        logger_handle.debug(f"Sending {method} request to {url}")

        if body is not None:
            logger_handle.debug(body)
        data = None
        error = None
        status_code = HTTPStatus.INTERNAL_SERVER_ERROR

        try:
            if method == "GET":
                response = requests.get(
                    url,
                    params=params,
                    headers=combined_headers,
                    timeout=API_TIMER_SEC,
                )
            elif method == "POST":
                response = requests.post(
                    url, json=body, headers=combined_headers, timeout=API_TIMER_SEC
                )
            else:
                raise ValueError(f"Unsupported method: {method}")

            response.raise_for_status()
            if response.status_code != HTTPStatus.OK:
                status_code = response.status_code
                raise ValueError(f"Unexpected status: {response.status_code}")

            data = response.json()
            logger_handle.debug(f"Received response from {url}")
            logger_handle.debug(data)

        except requests.exceptions.Timeout:
            logger_handle.error(
                f"Request to {url} timed out after {API_TIMER_SEC} seconds"
            )
            error = "Request timed out"
            status_code = HTTPStatus.GATEWAY_TIMEOUT
        except requests.exceptions.ConnectionError:
            logger_handle.error(f"Failed to connect to API at {url}")
            error = "Failed to connect to API"
            status_code = HTTPStatus.BAD_GATEWAY
        except requests.exceptions.HTTPError as http_err:
            logger_handle.error(f"HTTP error occurred: {http_err}")
            error = f"HTTP error: {http_err.response.status_code}"
            status_code = http_err.response.status_code
        except ValueError as val_err:
            logger_handle.error(f"Value error: {val_err}")
            error = f"Value error: {val_err}"
        except KeyError as key_err:
            logger_handle.error(f"Missing expected data in response: {key_err}")
            error = f"Missing expected data: {key_err}"
            status_code = HTTPStatus.BAD_GATEWAY
        except (TypeError, AttributeError) as exc:
            logger_handle.error(f"Unexpected type or attribute error: {exc}")
            error = f"Unexpected error: {exc!s}"
        except requests.exceptions.RequestException as req_err:
            logger_handle.error(f"Request to {url} failed: {req_err!r}")
            error = f"Request failed: {type(req_err).__name__}"
            status_code = HTTPStatus.BAD_GATEWAY

        if error:
            return self._handle_error(error, status_code)

        return data

    def _handle_error(self, message, status_code):
        """Logs an API error and returns it in the client's error shape.

        Args:
            message (str): The error message to log and return.
            status_code (int): The HTTP status code associated with the error.

        Returns:
            tuple: ``({"error": message}, status_code)``.
        """
        self.logger_handle.error(message)
        return {"error": message}, status_code


def is_api_error(raw: Any) -> bool:
    """Returns True when ``raw`` is an error tuple produced by ``APIClient``."""
    return (
        isinstance(raw, tuple)
        and len(raw) == ERROR_LEN
        and isinstance(raw[0], dict)
        and "error" in raw[0]
    )
