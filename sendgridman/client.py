"""SendGrid v3 API client.

This module provides a small read-only client for the SendGrid
transactional templates API. Requests are authenticated with a bearer
API key and responses are decoded into the models in
:mod:`sendgridman.models`.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from . import __version__
from .exceptions import (
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RemoteError,
    ServerError,
    UnauthorizedError,
)
from .models import TemplateDetail, TemplateList, TemplateSummary

M = TypeVar("M", bound=BaseModel)

SENDGRID_HOST = "https://api.sendgrid.com"


class SendGridClient:
    """Client for the SendGrid transactional templates endpoints."""

    def __init__(
        self,
        api_key: str,
        host: str = SENDGRID_HOST,
        timeout: Optional[float] = None,
        debug: bool = False,
    ) -> None:
        """Initialize SendGrid API client.

        Args:
            api_key: SendGrid API key (not the API Key ID)
            host: Base URL of the SendGrid API
            timeout: Request timeout in seconds, None waits indefinitely
            debug: Print request diagnostics
        """
        self.api_key = api_key
        self.host = host.rstrip("/")
        self.timeout = timeout
        self.debug = debug

        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
            "User-Agent": f"sendgridman/{__version__}",
        })

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def __enter__(self) -> "SendGridClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _handle_response(self, response: requests.Response) -> None:
        """Convert non-2xx responses to the matching exception.

        Args:
            response: Response object

        Raises:
            RemoteError: For any HTTP error status
        """
        if response.ok:
            return

        error_data: Dict[str, Any] = {}
        try:
            body = response.json()
            if isinstance(body, dict):
                error_data = body
        except ValueError:
            pass

        # SendGrid reports failures as {"errors": [{"field": ..., "message": ...}]}
        messages = [
            err.get("message", "")
            for err in error_data.get("errors", [])
            if isinstance(err, dict) and err.get("message")
        ]
        detail = f": {'; '.join(messages)}" if messages else ""
        status = response.status_code

        if status == 401:
            raise UnauthorizedError(
                f"Unauthorized - check your API key{detail}",
                status_code=status,
                response_data=error_data,
            )
        elif status == 403:
            raise ForbiddenError(
                f"Forbidden - API key lacks template permissions{detail}",
                status_code=status,
                response_data=error_data,
            )
        elif status == 404:
            raise NotFoundError(
                f"Resource not found{detail}",
                status_code=status,
                response_data=error_data,
            )
        elif status == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                f"Rate limit exceeded{detail}",
                status_code=status,
                response_data=error_data,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        elif status >= 500:
            raise ServerError(
                f"Server error: {status}{detail}",
                status_code=status,
                response_data=error_data,
            )

        raise RemoteError(
            f"Unexpected response status: {status}{detail}",
            status_code=status,
            response_data=error_data,
        )

    def _get(self, endpoint: str, context: str, **kwargs: Any) -> requests.Response:
        """Issue a GET request.

        Args:
            endpoint: API path starting with a slash
            context: Short description used in error messages
            **kwargs: Additional request parameters

        Returns:
            Successful response

        Raises:
            RemoteError: If the request fails or returns an error status
        """
        url = f"{self.host}{endpoint}"
        if self.debug:
            print(f"[DEBUG] Making GET request to {url}")
            if kwargs.get("params"):
                print(f"[DEBUG] Params: {kwargs['params']}")

        try:
            response = self.session.get(url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise RemoteError(f"{context} fail: {e}") from e

        if self.debug:
            print(f"[DEBUG] Response status: {response.status_code}")

        try:
            self._handle_response(response)
        except RemoteError as e:
            e.message = f"{context} fail: {e.message}"
            e.args = (e.message,)
            raise

        return response

    def _decode(self, response: requests.Response, model: Type[M], context: str) -> M:
        """Decode a JSON response body into a model.

        Raises:
            DecodeError: If the body is not JSON or does not match the model
        """
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise DecodeError(f"parse {context} fail: {e}") from e

    def list_templates(self) -> List[TemplateSummary]:
        """Get the dynamic templates of the account.

        Only templates of the "dynamic" generation are listed; legacy
        templates are excluded.

        Returns:
            Template summaries in the order returned by SendGrid
        """
        response = self._get(
            "/v3/templates",
            "load templates",
            params={"generations": "dynamic"},
        )
        return self._decode(response, TemplateList, "templates json").templates

    def get_template(self, template_id: str) -> TemplateDetail:
        """Get a template with the content of all its versions.

        Args:
            template_id: Template ID

        Returns:
            Template detail
        """
        response = self._get(f"/v3/templates/{template_id}", f"load template ID='{template_id}'")
        return self._decode(response, TemplateDetail, f"template ID='{template_id}'")
