"""
Backend Gateway

HTTP client for the hotel backend (Supabase table and auth APIs).
Attaches session credentials, maps failures to the gateway error
taxonomy and decodes responses into typed models.
"""

import json
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.config import Settings
from ..core.errors import (
    AuthError,
    NetworkError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from ..core.session import SessionState

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _json_default(value: Any) -> Any:
    # Sent as a string so the exact value survives; numeric columns accept it
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _error_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of an error response"""
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase

    if isinstance(payload, dict):
        for key in ("message", "error_description", "msg", "error", "hint"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return response.text or response.reason_phrase


def eq(value: Any) -> str:
    """Equality filter in PostgREST syntax"""
    return f"eq.{value}"


class GatewayClient:
    """
    Client for the hotel backend.

    All domain services share one instance so they share one connection
    pool and one session.
    """

    def __init__(
        self,
        rest_base_url: str,
        auth_base_url: str,
        session: SessionState,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize gateway client.

        Args:
            rest_base_url: Base URL of the table API
            auth_base_url: Base URL of the auth API
            session: Session state consulted for the bearer token
            api_key: Project API key sent as `apikey`
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.rest_base_url = rest_base_url.rstrip("/")
        self.auth_base_url = auth_base_url.rstrip("/")
        self.session = session
        self._api_key = api_key
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

        if not api_key:
            logger.warning("No API key provided - requests rely on the session token only")

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session: SessionState,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GatewayClient":
        return cls(
            rest_base_url=settings.rest_base_url,
            auth_base_url=settings.auth_base_url,
            session=session,
            api_key=settings.supabase_key,
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def _generate_headers(
        self, write: bool = False, session_token: Optional[str] = None
    ) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._api_key:
            headers["apikey"] = self._api_key

        token = session_token or self._api_key
        if token:
            headers["Authorization"] = f"Bearer {token}"

        if write:
            headers["Prefer"] = "return=representation"
        return headers

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Any] = None,
        with_session: bool = True,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        Raises:
            NetworkError: no response was received
            AuthError: HTTP 401; the session holding the rejected token
                is torn down first
            ValidationError: any other HTTP 4xx
            ServerError: HTTP 5xx
        """
        body_str = json.dumps(body, default=_json_default) if body is not None else None
        # Token the request is sent with; a 401 only revokes this one
        session_token = self.session.bearer_token() if with_session else None
        headers = self._generate_headers(
            write=method.upper() in ("POST", "PATCH", "PUT"),
            session_token=session_token,
        )

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                params=params,
                headers=headers,
                content=body_str,
            )
        except httpx.RequestError as exc:
            logger.error(f"Request failed: {method} {url} - {exc}")
            raise NetworkError(f"Could not reach the server: {exc}") from exc

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error(f"Request failed: {response.status_code} - {message}")

            if response.status_code == 401:
                if session_token:
                    self.session.teardown(message, token=session_token)
                raise AuthError(message, status_code=401)
            if response.status_code < 500:
                raise ValidationError(message, status_code=response.status_code)
            raise ServerError(message, status_code=response.status_code)

        if not response.content:
            return None

        try:
            return response.json(parse_float=Decimal)
        except ValueError as exc:
            raise ValidationError(
                f"Malformed response body from {url}",
                status_code=response.status_code,
            ) from exc

    async def table(
        self,
        method: str,
        table: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """Request against a table of the REST API"""
        return await self.request(method, f"{self.rest_base_url}/{table}", params=params, body=body)

    async def auth(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[Any] = None,
        with_session: bool = False,
    ) -> Any:
        """Request against the auth API"""
        return await self.request(
            method,
            f"{self.auth_base_url}{path}",
            params=params,
            body=body,
            with_session=with_session,
        )

    @staticmethod
    def decode(schema: type[T], data: Any) -> T:
        """Validate a response payload against a schema"""
        try:
            return TypeAdapter(schema).validate_python(data)
        except PydanticValidationError as exc:
            logger.error(f"Unexpected response shape for {schema}: {exc}")
            raise ValidationError(
                f"Unexpected response from server: {exc.error_count()} invalid field(s)"
            ) from exc

    @classmethod
    def decode_single(cls, schema: type[T], data: Any) -> T:
        """Decode a write response, which comes back as a one-row list"""
        if isinstance(data, list):
            if not data:
                raise NotFoundError("No matching record found")
            data = data[0]
        return cls.decode(schema, data)
