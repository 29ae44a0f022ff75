"""HTTP transport for Horizon and Friendbot.

All requests go through one ``requests.Session``. Reads are retried with
exponential backoff on timeouts, dropped connections and the status codes in
``RetryConfig.retryable_status_codes``; when Horizon sends ``Retry-After``
the wait is at least that long. Posts are sent once: a submission that timed
out may still be applied by the network, so repeating it is the caller's
decision.

Horizon reports failures as ``application/problem+json`` documents. The
parsed document is kept on ``NetworkError.problem`` so callers can read
``extras.result_codes`` and ``extras.invalid_field``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import requests
from requests.exceptions import RequestException, Timeout

logger = logging.getLogger(__name__)


class NetworkErrorType(Enum):
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_ERROR = "http_error"
    BAD_RESPONSE = "bad_response"


@dataclass
class NetworkError(Exception):
    error_type: NetworkErrorType
    message: str
    status_code: int | None = None
    problem: dict[str, Any] | None = None
    retry_after: float | None = None
    original_error: Exception | None = None

    def __str__(self) -> str:
        return self.message

    @property
    def is_transient(self) -> bool:
        if self.error_type in (
            NetworkErrorType.TIMEOUT,
            NetworkErrorType.CONNECTION_ERROR,
        ):
            return True
        if self.status_code is None:
            return False
        return self.status_code in (408, 429) or self.status_code >= 500

    @property
    def extras(self) -> dict[str, Any]:
        if not self.problem:
            return {}
        extras = self.problem.get("extras")
        return extras if isinstance(extras, dict) else {}


@dataclass
class TimeoutConfig:
    connect_timeout: float = 5.0
    read_timeout: float = 15.0

    @property
    def request_timeout(self) -> tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)


@dataclass
class RetryConfig:
    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    retryable_status_codes: set[int] = field(
        default_factory=lambda: {408, 429, 500, 502, 503, 504}
    )

    def calculate_delay(self, attempt: int, retry_after: float | None = None) -> float:
        delay = self.base_delay * (self.exponential_base**attempt)
        if retry_after:
            delay = max(delay, retry_after)
        return min(delay, self.max_delay)

    def allows_retry(self, error: NetworkError) -> bool:
        if error.error_type in (
            NetworkErrorType.TIMEOUT,
            NetworkErrorType.CONNECTION_ERROR,
        ):
            return True
        return error.status_code in self.retryable_status_codes


def parse_problem(response: requests.Response) -> dict[str, Any] | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def parse_retry_after(response: requests.Response) -> float | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return max(float(value), 0.0)
    except (TypeError, ValueError):
        # HTTP-date form; fall back to plain backoff
        return None


def describe_problem(status_code: int, problem: dict[str, Any] | None) -> str:
    if not problem:
        return f"HTTP error {status_code}"
    title = problem.get("title") or f"HTTP error {status_code}"
    detail = problem.get("detail")
    if detail:
        return f"{title} (HTTP {status_code}): {detail}"
    return f"{title} (HTTP {status_code})"


class NetworkClient:
    def __init__(
        self,
        base_url: str,
        timeout_config: TimeoutConfig | None = None,
        retry_config: RetryConfig | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_config = timeout_config or TimeoutConfig()
        self.retry_config = retry_config or RetryConfig()
        self.session = session or requests.Session()

    def get(
        self,
        endpoint: str,
        context: str = "",
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return self._request("GET", endpoint, context, retry=True, params=params)

    def post(
        self,
        endpoint: str,
        context: str = "",
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return self._request("POST", endpoint, context, retry=False, data=data)

    def _request(
        self, method: str, endpoint: str, context: str, retry: bool, **kwargs
    ) -> dict[str, Any]:
        url = f"{self.base_url}{endpoint}"
        max_retries = self.retry_config.max_retries if retry else 0
        attempt = 0

        while True:
            try:
                return self._send(method, url, context, **kwargs)
            except NetworkError as e:
                if attempt >= max_retries or not self.retry_config.allows_retry(e):
                    raise
                delay = self.retry_config.calculate_delay(attempt, e.retry_after)
                logger.warning(
                    "%s %s failed (attempt %d/%d), retrying in %.1fs: %s",
                    method,
                    endpoint,
                    attempt + 1,
                    max_retries + 1,
                    delay,
                    e,
                )
                time.sleep(delay)
                attempt += 1

    def _send(self, method: str, url: str, context: str, **kwargs) -> dict[str, Any]:
        prefix = f"{context}: " if context else ""
        try:
            response = self.session.request(
                method, url, timeout=self.timeout_config.request_timeout, **kwargs
            )
        except Timeout as e:
            raise NetworkError(
                error_type=NetworkErrorType.TIMEOUT,
                message=f"{prefix}Request timed out. Server may be unavailable: {self.base_url}",
                original_error=e,
            ) from e
        except RequestException as e:
            raise NetworkError(
                error_type=NetworkErrorType.CONNECTION_ERROR,
                message=f"{prefix}Cannot connect to server: {self.base_url}. Check your network connection.",
                original_error=e,
            ) from e

        if response.status_code >= 400:
            problem = parse_problem(response)
            raise NetworkError(
                error_type=NetworkErrorType.HTTP_ERROR,
                message=f"{prefix}{describe_problem(response.status_code, problem)}",
                status_code=response.status_code,
                problem=problem,
                retry_after=parse_retry_after(response),
            )

        try:
            body = response.json()
        except ValueError as e:
            raise NetworkError(
                error_type=NetworkErrorType.BAD_RESPONSE,
                message=f"{prefix}Unreadable response from {url}",
                status_code=response.status_code,
                original_error=e,
            ) from e
        if not isinstance(body, dict):
            raise NetworkError(
                error_type=NetworkErrorType.BAD_RESPONSE,
                message=f"{prefix}Unexpected response shape from {url}",
                status_code=response.status_code,
            )
        return body
