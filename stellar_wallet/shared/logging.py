"""Centralized logging configuration for Stellar Quick Wallet.

This module provides:
- Configurable log levels (DEBUG for dev, INFO for prod)
- Secret seed sanitization so keys never reach a log file
- User-friendly messages for Horizon result codes and transport failures
- Structured (JSON) or human-readable output
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LoggingConfig:
    log_level: LogLevel = LogLevel.INFO
    log_to_file: bool = True
    log_to_stdout: bool = False
    log_dir: Path | None = None
    log_filename: str = "wallet.log"
    sanitize_sensitive: bool = True
    include_context: bool = True

    @classmethod
    def from_environment(cls, log_dir: Path | None = None) -> "LoggingConfig":
        env_level = os.getenv("STELLAR_WALLET_LOG_LEVEL", "INFO").upper()
        try:
            log_level = LogLevel(env_level)
        except ValueError:
            log_level = LogLevel.INFO

        log_to_stdout = os.getenv("STELLAR_WALLET_LOG_STDOUT", "").lower() in (
            "1",
            "true",
            "yes",
        )

        return cls(
            log_level=log_level,
            log_to_stdout=log_to_stdout,
            log_dir=log_dir,
        )


SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (
        re.compile(
            r"(secret[_-]?(?:key)?['\"]?\s*[:=]\s*['\"]?)([^\s'\",]+)",
            re.IGNORECASE,
        ),
        r"\1[REDACTED]",
    ),
    # Stellar secret seeds: 'S' followed by 55 base32 characters.
    (
        re.compile(r"\bS[A-Z2-7]{55}\b"),
        "[SECRET_REDACTED]",
    ),
]

ADDRESS_PATTERN = re.compile(r"\bG[A-Z2-7]{55}\b")


def sanitize_message(message: str, preserve_addresses: bool = True) -> str:
    if not message:
        return message

    sanitized = message
    for pattern, replacement in SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)

    if not preserve_addresses:
        sanitized = ADDRESS_PATTERN.sub("[ADDRESS_REDACTED]", sanitized)

    return sanitized


def sanitize_dict(
    data: dict[str, Any], preserve_addresses: bool = True
) -> dict[str, Any]:
    result = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in ["secret", "seed", "private"]):
            result[key] = "[REDACTED]"
        elif isinstance(value, str):
            result[key] = sanitize_message(value, preserve_addresses)
        elif isinstance(value, dict):
            result[key] = sanitize_dict(value, preserve_addresses)
        else:
            result[key] = value
    return result


@dataclass
class ErrorMapping:
    error_pattern: str
    user_message: str
    log_level: LogLevel = LogLevel.ERROR
    suggest_action: str | None = None


ERROR_MAPPINGS: list[ErrorMapping] = [
    ErrorMapping(
        error_pattern="op_underfunded|insufficient balance",
        user_message="Insufficient balance for this payment.",
        log_level=LogLevel.WARNING,
        suggest_action="Remember the locked reserve and fees stay in the account.",
    ),
    ErrorMapping(
        error_pattern="op_no_destination",
        user_message="The destination account does not exist yet.",
        log_level=LogLevel.WARNING,
        suggest_action="Fund the destination first (at least 1 XLM creates it).",
    ),
    ErrorMapping(
        error_pattern="tx_bad_seq",
        user_message="The account sequence number changed while sending.",
        log_level=LogLevel.WARNING,
        suggest_action="Try again; the account will be reloaded.",
    ),
    ErrorMapping(
        error_pattern="tx_insufficient_fee",
        user_message="Transaction fee is too low for current network load.",
        log_level=LogLevel.WARNING,
        suggest_action="Wait a moment and try again.",
    ),
    ErrorMapping(
        error_pattern="tx_too_late",
        user_message="The transaction validity window expired.",
        log_level=LogLevel.WARNING,
        suggest_action="Send it again to build a fresh transaction.",
    ),
    ErrorMapping(
        error_pattern="timeout|timed out",
        user_message="Connection timed out. Horizon may be slow or unavailable.",
        log_level=LogLevel.WARNING,
        suggest_action="Try again later or check your network connection.",
    ),
    ErrorMapping(
        error_pattern="cannot connect|connection error|connection refused",
        user_message="Unable to connect to the server.",
        log_level=LogLevel.WARNING,
        suggest_action="Check your internet connection and try again.",
    ),
    ErrorMapping(
        error_pattern="account not found|404",
        user_message="Account not found.",
        log_level=LogLevel.WARNING,
        suggest_action="The account may not be funded yet, or the key has a typo.",
    ),
    ErrorMapping(
        error_pattern="invalid.*address|address.*(invalid|must)|rejected account_id",
        user_message="The address provided is not valid.",
        log_level=LogLevel.WARNING,
        suggest_action="Stellar public keys start with 'G' and are 56 characters.",
    ),
    ErrorMapping(
        error_pattern="secret key|valid seed",
        user_message="The secret key is not valid.",
        log_level=LogLevel.WARNING,
        suggest_action="Stellar secret keys start with 'S' and are 56 characters.",
    ),
    ErrorMapping(
        error_pattern="rate limit|too many requests|429",
        user_message="Too many requests. Please slow down.",
        log_level=LogLevel.WARNING,
        suggest_action="Wait a moment and try again.",
    ),
]


def get_user_friendly_error(error: Exception | str) -> tuple[str, str | None]:
    error_message = str(error) if isinstance(error, Exception) else error
    error_lower = error_message.lower()

    for mapping in ERROR_MAPPINGS:
        if re.search(mapping.error_pattern, error_lower):
            return mapping.user_message, mapping.suggest_action

    return "An unexpected error occurred.", None


class StructuredFormatter(logging.Formatter):
    def __init__(
        self,
        sanitize: bool = True,
        include_context: bool = True,
        preserve_addresses: bool = True,
    ):
        super().__init__()
        self.sanitize = sanitize
        self.include_context = include_context
        self.preserve_addresses = preserve_addresses

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_context:
            log_data["module"] = record.module
            log_data["function"] = record.funcName
            log_data["line"] = record.lineno

        extra_data = getattr(record, "context", None)
        if extra_data and isinstance(extra_data, dict):
            if self.sanitize:
                extra_data = sanitize_dict(extra_data, self.preserve_addresses)
            log_data["context"] = extra_data

        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            if self.sanitize:
                exc_text = sanitize_message(exc_text, self.preserve_addresses)
            log_data["exception"] = exc_text

        if self.sanitize:
            log_data["message"] = sanitize_message(
                log_data["message"], self.preserve_addresses
            )

        try:
            return json.dumps(log_data)
        except (TypeError, ValueError):
            return f"{log_data['timestamp']} - {log_data['logger']} - {log_data['level']} - {log_data['message']}"


class HumanReadableFormatter(logging.Formatter):
    def __init__(
        self,
        sanitize: bool = True,
        preserve_addresses: bool = True,
    ):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.sanitize = sanitize
        self.preserve_addresses = preserve_addresses

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if self.sanitize:
            formatted = sanitize_message(formatted, self.preserve_addresses)
        return formatted


_logging_initialized = False


def setup_logging(config: LoggingConfig | None = None) -> None:
    global _logging_initialized

    if _logging_initialized:
        return

    if config is None:
        config = LoggingConfig.from_environment()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level.value))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_format = (
        "json"
        if os.getenv("STELLAR_WALLET_LOG_FORMAT", "human").lower() == "json"
        else "human"
    )

    def build_formatter() -> logging.Formatter:
        if log_format == "json":
            return StructuredFormatter(
                sanitize=config.sanitize_sensitive,
                include_context=config.include_context,
            )
        return HumanReadableFormatter(sanitize=config.sanitize_sensitive)

    handlers: list[logging.Handler] = []

    if config.log_to_file:
        if config.log_dir is None:
            config.log_dir = Path.home() / ".config" / "stellar-quick-wallet"
        config.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = config.log_dir / config.log_filename

        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(build_formatter())
        handlers.append(file_handler)

    if config.log_to_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(build_formatter())
        handlers.append(stdout_handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    _logging_initialized = True


def format_error_for_user(error: Exception | str) -> str:
    user_message, suggestion = get_user_friendly_error(error)
    if suggestion:
        return f"{user_message} {suggestion}"
    return user_message


__all__ = [
    "LogLevel",
    "LoggingConfig",
    "StructuredFormatter",
    "HumanReadableFormatter",
    "sanitize_message",
    "sanitize_dict",
    "get_user_friendly_error",
    "setup_logging",
    "format_error_for_user",
]
