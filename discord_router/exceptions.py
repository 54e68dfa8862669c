"""Exception hierarchy for discord_router.

Gives callers a precise way to tell an unrecognized trigger apart from
a failing REST call or a broken configuration, while keeping one base
class for broad catches in message loops.

Handler failures raised inside ``Command.execute`` are never wrapped in
these types by the router; they reach the dispatch caller unchanged.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCategory(str, Enum):
    """Classification of errors for retry decisions."""
    TRANSIENT = "transient"          # Worth retrying (rate limit, 5xx)
    PERMANENT = "permanent"          # Not worth retrying (bad input, 4xx)
    INFRASTRUCTURE = "infrastructure"  # Missing token, unreadable config


class RouterError(Exception):
    """Base exception for all discord_router errors.

    Attributes:
        message: Human-readable error description.
        category: Error classification for retry decisions.
        module: Originating module name (e.g. "api.messages").
        context: Arbitrary key-value pairs for structured logging.
    """

    def __init__(
        self,
        message: str = "",
        *,
        category: ErrorCategory = ErrorCategory.PERMANENT,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.message = message
        self.category = category
        self.module = module
        self.context = context
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        """Whether this error is worth retrying."""
        return self.category == ErrorCategory.TRANSIENT

    def __str__(self) -> str:
        parts = [self.message or self.__class__.__name__]
        if self.module:
            parts.append(f"[module={self.module}]")
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"({ctx})")
        return " ".join(parts)

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return (
            f"{cls}({self.message!r}, category={self.category.value!r}, "
            f"module={self.module!r})"
        )


# ---------------------------------------------------------------------------
# Routing exceptions
# ---------------------------------------------------------------------------

class CommandNotFoundError(RouterError):
    """Dispatch received text whose leading token has no registered handler.

    Non-fatal: the caller decides whether to ignore it, log it, or reply
    with a help message.

    Attributes:
        trigger: The unmatched leading token.
    """

    def __init__(
        self,
        trigger: str,
        *,
        category: ErrorCategory = ErrorCategory.PERMANENT,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.trigger = trigger
        super().__init__(
            f"Command not found: {trigger}",
            category=category,
            module=module or "router",
            **context,
        )


class CommandArgumentError(RouterError):
    """A handler was given arguments it cannot work with."""

    def __init__(
        self,
        message: str = "",
        *,
        category: ErrorCategory = ErrorCategory.PERMANENT,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        super().__init__(
            message, category=category, module=module or "commands", **context
        )


class CommandLoadError(RouterError):
    """A command file could not be imported or held no command class.

    Attributes:
        path: Filesystem path of the offending file.
    """

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.PERMANENT,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.path = path
        super().__init__(
            message, category=category, module=module or "command_loader", **context
        )


# ---------------------------------------------------------------------------
# Discord REST exceptions
# ---------------------------------------------------------------------------

class DiscordAPIError(RouterError):
    """Discord answered a REST call with a non-success status.

    Rate limits (429) and server errors (5xx) are classified TRANSIENT;
    every other status is PERMANENT.

    Attributes:
        status: HTTP status code.
        method: HTTP method of the failed request.
        url: Request URL.
        body: Response body, truncated.
    """

    def __init__(
        self,
        message: str = "",
        *,
        status: int = 0,
        method: Optional[str] = None,
        url: Optional[str] = None,
        body: str = "",
        category: Optional[ErrorCategory] = None,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.status = status
        self.method = method
        self.url = url
        self.body = body
        if category is None:
            if status == 429 or status >= 500:
                category = ErrorCategory.TRANSIENT
            else:
                category = ErrorCategory.PERMANENT
        super().__init__(
            message or f"Discord API returned {status}",
            category=category,
            module=module or "api",
            status=status,
            **context,
        )


# ---------------------------------------------------------------------------
# Configuration exceptions
# ---------------------------------------------------------------------------

class ConfigurationError(RouterError):
    """Invalid or missing configuration.

    Defaults to INFRASTRUCTURE because config issues are environmental
    and won't resolve by retrying.
    """

    def __init__(
        self,
        message: str = "",
        *,
        setting_name: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.INFRASTRUCTURE,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.setting_name = setting_name
        super().__init__(
            message, category=category, module=module or "config", **context
        )
