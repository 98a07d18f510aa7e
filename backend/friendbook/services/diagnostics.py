"""Opt-in error-reporting check for the create endpoint.

Nothing here touches the database: the request ends with the synthetic error
after it has been reported.
"""

import logging
import platform
import re
import traceback
import uuid
from dataclasses import dataclass, field
from typing import NoReturn

import sentry_sdk

from friendbook.core.config import settings
from friendbook.core.errors import DiagnosticError
from friendbook.core.reporting import reporter


logger = logging.getLogger(__name__)

DIAGNOSTIC_MESSAGE = "Sentry test error from POST /api/friends"
STATIC_FINGERPRINT = "friends-create-diagnostic"

_FRAME_RE = re.compile(r'File "(?P<file>[^"]+)", line (?P<line>\d+)')


@dataclass
class DiagnosticContext:
    fingerprint: str
    tags: dict[str, str] = field(default_factory=dict)


def find_origin(stack: str) -> tuple[str, int] | None:
    matches = list(_FRAME_RE.finditer(stack))
    if not matches:
        return None
    # innermost frame is the caller
    last = matches[-1]
    return last.group("file"), int(last.group("line"))


def build_context(stack: str, endpoint: str, unique_fingerprint: bool) -> DiagnosticContext:
    fingerprint = uuid.uuid4().hex if unique_fingerprint else STATIC_FINGERPRINT
    tags = {
        "area": "friends",
        "endpoint": endpoint,
        "environment": reporter.environment,
        "runtime": f"python-{platform.python_version()}",
        "fingerprint": fingerprint,
    }
    origin = find_origin(stack)
    if origin is not None:
        origin_file, origin_line = origin
        tags["origin.file"] = origin_file
        tags["origin.line"] = str(origin_line)
    return DiagnosticContext(fingerprint=fingerprint, tags=tags)


def _make_error() -> DiagnosticError:
    try:
        raise DiagnosticError(DIAGNOSTIC_MESSAGE)
    except DiagnosticError as exc:
        return exc


def raise_diagnostic_error(endpoint: str, unique_fingerprint: bool = False) -> NoReturn:
    # Drop this frame so the origin is whoever triggered the diagnostic.
    stack = "".join(traceback.format_stack()[:-1])
    error = _make_error()
    context = build_context(stack, endpoint, unique_fingerprint)

    with sentry_sdk.new_scope() as scope:
        for key, value in context.tags.items():
            scope.set_tag(key, value)
        scope.fingerprint = [context.fingerprint]
        scope.add_breadcrumb(category="request", message=f"{endpoint} received", level="info")
        scope.add_breadcrumb(category="diagnostic", message="Synthetic error constructed", level="warning")
        sentry_sdk.capture_message(DIAGNOSTIC_MESSAGE, level="warning")
        sentry_sdk.capture_exception(error)

    reporter.flush(settings.sentry_flush_timeout)
    logger.warning(
        "Diagnostic error reported for %s",
        endpoint,
        extra={"fingerprint": context.fingerprint},
    )
    raise error
