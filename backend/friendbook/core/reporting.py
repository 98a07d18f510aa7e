"""Process-wide error reporting client.

``reporter.initialize()`` is called from the application lifespan. Repeated calls
(hot reloads, test clients entering the lifespan again) are no-ops. Without a DSN
the SDK stays disabled and every capture call does nothing.
"""

import logging

import sentry_sdk

from friendbook.core.config import settings


logger = logging.getLogger(__name__)


class ErrorReporter:
    def __init__(
        self,
        dsn: str | None = None,
        environment: str = "local",
        release: str | None = None,
    ) -> None:
        self.dsn = dsn
        self.environment = environment
        self.release = release
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        if self._initialized:
            return False
        self._initialized = True

        sentry_sdk.init(
            dsn=self.dsn,
            environment=self.environment,
            release=self.release,
            traces_sample_rate=0,
        )
        if self.dsn:
            logger.info("Error reporting enabled (environment=%s)", self.environment)
        else:
            logger.info("SENTRY_DSN is not set; error reporting is disabled")
        return True

    def flush(self, timeout: float) -> None:
        sentry_sdk.flush(timeout=timeout)


reporter = ErrorReporter(
    dsn=settings.sentry_dsn,
    environment=settings.sentry_environment,
    release=settings.sentry_release,
)
