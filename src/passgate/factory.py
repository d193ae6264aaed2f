"""Create passgate components."""

import structlog
from safir.logging import configure_logging
from structlog.stdlib import BoundLogger

from .config import Configuration
from .gate import BasicAuthGate
from .storage.credentials import CredentialStore

__all__ = ["ProcessContext"]


class ProcessContext:
    """Per-process application context.

    This object holds the per-process singletons that are shared across
    requests: the configuration, the credential store, and the gate built
    on top of it.  The store is loaded here, once, so a bad password file
    stops the application from being created at all.

    Parameters
    ----------
    config
        passgate configuration.
    store
        Already-loaded credential store (optional).  If not set, the store
        is loaded from the password file named in the configuration.
    logger
        Logger object.  If not set, it will be initialized from the
        configuration.

    Raises
    ------
    passgate.exceptions.CredentialLoadError
        The password file could not be loaded.
    """

    def __init__(
        self,
        config: Configuration,
        store: CredentialStore | None = None,
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        if logger is None:
            configure_logging(
                profile=config.profile,
                log_level=config.log_level,
                name=config.logger_name,
            )
            logger = structlog.get_logger(config.logger_name)
        if store is None:
            store = CredentialStore.from_file(config.password_file)
            logger.info(
                "Loaded password file",
                path=str(config.password_file),
                users=len(store),
            )
        self.config = config
        self.store = store
        self.gate = BasicAuthGate(store, logger=logger)
