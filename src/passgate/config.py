"""Configuration definition."""

__all__ = ["Configuration"]

import os
from pathlib import Path

from pydantic import Field
from safir.logging import LogLevel, Profile
from safir.pydantic import CamelCaseModel


class Configuration(CamelCaseModel):
    """Configuration for passgate."""

    name: str = Field(
        os.getenv("SAFIR_NAME", "passgate"),
        title="Application name",
        description=(
            "The application's name, which doubles as the root HTTP"
            " endpoint path.  Set with the ``SAFIR_NAME``"
            " environment variable."
        ),
    )

    profile: Profile = Field(
        Profile(os.getenv("SAFIR_PROFILE", "production")),
        title="Application run profile",
        description=(
            "The application profile: 'development' or 'production'."
            " Set with the ``SAFIR_PROFILE`` environment variable."
        ),
    )

    logger_name: str = Field(
        os.getenv("SAFIR_LOGGER", "passgate"),
        title="Application logger root name",
        description=(
            "The root name of the application's logger.  Set with the"
            " ``SAFIR_LOGGER`` application variable."
        ),
    )

    log_level: LogLevel = Field(
        LogLevel(os.getenv("SAFIR_LOG_LEVEL", "INFO")),
        title="Application logger log level",
        description=(
            "The log level of the application's logger.  Set with the"
            " ``SAFIR_LOG_LEVEL`` environment variable."
        ),
    )

    password_file: Path = Field(
        Path(os.getenv("PASSGATE_PASSWORD_FILE", "passwords.txt")),
        title="Password file for HTTP Basic Authentication",
        description=(
            "Path to the file of usernames and bcrypt password hashes, one"
            " pair per line.  Read once at startup.  Set with the"
            " ``PASSGATE_PASSWORD_FILE`` environment variable."
        ),
    )
