"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so the API can be configured without a
dedicated settings library.  Defaults are provided for every field and
point at a local MongoDB instance.  In a production deployment override
them via environment variables.
"""

import os
from dataclasses import dataclass
from typing import Tuple


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Platform API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Connection string and database name for MongoDB.  Every domain
    # collection lives inside this single database; collection names are
    # derived by the model registry.
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    mongodb_database: str = os.getenv("MONGODB_DATABASE", "event_platform")

    # Origin patterns allowed to call the public newsletter endpoint from
    # a browser.  PROD_REGEX matches the production site, DEPLOY_REGEX
    # matches Vercel preview deployments
    # (``<project>-git-<branch>-<scope>.vercel.app``).
    prod_regex: str = os.getenv("PROD_REGEX", r"https://(www\.)?hackillinois\.org")
    deploy_regex: str = os.getenv("DEPLOY_REGEX", r"https://[a-z0-9-]*hackillinois[a-z0-9-]*\.vercel\.app")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def origin_patterns(self) -> Tuple[str, ...]:
        """Configured origin patterns in evaluation order."""
        patterns = (self.prod_regex, self.deploy_regex)
        return tuple(p for p in patterns if p)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
