"""
Store settings and logging setup.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class StoreSettings:
    """
    Tunables for a DocumentStore.

    Attributes:
        copy_documents: Deep-copy documents on write and on read, so callers
            never hold references into stored state.
        log_level: Name of the logging level used by configure_logging.
    """

    copy_documents: bool = True
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "StoreSettings":
        """
        Build settings from environment variables.

        Reads DOCSTORE_LOG_LEVEL (falling back to LOG_LEVEL) and
        DOCSTORE_COPY_DOCUMENTS.
        """
        env = os.environ if environ is None else environ

        log_level = env.get("DOCSTORE_LOG_LEVEL") or env.get("LOG_LEVEL") or "INFO"

        copy_documents = True
        raw = env.get("DOCSTORE_COPY_DOCUMENTS")
        if raw is not None:
            flag = raw.strip().lower()
            if flag in _TRUE:
                copy_documents = True
            elif flag in _FALSE:
                copy_documents = False
            else:
                raise ValueError(
                    f"DOCSTORE_COPY_DOCUMENTS must be a boolean flag, got {raw!r}"
                )

        return cls(copy_documents=copy_documents, log_level=log_level)


def configure_logging(settings: StoreSettings | None = None) -> None:
    """Configure root logging at the level named in ``settings``."""
    settings = settings or StoreSettings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
