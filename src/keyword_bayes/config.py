"""Runtime settings for the file-reading and command-line layers.

The classification pipeline itself takes no configuration. These settings
only govern how text is read and tokenized and how verbose logging is.
Values come from ``KEYWORD_BAYES_*`` environment variables, which the CLI
populates from a ``.env`` file via ``python-dotenv`` before reading them.
"""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "KEYWORD_BAYES_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {value!r}")


@dataclass(frozen=True)
class Settings:
    """Settings for reading documents and configuring logging.

    Args:
        lowercase: Fold tokens to lower case when tokenizing.
        encoding: Encoding of vocabulary and document files.
        extensions: File suffixes treated as documents in a corpus directory.
        log_level: Logging level name for the package logger.
    """

    lowercase: bool = True
    encoding: str = "utf-8"
    extensions: tuple[str, ...] = (".txt", ".text", ".md")
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``KEYWORD_BAYES_*`` variables, falling back to defaults.

        Raises:
            ValueError: If a variable holds an unparseable value.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        lowercase = defaults.lowercase
        raw = env.get(ENV_PREFIX + "LOWERCASE")
        if raw is not None:
            lowercase = _parse_bool(ENV_PREFIX + "LOWERCASE", raw)

        extensions = defaults.extensions
        raw = env.get(ENV_PREFIX + "EXTENSIONS")
        if raw:
            extensions = tuple(
                ext if ext.startswith(".") else f".{ext}"
                for ext in (e.strip().lower() for e in raw.split(","))
                if ext
            )

        encoding = env.get(ENV_PREFIX + "ENCODING", defaults.encoding)
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"{ENV_PREFIX}ENCODING names an unknown encoding: {encoding!r}") from exc

        return cls(
            lowercase=lowercase,
            encoding=encoding,
            extensions=extensions,
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )
