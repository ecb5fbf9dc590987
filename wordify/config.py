"""Configuration constants and .env loading.

WHY: Centralizes the few tunable values — diff engine timeout, semantic
cleanup, default output formats, log level — so they are easy to find and
override without touching code.

HOW: python-dotenv loads the .env file on import. Constants are read
from environment variables with plain defaults. The load_* functions read
their variable at call time and validate it with a clear error; the CLI
reuses the same parsers for its flags.

RULES:
- Every constant can be overridden through an environment variable
- WORDIFY_DIFF_TIMEOUT is in seconds; 0 means no time limit; negative or
  non-numeric values raise ValueError
- WORDIFY_SEMANTIC_CLEANUP accepts only "true"/"false" (case-insensitive);
  anything else raises ValueError
- WORDIFY_DEFAULT_FORMATS is a comma-separated list; empty means all
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Diff engine defaults
# ---------------------------------------------------------------------------

DEFAULT_DIFF_TIMEOUT = 1.0
"""diff-match-patch's own default Diff_Timeout, in seconds."""

DEFAULT_SEMANTIC_CLEANUP = False

# ---------------------------------------------------------------------------
# Output and logging defaults
# ---------------------------------------------------------------------------

DEFAULT_FORMATS: list[str] = [
    f.strip() for f in os.getenv("WORDIFY_DEFAULT_FORMATS", "").split(",") if f.strip()
]

LOG_LEVEL = os.getenv("WORDIFY_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def parse_timeout(raw: str, name: str = "WORDIFY_DIFF_TIMEOUT") -> float:
    """Parse a diff timeout in seconds, naming `name` in any error."""
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(
            "{} must be a number of seconds, got '{}'".format(name, raw)
        ) from None
    if timeout < 0:
        raise ValueError("{} must not be negative, got {}".format(name, timeout))
    return timeout


def parse_bool(raw: str, name: str) -> bool:
    """Parse "true"/"false" (case-insensitive), rejecting anything else."""
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError("{} must be 'true' or 'false', got '{}'".format(name, raw))


def load_diff_timeout() -> float:
    """Read the diff timeout from the environment.

    RULES:
    - Missing or empty variable returns DEFAULT_DIFF_TIMEOUT
    - Raises ValueError for non-numeric or negative values
    """
    raw = os.getenv("WORDIFY_DIFF_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_DIFF_TIMEOUT
    return parse_timeout(raw)


def load_semantic_cleanup() -> bool:
    """Read WORDIFY_SEMANTIC_CLEANUP; missing or empty means the default."""
    raw = os.getenv("WORDIFY_SEMANTIC_CLEANUP", "").strip()
    if not raw:
        return DEFAULT_SEMANTIC_CLEANUP
    return parse_bool(raw, "WORDIFY_SEMANTIC_CLEANUP")
