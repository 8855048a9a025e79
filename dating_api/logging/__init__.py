# dating_api/logging/__init__.py

"""
Logging helpers for the Dating App API.

API code should simply do:

    from dating_api.logging import get_logger

    log = get_logger(__name__)
    log.info("member_registered", member_id=user.id)

and stay decoupled from how structlog is configured (see ``config``).
"""

from __future__ import annotations

from typing import Any, Optional

import structlog


DEFAULT_LOGGER_NAME = "dating_api"


def get_logger(name: Optional[str] = None) -> Any:
    """
    Return a structlog logger bound to ``name`` (default: ``dating_api``).
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


__all__ = ["DEFAULT_LOGGER_NAME", "get_logger"]
