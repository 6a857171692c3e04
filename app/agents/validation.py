import logging
from typing import Any

from app.agents.errors import (
    InvalidDifficultyError,
    InvalidIndustryError,
    InvalidProjectTypeError,
    MissingFieldError,
)
from app.agents.schemas import ProjectInput
from app.catalog import DIFFICULTIES, INDUSTRIES, PROJECT_TYPES

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("industry", "projectType", "difficulty")

# Checked in this order; only the first failure is reported
_MEMBERSHIP_CHECKS = (
    (InvalidIndustryError, INDUSTRIES),
    (InvalidProjectTypeError, PROJECT_TYPES),
    (InvalidDifficultyError, DIFFICULTIES),
)


def validate_project_input(payload: Any) -> ProjectInput:
    """
    Validate a submitted form payload and return the normalized input.

    Presence of all three fields is checked before any catalog membership.
    Unknown keys (timestamps, cache-busting nonces) are ignored.
    """
    if not isinstance(payload, dict):
        logger.warning("Request body is not a JSON object: %r", type(payload).__name__)
        raise MissingFieldError()

    for name in REQUIRED_FIELDS:
        value = payload.get(name)
        if not isinstance(value, str) or not value.strip():
            logger.warning("Missing required field: %s", name)
            raise MissingFieldError()

    normalized = {name: payload[name].lower() for name in REQUIRED_FIELDS}

    for error_cls, allowed in _MEMBERSHIP_CHECKS:
        name = error_cls.field
        if normalized[name] not in allowed:
            logger.warning("Invalid %s: %r", name, payload[name])
            raise error_cls(payload[name], allowed)

    return ProjectInput(**normalized)
