"""Helpers shared by the services."""

import uuid

from skillloop.core.errors import BadRequestError


def parse_id(value: str, label: str) -> str:
    """Normalize a path identifier, rejecting anything that is not a UUID."""
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        raise BadRequestError(f"Invalid {label} ID")
