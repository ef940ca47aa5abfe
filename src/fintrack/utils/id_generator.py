"""Transaction identifier generation."""

import uuid


def generate_id() -> str:
    """Return a new collision-resistant identifier (random 128-bit UUID, hex)."""
    return uuid.uuid4().hex
