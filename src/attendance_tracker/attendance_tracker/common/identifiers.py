from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque record id (uuid4 text)."""
    return str(uuid.uuid4())
