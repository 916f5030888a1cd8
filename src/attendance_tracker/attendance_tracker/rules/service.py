from __future__ import annotations

import base64
import io
import logging
from datetime import datetime
from typing import Callable, Optional

from PIL import Image, UnidentifiedImageError

from ..common.datetime_utils import now_local
from ..common.identifiers import new_id
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..document.store import DocumentStore
from .model import Rule

logger = logging.getLogger(__name__)


def encode_image(raw: bytes) -> str:
    """Validate image bytes with Pillow and return them as a ``data:`` URL."""
    if not raw:
        raise ValidationError("Image is empty")
    try:
        with Image.open(io.BytesIO(raw)) as img:
            fmt = (img.format or "").lower()
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise ValidationError("File is not a supported image")

    mime = Image.MIME.get(fmt.upper()) or f"image/{fmt or 'png'}"
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


class RuleService:
    """Use case: rule book."""

    def __init__(self, store: DocumentStore, *, clock: Optional[Callable[[], datetime]] = None):
        self._store = store
        self._clock = clock or now_local

    def get_rules(self) -> list[Rule]:
        return [Rule.from_dict(r) for r in self._store.document.get("rules") or []]

    def add_rule(self, title: str, description: str, image: Optional[str] = None) -> None:
        if image is not None and not isinstance(image, str):
            raise ValidationError("Image must be an inline data URL")
        if image and not image.startswith("data:"):
            raise ValidationError("Image must be an inline data URL")

        rule = Rule(
            rule_id=new_id(),
            title=require_non_empty(title, "Title"),
            description=(description or "").strip(),
            created_at=self._clock().isoformat(timespec="seconds"),
            image=image or None,
        )
        self._store.ensure_section("rules").append(rule.to_dict())
        self._store.save()
        logger.info("Added rule %s", rule.rule_id)

    def remove_rule(self, rule_id: str) -> None:
        doc = self._store.document
        rules = doc.get("rules")
        if not rules:
            return

        remaining = [r for r in rules if r.get("id") != rule_id]
        if len(remaining) == len(rules):
            return

        doc["rules"] = remaining
        self._store.save()
        logger.info("Removed rule %s", rule_id)
