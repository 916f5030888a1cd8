from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Rule:
    """Rule book entry. ``image`` is an inline ``data:`` URL when present."""

    rule_id: str
    title: str
    description: str
    created_at: str
    image: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Rule":
        return cls(
            rule_id=str(data["id"]),
            title=str(data.get("title", "")),
            description=str(data.get("description") or ""),
            created_at=str(data.get("createdAt", "")),
            image=data.get("image") or None,
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.rule_id,
            "title": self.title,
            "description": self.description,
            "createdAt": self.created_at,
        }
        if self.image:
            out["image"] = self.image
        return out
