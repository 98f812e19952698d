"""Persist and load CLI roster mapping profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


@dataclass
class MappingProfile:
    roster_mapping: Dict[str, str]
    team_names: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "MappingProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            roster_mapping=data.get("roster_mapping", {}),
            team_names=data.get("team_names", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "roster_mapping": self.roster_mapping,
            "team_names": self.team_names,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def team_name(self, key: str, fallback: str) -> str:
        value: Optional[str] = self.team_names.get(key)
        return value or fallback
