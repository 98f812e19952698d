"""Helpers to load roster CSVs and emit canonical player records."""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from teambalancer.models import PlayerRecord


logger = logging.getLogger(__name__)

DEFAULT_ROSTER_MAPPING = {
    "player_id": "id",
    "name": "name",
    "category": "category",
    "multiplier": "multiplier",
    "position": "position",
    "is_active": "active",
    "points": "points",
}


class RosterRow(BaseModel):
    raw_id: Optional[str] = None
    raw_name: str
    raw_category: str
    raw_multiplier: str
    raw_position: str
    raw_active: Optional[str] = None
    raw_points: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "RosterRow":
        def extract(spec: Optional[str | Sequence[str]], *, default: Optional[str] = None) -> Optional[str]:
            if spec is None:
                return default
            if isinstance(spec, str):
                value = row.get(spec)
                return value.strip() if value is not None else default
            parts = [row.get(col, "").strip() for col in spec if row.get(col)]
            return " ".join(parts) if parts else default

        def parse_spec(key: str) -> Optional[str | Sequence[str]]:
            spec = mapping.get(key, DEFAULT_ROSTER_MAPPING.get(key))
            if spec is None:
                return None
            if "|" in spec:
                return tuple(part.strip() for part in spec.split("|"))
            return spec

        return cls(
            raw_id=extract(parse_spec("player_id")),
            raw_name=extract(parse_spec("name"), default="") or "",
            raw_category=extract(parse_spec("category"), default="") or "",
            raw_multiplier=extract(parse_spec("multiplier"), default="") or "",
            raw_position=extract(parse_spec("position"), default="") or "",
            raw_active=extract(parse_spec("is_active")),
            raw_points=extract(parse_spec("points")),
        )


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterRow]:
    mapping = mapping or DEFAULT_ROSTER_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [RosterRow.from_mapping(row, mapping) for row in reader]
    return rows


def _parse_category(raw_category: str) -> int:
    text = raw_category.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"category '{raw_category}' is not numeric") from None
    if not math.isfinite(value) or not value.is_integer():
        raise ValueError(f"category '{raw_category}' is not a whole number")
    return int(value)


def _parse_multiplier(raw_multiplier: str) -> float:
    text = raw_multiplier.strip().replace(",", ".")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"multiplier '{raw_multiplier}' is not numeric") from None


def _parse_points(raw_points: Optional[str]) -> Optional[float]:
    if raw_points is None or not raw_points.strip():
        return None
    text = raw_points.strip().replace(",", ".")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"points '{raw_points}' is not numeric") from None


def _parse_flag(value: Optional[str]) -> bool:
    if value is None:
        return True
    text = value.strip().lower()
    if not text:
        return True
    if text in {"1", "true", "t", "yes", "y", "active"}:
        return True
    if text in {"0", "false", "f", "no", "n", "inactive"}:
        return False
    raise ValueError(f"active flag '{value}' is not a yes/no value")


def rows_to_records(rows: Sequence[RosterRow]) -> List[PlayerRecord]:
    records: List[PlayerRecord] = []
    for line, row in enumerate(rows, start=2):
        identifier = row.raw_id or row.raw_name
        try:
            records.append(
                PlayerRecord(
                    player_id=identifier,
                    name=row.raw_name,
                    category=_parse_category(row.raw_category),
                    multiplier=_parse_multiplier(row.raw_multiplier),
                    position=row.raw_position,
                    is_active=_parse_flag(row.raw_active),
                    points=_parse_points(row.raw_points),
                )
            )
        except (ValueError, ValidationError) as exc:
            raise ValueError(f"row {line} ({identifier or 'unnamed'}): {exc}") from exc
    logger.info("Loaded %d roster records", len(records))
    return records


def load_records_from_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    return rows_to_records(load_roster_csv(path, mapping=mapping))
