"""Label set for the service autocomplete: categories, synonyms and products."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, List, Tuple

from ..utils.logging import get_logger

# Mirrors the service tiles on the marketplace home page.
DEFAULT_SERVICES: List[Dict[str, Any]] = [
    {"name": "Electrician", "slug": "electrician", "keywords": ["Wiring", "Fan Repair", "Switchboard"]},
    {"name": "Plumber", "slug": "plumber", "keywords": ["Pipe Leakage", "Tap Repair", "Water Tank"]},
    {"name": "Beauty Parlor", "slug": "beauty", "keywords": ["Haircut", "Facial", "Bridal Makeup"]},
    {"name": "Cake Shop", "slug": "cake-shop", "keywords": ["Birthday Cake", "Pastry"]},
    {"name": "Grocery (GMart)", "slug": "grocery", "keywords": ["Vegetables", "Daily Essentials"]},
    {"name": "No Brokerage", "slug": "rental", "keywords": ["Rent", "Flat", "Room"]},
    {"name": "Street Food", "slug": "street-food", "keywords": ["Vada Pav", "Pani Puri"]},
    {"name": "Restaurants", "slug": "restaurants", "keywords": ["Pizza", "Burger", "Biryani"]},
]

Pair = Tuple[str, str]


def services_from_cfg(cfg: Dict[str, Any]) -> List[Dict[str, Any]]:
    services = cfg.get("services")
    if services is None:
        return DEFAULT_SERVICES
    return services


def load_catalog(cfg: Dict[str, Any]) -> List[Pair]:
    """Flatten a catalog config into (word, value) pairs for indexing.

    Service names map to themselves, a service's keywords map to the service
    name, and top-level keywords are either plain strings or {word, value}.
    """
    pairs: List[Pair] = []
    for service in services_from_cfg(cfg):
        name = service.get("name")
        if not name:
            continue
        pairs.append((name, name))
        for kw in service.get("keywords") or []:
            pairs.append((kw, name))

    for kw in cfg.get("keywords") or []:
        if isinstance(kw, dict):
            word = kw.get("word")
            if word:
                pairs.append((word, kw.get("value") or word))
        elif kw:
            pairs.append((kw, kw))
    return pairs


def load_labels_file(path: str | Path, column: str = "name", log_level: str = "INFO") -> List[str]:
    """Read product or label names from a .txt (one per line) or .csv file."""
    logger = get_logger("load_labels_file", level=log_level)
    p = Path(path)
    labels: List[str] = []
    with open(p, "r", encoding="utf-8", newline="") as f:
        if p.suffix.lower() == ".csv":
            reader = csv.DictReader(f)
            if reader.fieldnames is None or column not in reader.fieldnames:
                raise ValueError(f"CSV {p} has no '{column}' column")
            for row in reader:
                name = (row.get(column) or "").strip()
                if name:
                    labels.append(name)
        else:
            for line in f:
                name = line.strip()
                if name:
                    labels.append(name)
    logger.info("Loaded %d labels from %s", len(labels), p)
    return labels
