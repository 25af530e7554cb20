from __future__ import annotations

import re
from typing import Any, Dict, List

_SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def slug_ok(slug: Any) -> bool:
    return isinstance(slug, str) and bool(_SLUG_RE.match(slug))


def _str_list_ok(items: Any) -> bool:
    if items is None:
        return True
    if not isinstance(items, list):
        return False
    return all(isinstance(x, str) and x.strip() for x in items)


def services_ok(services: Any) -> bool:
    if services is None:
        return True
    if not isinstance(services, list):
        return False
    slugs: List[str] = []
    for svc in services:
        if not isinstance(svc, dict):
            return False
        name = svc.get("name")
        if not isinstance(name, str) or not name.strip():
            return False
        if "slug" in svc:
            if not slug_ok(svc["slug"]):
                return False
            slugs.append(svc["slug"])
        if not _str_list_ok(svc.get("keywords")):
            return False
    return len(slugs) == len(set(slugs))


def keywords_ok(keywords: Any) -> bool:
    if keywords is None:
        return True
    if not isinstance(keywords, list):
        return False
    for kw in keywords:
        if isinstance(kw, dict):
            if not isinstance(kw.get("word"), str) or not kw["word"].strip():
                return False
            if "value" in kw and not isinstance(kw["value"], str):
                return False
        elif not isinstance(kw, str) or not kw.strip():
            return False
    return True


def delivery_ok(delivery: Any) -> bool:
    if delivery is None:
        return True
    if not isinstance(delivery, dict):
        return False
    for key in ("base_fee", "per_km", "road_factor"):
        val = delivery.get(key)
        if val is None:
            continue
        if isinstance(val, bool) or not isinstance(val, (int, float)) or val < 0:
            return False
    return True


def suggest_ok(suggest: Any) -> bool:
    if suggest is None:
        return True
    if not isinstance(suggest, dict):
        return False
    limit = suggest.get("limit")
    return limit is None or (isinstance(limit, int) and not isinstance(limit, bool) and limit > 0)


def validate_catalog(cfg: Dict[str, Any]) -> Dict[str, bool]:
    result = {
        "services": services_ok(cfg.get("services")),
        "keywords": keywords_ok(cfg.get("keywords")),
        "label_files": _str_list_ok(cfg.get("label_files")),
        "suggest": suggest_ok(cfg.get("suggest")),
        "delivery": delivery_ok(cfg.get("delivery")),
    }
    result["ok"] = all(result.values())
    return result
