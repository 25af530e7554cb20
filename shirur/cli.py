from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .utils import logging as logutil
from .utils import paths as pathutil
from .utils.paths import load_yaml_once


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config-dir", default="configs", help="Directory containing YAML configs (default: ./configs)")
    p.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    p.add_argument("--log-to-file", action="store_true", help="Also write logs to file under artifacts.logs")


def _setup(args: argparse.Namespace, name: str):
    os.environ["SHIRUR_CONFIG_DIR"] = args.config_dir
    pathutil.set_config_dir(args.config_dir)
    logger = logutil.get_logger(name, level=args.log_level, to_file=args.log_to_file)
    logger.debug("Args: %s", vars(args))
    return logger


def _load_catalog_cfg(config_dir: str, check: bool = True) -> Dict[str, Any]:
    cfg_path = os.path.join(config_dir, "catalog.yaml")
    try:
        cfg = load_yaml_once(cfg_path)
    except ValueError as e:
        raise SystemExit(f"Invalid catalog config format: {cfg_path} ({e})")
    if check:
        from .utils.validate import validate_catalog

        result = validate_catalog(cfg)
        if not result["ok"]:
            failed = ", ".join(k for k, ok in result.items() if not ok and k != "ok")
            raise SystemExit(f"Invalid catalog config: {cfg_path} (bad sections: {failed})")
    return cfg


def _collect_labels(args: argparse.Namespace, cfg: Dict[str, Any]) -> List[Tuple[str, str]]:
    from .search.catalog import load_catalog, load_labels_file

    pairs = load_catalog(cfg)
    files = [Path(pathutil.get_path("data.labels")) / f for f in cfg.get("label_files") or []]
    if args.labels_file:
        files.append(Path(args.labels_file))
    for path in files:
        pairs.extend((name, name) for name in load_labels_file(path, log_level=args.log_level))
    return pairs


def cmd_suggest(args: argparse.Namespace) -> int:
    logger = _setup(args, "suggest")
    cfg = _load_catalog_cfg(args.config_dir)

    from .search.suggest import SuggestionIndex

    pairs = _collect_labels(args, cfg)
    index = SuggestionIndex(pairs, progress=args.progress, log_level=args.log_level)
    limit = args.limit if args.limit is not None else (cfg.get("suggest") or {}).get("limit")
    results = index.suggest(args.prefix, limit=limit)
    logger.info("%d suggestions for %r", len(results), args.prefix)
    for value in results:
        print(value)
    return 0


def cmd_delivery_fee(args: argparse.Namespace) -> int:
    logger = _setup(args, "delivery_fee")
    cfg = _load_catalog_cfg(args.config_dir)
    delivery = cfg.get("delivery") or {}

    from .geo import location

    distance = location.calculate_distance(
        args.lat1, args.lon1, args.lat2, args.lon2,
        road_factor=delivery.get("road_factor", location.ROAD_FACTOR),
    )
    fee = location.calculate_delivery_fee(
        distance,
        base_fee=delivery.get("base_fee", location.BASE_FEE),
        per_km=delivery.get("per_km", location.PER_KM_FEE),
    )
    result = {"distance_m": round(distance, 1), "fee": round(fee, 2)}
    logger.info("Delivery quote: %s", result)
    print(result)
    return 0


def cmd_validate_catalog(args: argparse.Namespace) -> int:
    logger = _setup(args, "validate_catalog")
    cfg = _load_catalog_cfg(args.config_dir, check=False)

    from .utils.validate import validate_catalog

    result = validate_catalog(cfg)
    if not result["ok"]:
        logger.error("Catalog validation failed: %s", result)
    print(result)
    return 0 if result["ok"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shirur", description="Shirur Express service search CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    p1 = sub.add_parser("suggest", help="Autocomplete service and product names for a typed prefix")
    _add_common_args(p1)
    p1.add_argument("prefix", help="Text typed so far")
    p1.add_argument("--limit", type=int, default=None, help="Maximum number of suggestions")
    p1.add_argument("--labels-file", default=None, help="Extra .txt/.csv file of product names to index")
    p1.add_argument("--progress", action="store_true", help="Show a progress bar while indexing")
    p1.set_defaults(func=cmd_suggest)

    p2 = sub.add_parser("delivery-fee", help="Estimate road distance and delivery fee between two points")
    _add_common_args(p2)
    for name in ("lat1", "lon1", "lat2", "lon2"):
        p2.add_argument(name, type=float)
    p2.set_defaults(func=cmd_delivery_fee)

    p3 = sub.add_parser("validate-catalog", help="Check configs/catalog.yaml for structural problems")
    _add_common_args(p3)
    p3.set_defaults(func=cmd_validate_catalog)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
