from __future__ import annotations

import argparse
import locale
import logging
import sys
from pathlib import Path

from .config import Config, load_config
from .loader import NamePolicy
from .report import FileReport

logger = logging.getLogger(__name__)

def _check_lines(reports: list[FileReport]) -> list[str]:
    lines = []
    for r in reports:
        if r.ok:
            lines.append(f"ok    {r.path}  {r.record.name}")
        else:
            lines.append(f"FAIL  {r.path}  [{r.error.kind.value}] {r.error.message}")
    return lines

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="widgetdock")
    ap.add_argument("--config", help="Path to widgetdock.yaml")
    ap.add_argument("--log-level", help="Override log_level from config")
    ap.add_argument("--name-policy", choices=[p.value for p in NamePolicy], help="Override loader.name_policy from config")
    sub = ap.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List the widgets in a folder")
    ls.add_argument("folder", nargs="?", help="Widget folder (default: widgets_folder from config)")

    show = sub.add_parser("show", help="Print one widget in canonical form")
    show.add_argument("file")

    check = sub.add_parser("check", help="Report per-file load errors")
    check.add_argument("paths", nargs="+", help=".wg files or folders")

    args = ap.parse_args(argv)

    cfg = load_config(args.config)
    raw = dict(cfg.raw)
    if args.log_level:
        raw["log_level"] = args.log_level
    if args.name_policy:
        raw["loader"] = {**raw.get("loader", {}), "name_policy": args.name_policy}
    cfg = Config(raw=raw)

    cfg.apply_logging()
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.debug(f"Keeping default collation: {e}")
    loader = cfg.make_loader()

    if args.command == "list":
        folder = Path(args.folder) if args.folder else cfg.widgets_folder
        for w in loader.load_all_in_folder(folder):
            print(f"{w.name}\t{w.id}")
        return 0

    if args.command == "show":
        result = loader.load_widget(args.file)
        if not result.ok:
            print(str(result.error), file=sys.stderr)
            return 1
        print(result.record.to_json())
        return 0

    reports: list[FileReport] = []
    failed = False
    for p in map(Path, args.paths):
        if p.is_dir():
            folder_report = loader.inspect_folder(p)
            if folder_report.error is not None:
                print(f"FAIL  {p}  {folder_report.error}")
                failed = True
            reports.extend(folder_report.files)
        else:
            reports.extend(loader.inspect_many([p]).files)
    for line in _check_lines(reports):
        print(line)
    return 1 if failed or not all(r.ok for r in reports) else 0

def run() -> None:
    sys.exit(main())
