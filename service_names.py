# service_names.py — CI service display-name catalog
from __future__ import annotations

import argparse
import json
import sys

from catalog.resource import load_table
from catalog.table import SERVICE_NAMES, ServiceNameTable
from catalog.types import NotFoundError, ResourceFormatError, TableValidationError
from catalog.validation import build_catalog_summary, print_catalog_summary
from reporting.render import TEMPLATE_NAMES, generate_services_file, render_services


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="CI service display-name catalog")
    p.add_argument("--source", metavar="PATH",
                   help="Load the table from a services resource file instead of the embedded catalog")

    modes = p.add_mutually_exclusive_group()
    modes.add_argument("--lookup", metavar="KEY", help="Print the display name for a service identifier")
    modes.add_argument("--list", action="store_true", help="Print every entry in catalog order")
    modes.add_argument("--validate", action="store_true",
                       help="Check the catalog invariants and print a summary")
    modes.add_argument("--render", choices=sorted(TEMPLATE_NAMES),
                       help="Render the catalog as a services resource or Markdown page")

    p.add_argument("--fallback", action="store_true",
                   help="With --lookup, print the raw identifier when it is not registered")
    p.add_argument("--json", action="store_true", help="With --list, print a JSON object")
    p.add_argument("--out", metavar="PATH", help="With --render, write to PATH instead of stdout")

    args = p.parse_args(argv)
    if args.fallback and args.lookup is None:
        p.error("--fallback requires --lookup")
    if args.json and not args.list:
        p.error("--json requires --list")
    if args.out and not args.render:
        p.error("--out requires --render")
    return args


def _load(source: str | None) -> ServiceNameTable:
    if not source:
        return SERVICE_NAMES
    return load_table(source)


def _print_entries(table: ServiceNameTable, as_json: bool) -> None:
    if as_json:
        print(json.dumps(table.as_dict(), indent=2))
        return
    width = max((len(k) for k in table), default=0)
    for entry in table.all_entries():
        print(f"  {entry.key:<{width}}  {entry.display_name}")


# ------------------------------------------------------------------
# Main
# ------------------------------------------------------------------

def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        table = _load(args.source)
    except OSError as e:
        print(f"  ✗ Cannot read {args.source}: {e}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"  ✗ {args.source} is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except ResourceFormatError as e:
        print(f"  ✗ {args.source}: {e}", file=sys.stderr)
        return 1
    except TableValidationError as e:
        print(f"  ✗ {args.source}: {len(e.violations)} catalog violation(s)", file=sys.stderr)
        for v in e.violations[:10]:
            print(f"    ✗ {v['detail']}", file=sys.stderr)
        return 1

    if args.lookup is not None:
        try:
            print(table.lookup(args.lookup))
        except NotFoundError as e:
            if args.fallback:
                print(args.lookup)
            else:
                print(f"  ⚠ {e}", file=sys.stderr)
                return 1
        return 0

    if args.list:
        _print_entries(table, args.json)
        return 0

    if args.validate:
        summary = build_catalog_summary(table)
        print_catalog_summary(summary)
        return 0 if summary["valid"] else 1

    if args.render:
        if args.out:
            try:
                path = generate_services_file(table, args.render, args.out)
            except OSError as e:
                print(f"  ✗ Cannot write {args.out}: {e}", file=sys.stderr)
                return 2
            print(f"  ✓ {len(table)} services → {path}")
        else:
            print(render_services(table, args.render))
        return 0

    # Nothing requested — short overview
    print(f"  {len(table)} services in catalog"
          f"{f' ({args.source})' if args.source else ''}."
          "  Use --lookup, --list, --validate or --render.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
