"""SPM Café management CLI.

Usage:
    python src/manage.py export-table-qr --out qr/          # PNGs for M-01..M-03
    python src/manage.py export-table-qr --count 12         # PNGs for M-01..M-12
    python src/manage.py show-settings                      # Effective settings
"""

import argparse
import json
import sys
from pathlib import Path


def export_table_qr(out_dir, count=None, origin=None):
    """Write one QR PNG per numbered table, linking to its menu URL."""
    from seating.table.management import add_next_table, bootstrap_tables
    from seating.table.qr import render_qr_png

    tables = bootstrap_tables(origin)
    while count and len(tables) < count:
        tables.append(add_next_table(origin))

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    for table in tables:
        path = out / f"{table.slug}-qr.png"
        path.write_bytes(render_qr_png(table.url))
        print(f"  {table.name}: {path} -> {table.url}")

    print("Done.")


def show_settings():
    """Print the process settings and the store's default settings document."""
    from shared.config import get_settings
    from store.settings import get_store_settings

    settings = get_settings()
    print(f"Environment:   {settings.env}")
    print(f"Listen:        {settings.host}:{settings.port}")
    print(f"Public origin: {settings.public_origin}")
    print(f"QRIS expiry:   {settings.qris_expiry_seconds}s")
    print(json.dumps(get_store_settings(), indent=2, ensure_ascii=False))


def main():
    from shared.config import load_env

    load_env()

    parser = argparse.ArgumentParser(description="SPM Café management CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export-table-qr", help="Write table QR codes as PNG files")
    export_parser.add_argument("--out", default="table-qr", help="Output directory (default: table-qr)")
    export_parser.add_argument("--count", type=int, help="Number of tables to export (default: 3)")
    export_parser.add_argument("--origin", help="Public origin used in table links")

    subparsers.add_parser("show-settings", help="Print effective settings")

    args = parser.parse_args()

    if args.command == "export-table-qr":
        export_table_qr(args.out, count=args.count, origin=args.origin)
    elif args.command == "show-settings":
        show_settings()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
