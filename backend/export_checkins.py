"""
Export the stored check-in snapshot as JSON, or import one into the configured store.

Usage:
    python export_checkins.py                   # print snapshot to stdout
    python export_checkins.py -o backup.json    # write snapshot to a file
    python export_checkins.py --import backup.json
"""
import argparse
import sys
from pathlib import Path

from wellness.core.config import settings
from wellness.db.session import SessionLocal, init_db
from wellness.services.storage_service import decode_snapshot, encode_snapshot, open_snapshot_store


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("-o", "--output", help="write the snapshot to this file instead of stdout")
    parser.add_argument("--import", dest="import_path", help="replace the stored snapshot with this JSON file")
    args = parser.parse_args(argv)

    init_db()
    db = SessionLocal()
    try:
        store = open_snapshot_store(db)
        if args.import_path:
            checkins = decode_snapshot(Path(args.import_path).read_text(encoding="utf-8"))
            store.save(checkins)
            print(f"Imported {len(checkins)} check-ins into {settings.STORAGE_BACKEND} storage")
            return 0

        payload = encode_snapshot(store.load())
        if args.output:
            Path(args.output).write_text(payload, encoding="utf-8")
            print(f"Snapshot written to {args.output}")
        else:
            print(payload)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
