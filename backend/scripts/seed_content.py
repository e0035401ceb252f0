"""CLI script to seed learning content into the backend DB.

Usage: python scripts/seed_content.py path/to/content.json [--dry-run]

The JSON file holds optional `levels`, `categories` and `words` arrays
whose items use the same camelCase shape as the REST API bodies.
"""
import sys
import json
import argparse
import pathlib
# Ensure `backend/` is on sys.path so package imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from pronunciation_app.database import engine, create_db_and_tables
from pronunciation_app import schemas, services

# Levels and categories first so words can reference them.
SECTIONS = (
    ("levels", schemas.LevelIn, services.LevelService),
    ("categories", schemas.CategoryIn, services.CategoryService),
    ("words", schemas.WordIn, services.WordService),
)


def seed(session: Session, content: dict, dry_run: bool = False) -> dict:
    """Create every item of `content` whose id is not stored yet.

    Returns a summary `{section: {'created': n, 'skipped': m}}`.
    """
    summary = {}
    for section, schema, service_class in SECTIONS:
        svc = service_class(session)
        created = skipped = 0
        for item in content.get(section, []):
            payload = schema.model_validate(item)
            if payload.id is not None and svc.exists_by_id(payload.id):
                skipped += 1
                continue
            if not dry_run:
                svc.create(payload)
            created += 1
        summary[section] = {'created': created, 'skipped': skipped}
    return summary


def main(path: pathlib.Path, dry_run: bool = False):
    """Load `path` and seed it into the configured database."""
    if not path.exists():
        print(f'Content file not found at {path}')
        return
    content = json.loads(path.read_text(encoding='utf-8'))
    create_db_and_tables()
    with Session(engine) as session:
        summary = seed(session, content, dry_run=dry_run)
    for section, counts in summary.items():
        print(f"{section}: created={counts['created']} skipped={counts['skipped']}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Seed levels, categories and words from a JSON file')
    parser.add_argument('path', type=pathlib.Path, help='JSON content file')
    parser.add_argument('--dry-run', action='store_true', help='Report what would be created without writing')
    args = parser.parse_args()
    main(args.path, dry_run=args.dry_run)
