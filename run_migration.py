"""
Schema migration runner
Usage:
    python run_migration.py                      # create any missing tables
    python run_migration.py <migration_file.sql> # run a SQL migration file
"""
import logging
import sys
from pathlib import Path

from sqlalchemy import text

from educenter import models  # noqa: F401
from educenter.database import Base, engine

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def sync_schema():
    """Create every table the models declare that does not exist yet"""
    logger.info(f"Synchronizing {len(Base.metadata.tables)} tables with {engine.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("✅ Database sync complete.")


def split_statements(sql: str) -> list[str]:
    """Split a script on ';', dropping blanks and comment-only chunks"""
    statements = []
    for chunk in sql.split(';'):
        lines = [line for line in chunk.splitlines() if not line.strip().startswith('--')]
        statement = "\n".join(lines).strip()
        if statement:
            statements.append(statement)
    return statements


def run_migration(migration_file_path: str):
    """Run a SQL migration file"""
    migration_file = Path(migration_file_path)

    if not migration_file.exists():
        logger.error(f"Migration file not found: {migration_file}")
        sys.exit(1)

    logger.info(f"Reading migration file: {migration_file}")
    statements = split_statements(migration_file.read_text())

    logger.info(f"Found {len(statements)} SQL statements to execute")

    with engine.connect() as conn:
        for i, stmt in enumerate(statements, 1):
            logger.info(f"Executing statement {i}/{len(statements)}...")
            conn.execute(text(stmt))
        conn.commit()

    logger.info("✅ Migration completed successfully!")


if __name__ == "__main__":
    try:
        if len(sys.argv) > 1:
            run_migration(sys.argv[1])
        else:
            sync_schema()
    except Exception as e:
        logger.error(f"❌ Migration failed: {e}")
        sys.exit(1)
    finally:
        engine.dispose()
        logger.info("Connection closed.")
