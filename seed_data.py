#!/usr/bin/env python3
"""
Insert the default user roles a fresh database needs before users can be created
"""

from educenter import models  # noqa: F401
from educenter.database import Base, SessionLocal, engine
from educenter.models import UserRole

DEFAULT_ROLES = ["admin", "worker", "student"]


def seed_roles(db) -> list[str]:
    """Add missing default roles; returns the names that were inserted"""
    existing = {name for (name,) in db.query(UserRole.role_name).all()}
    missing = [name for name in DEFAULT_ROLES if name not in existing]

    for name in missing:
        db.add(UserRole(role_name=name))
    db.commit()
    return missing


def main():
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()
    try:
        print("🔍 Seeding default user roles...")
        inserted = seed_roles(db)
        if inserted:
            print(f"✅ Inserted roles: {', '.join(inserted)}")
        else:
            print("✅ All default roles already present")
    except Exception as e:
        db.rollback()
        print(f"❌ Seeding failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
