# scripts/setup/init_db.py
"""
Initialize database — creates the plate_records table.
Run once before first launch.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import create_tables, engine
from app.config import settings
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError


def main():
    print("🗄️  Plate Registry DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except SQLAlchemyError as e:
        print(f"❌ Cannot connect to database: {e}")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()

    tables = inspect(engine).get_table_names()
    print(f"\n📊 Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    print(f"\n🎉 Database ready! Plates are written to collection '{settings.PLATES_COLLECTION}'.")
    print(f"   uvicorn app.main:app --host 0.0.0.0 --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
