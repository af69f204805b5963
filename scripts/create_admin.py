"""Script to create or reset the initial admin user."""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from toolcrib.config import settings
from toolcrib.database import SessionLocal, engine, Base
from toolcrib.exceptions import ToolCribError
from toolcrib.services.accounts import ensure_admin


def create_admin():
    """Create the admin user from ADMIN_* settings, or reset its password."""
    # Create tables
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        try:
            admin = ensure_admin(
                db,
                name=settings.ADMIN_NAME,
                email=settings.ADMIN_EMAIL,
                worker_id=settings.ADMIN_WORKER_ID,
                password=settings.ADMIN_PASSWORD,
            )
        except ToolCribError as e:
            print(f"Cannot create admin: {e.message}")
            sys.exit(1)

        print("Admin user ready!")
        print(f"Email: {admin.email}")
        print(f"Worker ID: {admin.worker_id}")
        print("\nPlease change ADMIN_PASSWORD from its default in production!")

    finally:
        db.close()


if __name__ == "__main__":
    create_admin()
