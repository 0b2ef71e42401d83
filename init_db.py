#!/usr/bin/env python3
"""
Database Initialization Script
Creates the schema and the bootstrap administrator without starting the server.
"""
import sys


def main():
    """Initialize database with default data"""
    print("=" * 60)
    print("Vendor Management Console - Database Initialization")
    print("=" * 60)

    from vendor_console.config import get_settings
    from vendor_console.database import Database, StorageError
    from vendor_console.models.init_data import init_default_data

    settings = get_settings()
    db = Database(settings)

    try:
        print("\n🔨 Creating database tables...")
        db.create_all()
        print("✅ Database schema created successfully")

        print("\n📊 Initializing default data...")
        if init_default_data(db, settings):
            print("✅ Default administrator created")
            print(f"   Email: {settings.default_admin_email}")
        else:
            print("⏭️  Administrators already exist, skipping")
    except StorageError as e:
        print(f"❌ Error during initialization: {e}")
        sys.exit(1)
    finally:
        db.dispose()

    print("\n" + "=" * 60)
    print("🎉 Database initialization completed!")
    print("=" * 60)
    print("\n📝 Next steps:")
    print("   1. Configure .env file with your settings")
    print("   2. Run: uvicorn vendor_console.main:app --reload --host 0.0.0.0 --port 8000")
    print("=" * 60)


if __name__ == "__main__":
    main()
