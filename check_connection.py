"""
Database connectivity check. Connects with DATABASE_URL and prints the
server version.
Usage: python check_connection.py
"""
import asyncio
import os
import sys

from dotenv import load_dotenv

load_dotenv()

NETWORK_HINTS = (
    "connect call failed",
    "connection refused",
    "name or service not known",
    "timed out",
)


async def main() -> int:
    if not os.getenv("DATABASE_URL"):
        print("❌ ERROR: DATABASE_URL environment variable is not set.")
        return 1

    from database.session import check_connection, engine

    print("Attempting to connect to the database...")
    try:
        version = await check_connection()
    except Exception as exc:
        print("\n❌ CONNECTION FAILED!")
        print("--- Detailed Error ---")
        print(f"Error connecting to database: {exc}")
        cause = exc.__cause__ or exc.__context__
        text = f"{exc} {cause or ''}".lower()
        if isinstance(exc, OSError) or isinstance(cause, OSError) or any(
            hint in text for hint in NETWORK_HINTS
        ):
            print(
                "\n🔑 Likely cause: a network issue, incorrect URL format, "
                "or a DNS/firewall block."
            )
        return 1
    finally:
        await engine.dispose()

    print("✅ Connection successful!")
    print(f"Database version: {version}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
