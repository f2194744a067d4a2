#!/usr/bin/env python3
"""
Check that the configured store is reachable.

Builds the store from the environment (.env is honoured), prints which
backend is in use and the current number of waitlist signups.

Usage:
  python scripts/check_store.py
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.infrastructure.db.store import build_store


async def check_store() -> bool:
    settings = get_settings()
    print(f"Store backend: {settings.store_backend}")
    store = build_store(settings)
    if store is None:
        print("❌ Store credentials are not configured")
        return False
    try:
        async with store.uow_factory() as uow:
            count = await uow.early_access_requests.count()
    except Exception as e:
        print(f"❌ Query failed: {e}")
        return False
    finally:
        await store.dispose()
    print(f"✅ Connection works! {count} people have joined the waitlist")
    return True


if __name__ == "__main__":
    ok = asyncio.run(check_store())
    sys.exit(0 if ok else 1)
