#!/usr/bin/env python3
"""
Script to create or reset the admin account
"""
import asyncio
import getpass
import logging

from certifica.config.database import async_session, close_database
from certifica.core.validators import validate_password
from certifica.services.auth_service import AuthService

logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

async def create_admin(username: str, password: str) -> bool:
    """Create the admin account, or overwrite the existing credentials"""
    try:
        async with async_session() as session:
            admin = await AuthService(session).set_credentials(username, password)
        logger.info(f"Admin account ready: {admin.username} (ID: {admin.id})")
        return True
    finally:
        await close_database()

if __name__ == '__main__':
    print("=" * 60)
    print("CREATE ADMIN ACCOUNT")
    print("=" * 60)

    username = input("Enter username (default: admin): ").strip() or "admin"
    password = getpass.getpass("Enter password: ")

    try:
        validate_password(password)
    except ValueError as e:
        print(f"Invalid password: {e}")
        raise SystemExit(1)

    print()
    asyncio.run(create_admin(username, password))
