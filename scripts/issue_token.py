#!/usr/bin/env python3
"""Mint a session token for an existing user.

Usage:
  export DATABASE_URL=... JWT_PRIVATE_KEY_PATH=... JWT_PUBLIC_KEY_PATH=...
  uv run python scripts/issue_token.py --user-id 42

Prints the token; send it as `Authorization: Bearer <token>` or the `jwt` cookie.
"""
from __future__ import annotations

import argparse
import asyncio
import sys

from edugate.config import get_settings
from edugate.infrastructure.auth.jwt_provider import JWTProvider
from edugate.infrastructure.persistence.postgres.connection import create_pool
from edugate.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)


async def role_of(user_id: int) -> int | None:
    settings = get_settings()
    async with create_pool(settings.database_url) as pool:
        async with create_uow_factory(pool)() as uow:
            user = await uow.users.get_by_id(user_id)
    return user.role_id if user else None


def main() -> int:
    parser = argparse.ArgumentParser(description="Issue a session token")
    parser.add_argument("--user-id", type=int, required=True)
    args = parser.parse_args()

    role_id = asyncio.run(role_of(args.user_id))
    if role_id is None:
        print(f"User {args.user_id} not found", file=sys.stderr)
        return 1

    provider = JWTProvider.from_settings(get_settings())
    print(provider.create_token(args.user_id, role_id))
    return 0


if __name__ == "__main__":
    sys.exit(main())
