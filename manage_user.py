#!/usr/bin/env python3
"""
Promote a user to admin, or ban/unban them, by email.
Usage: python manage_user.py promote someone@example.com
       python manage_user.py ban someone@example.com
       python manage_user.py unban someone@example.com
"""

import asyncio
import sys

from dotenv import load_dotenv

# Settings read the environment on import
load_dotenv()

from app.db.database import SessionLocal  # noqa: E402
from app.domain.value_objects.email import Email  # noqa: E402
from app.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl  # noqa: E402

ACTIONS = ("promote", "ban", "unban")


async def manage_user(action: str, email: str) -> bool:
    db = SessionLocal()
    try:
        unit_of_work = UnitOfWorkImpl(db)
        async with unit_of_work:
            user = await unit_of_work.users.get_by_email(Email(email))
            if not user:
                print(f"User with email '{email}' not found")
                return False

            if action == "promote":
                user.promote_to_admin()
            elif action == "ban":
                user.ban()
            else:
                user.unban()
            await unit_of_work.users.update(user)
            await unit_of_work.commit()

        print(f"{user.email}: is_admin={user.is_admin}, is_banned={user.is_banned}")
        return True
    except ValueError as e:
        print(f"Error: {e}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 3 or sys.argv[1] not in ACTIONS:
        print(__doc__.strip())
        sys.exit(2)
    sys.exit(0 if asyncio.run(manage_user(sys.argv[1], sys.argv[2])) else 1)
