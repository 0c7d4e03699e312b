"""
Seed a demo user with one open account.
Creates user "Pobi" holding an account with a balance of 10000.
"""
import asyncio

from account_server.core.config import get_settings
from account_server.infrastructure.database.session import dispose_engine, init_db, session_scope
from account_server.modules.accounts import AccountService

DEMO_USER_ID = 1


async def create_default_account():
    """Create the demo user and account unless they already exist."""
    await init_db()
    try:
        await _seed()
    finally:
        await dispose_engine()


async def _seed():
    settings = get_settings()
    async with session_scope() as db:
        service = AccountService.with_session(db, max_accounts_per_user=settings.max_accounts_per_user)

        user = await service.find_account_user(DEMO_USER_ID)
        if user is None:
            user = await service.create_account_user("Pobi")
        else:
            accounts = await service.get_accounts_by_user_id(user.id)
            if accounts:
                print(f"Demo account already exists: {user.name} / {accounts[0].account_number}")
                return

        result = await service.create_account(user.id, 10000)
        print(f"Demo account created: {user.name} (id {result.user_id}) / {result.account_number}")


if __name__ == "__main__":
    asyncio.run(create_default_account())
