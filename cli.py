import asyncio

import typer

from src.core import exceptions
from src.core.config import settings
from src.core.database import create_tables, drop_tables
from src.core.logging_config import setup_logging
from src.apps.auth.dependencies import get_user_service

app = typer.Typer(help="Management commands for the posts API.")


# ---------------------------
# Commands
# ---------------------------
@app.command()
def init_db(
    fresh: bool = typer.Option(False, "--fresh", help="Drop all tables before creating them."),
):
    """Create the database tables."""
    async def _run():
        if fresh:
            await drop_tables()
        await create_tables()

    asyncio.run(_run())
    print(f"✅ Tables created on {settings.ASYNC_DATABASE_URL}")


@app.command()
def create_user(name: str, email: str):
    """Create a user and print its API token."""
    try:
        user, token = asyncio.run(get_user_service().create_user(name, email))
    except exceptions.AppException as e:
        print(f"❌ {e.detail}")
        raise typer.Exit(1)

    print(f"✅ Created user {user.id} <{user.email}>")
    print(f"🔑 API token (shown once): {token}")


@app.command()
def issue_token(email: str):
    """Replace a user's API token and print the new one."""
    try:
        token = asyncio.run(get_user_service().issue_token(email))
    except exceptions.AppException as e:
        print(f"❌ {e.detail}")
        raise typer.Exit(1)

    print(f"🔑 New API token for {email} (shown once): {token}")


@app.command()
def list_users():
    """List all users."""
    users = asyncio.run(get_user_service().list_users())
    if not users:
        print("📁 No users found.")
        return

    print("👥 Users:")
    for user in users:
        print(f"  {user.id:>4}  {user.name} <{user.email}>")


@app.callback()
def main():
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
