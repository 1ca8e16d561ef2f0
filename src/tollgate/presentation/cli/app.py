"""Tollgate CLI application using Typer.

This module provides command-line utilities for the Tollgate backend:
secret generation, schema creation, role management and serving the API.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console

from tollgate.domain.user import UserNotFoundError, UserRole
from tollgate.infrastructure.persistence.sqlalchemy import (
    UserProfileRepositorySQLAlchemy,
    create_engine,
    create_session_maker,
    create_tables,
)
from tollgate_config.settings import get_settings

app = typer.Typer(
    name="tollgate",
    help="Tollgate - JWT authentication service CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

users_app = typer.Typer(
    name="users",
    help="User administration",
    no_args_is_help=True,
)
app.add_typer(users_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a signing secret for the Tollgate configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Tollgate Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secret for your [bold].env[/bold] configuration file:\n"
    )

    # 64 random bytes for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET[/cyan]={jwt_secret}", soft_wrap=True)

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above value to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _init_db() -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_db() -> None:
    """Create all missing database tables."""
    asyncio.run(_init_db())
    console.print("[green]Database schema is up to date.[/green]")


async def _set_role(email: str, role: UserRole) -> str:
    settings = get_settings()
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    try:
        await create_tables(engine)
        async with create_session_maker(engine)() as session:
            repo = UserProfileRepositorySQLAlchemy(session)
            profile = await repo.find_by_email(email)
            if profile is None:
                raise UserNotFoundError(email)
            updated = await repo.update(profile.id, role=role)
            await session.commit()
            return updated.role.value
    finally:
        await engine.dispose()


@users_app.command("set-role")
def set_role(
    email: str = typer.Argument(..., help="Email of the user to update"),
    role: UserRole = typer.Argument(..., help="New role"),
) -> None:
    """Promote or demote a user.

    Existing access tokens keep the old role until they expire.
    """
    try:
        new_role = asyncio.run(_set_role(email, role))
    except UserNotFoundError:
        console.print(f"[red]No user with email {email}[/red]")
        raise typer.Exit(code=1) from None

    console.print(f"[green]{email}[/green] now has role [bold]{new_role}[/bold]")


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "tollgate.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
