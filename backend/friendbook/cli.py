"""
Friendbook CLI - terminal front end for the friends API.

``friendbook list`` shows everyone (optionally filtered), ``friendbook add``
walks through the new-friend form, ``friendbook serve`` runs the API.
"""

import httpx
import typer
from rich.console import Console
from rich.table import Table

from friendbook.client import ApiError, FriendsClient
from friendbook.core.config import settings
from friendbook.schemas.friend import FriendRead
from friendbook.ui.friends_page import AddFriendForm, FormError, FriendsPage, initials


console = Console()

app = typer.Typer(
    name="friendbook",
    help="Keep track of your friends.",
    no_args_is_help=True,
)


def _client(api_url: str | None) -> FriendsClient:
    return FriendsClient(base_url=api_url or settings.api_base_url)


def _print_friends(friends: list[FriendRead]) -> None:
    table = Table(show_header=True, header_style="bold")
    for column in ("", "Name", "Title", "Email", "X", "Instagram"):
        table.add_column(column)
    for friend in friends:
        table.add_row(
            initials(friend.name),
            friend.name,
            friend.title or "No title",
            friend.email,
            friend.x_username or "",
            friend.instagram_username or "",
        )
    console.print(table)


@app.command("list")
def list_friends(
    search: str = typer.Option("", "--search", "-s", help="Filter by name, title, email or handle"),
    api_url: str = typer.Option(None, "--api-url", help="Base URL of the friends API"),
):
    """List your friends."""
    with _client(api_url) as client:
        page = FriendsPage(client)
        page.load()
        page.query = search
        page.close()

    if page.error:
        console.print(page.error, style="red", soft_wrap=True, markup=False)
        raise typer.Exit(code=1)

    friends = page.filtered()
    if not friends:
        console.print("[dim]No friends found.[/dim]")
        return
    _print_friends(friends)


@app.command("add")
def add_friend(
    name: str = typer.Option(..., "--name", prompt="Name"),
    email: str = typer.Option(..., "--email", prompt="Email"),
    title: str = typer.Option("", "--title", prompt="Title (optional)", show_default=False),
    phone_number: str = typer.Option("", "--phone", prompt="Phone (optional)", show_default=False),
    x_username: str = typer.Option("", "--x", prompt="X username (optional)", show_default=False),
    instagram_username: str = typer.Option(
        "", "--instagram", prompt="Instagram username (optional)", show_default=False
    ),
    api_url: str = typer.Option(None, "--api-url", help="Base URL of the friends API"),
):
    """Add a new friend."""
    try:
        form = AddFriendForm.parse(
            name=name,
            email=email,
            title=title,
            phone_number=phone_number,
            x_username=x_username,
            instagram_username=instagram_username,
        )
    except FormError as exc:
        for field_name, message in exc.errors.items():
            console.print(f"{field_name}: {message}", style="red", soft_wrap=True, markup=False)
        raise typer.Exit(code=2)

    with _client(api_url) as client:
        try:
            created = form.submit(client)
        except (ApiError, httpx.HTTPError) as exc:
            console.print(str(exc), style="red", soft_wrap=True, markup=False)
            raise typer.Exit(code=1)

    console.print(f"[green]Added[/green] {created.name} (#{created.id})")
    _print_friends([created])


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
    reload: bool = typer.Option(False, "--reload"),
):
    """Run the friends API."""
    import uvicorn

    uvicorn.run("friendbook.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
