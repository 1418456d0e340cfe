"""Command-line interface for netrcfile."""

from pathlib import Path
import click

from .errors import NetrcError
from .files import load, resolve_path, save
from .netrc import DEFAULT, Entries, Entry, find_entry


def _host_key(host: str) -> str:
    # "default" on the command line addresses the default entry
    return DEFAULT if host == "default" else host


def _host_label(key: str) -> str:
    return "default" if key == DEFAULT else key


def _load(path: Path) -> Entries:
    try:
        return load(path)
    except (NetrcError, OSError) as e:
        raise click.ClickException(str(e))


def _save(entries: Entries, path: Path) -> None:
    try:
        save(entries, path)
    except NetrcError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"Failed to write {path}: {e}")


def _echo_entry(entry: Entry, indent: str = "  ") -> None:
    if entry.login:
        click.echo(f"{indent}Login:   {entry.login}")
    if entry.account:
        click.echo(f"{indent}Account: {entry.account}")
    if entry.password:
        click.echo(f"{indent}Pass:    {'*' * len(entry.password)}")


netrc_option = click.option(
    "--netrc",
    "netrc_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to .netrc file (default: $NETRC or ~/.netrc)",
)


@click.group()
@click.version_option(package_name="netrcfile")
def main():
    """netrcfile - Read and edit .netrc credential files."""
    pass


@main.command()
@netrc_option
def path(netrc_path: Path | None):
    """Print the path of the .netrc file in use."""
    click.echo(str(resolve_path(netrc_path)))


@main.command()
@netrc_option
@click.option(
    "--host",
    help="Show credentials used for this host (falls back to default)",
)
def show(netrc_path: Path | None, host: str | None):
    """Show stored credentials (passwords masked)."""
    netrc_path = resolve_path(netrc_path)
    entries = _load(netrc_path)

    click.echo(f"Reading: {netrc_path}")
    click.echo()

    if host:
        entry = find_entry(entries, _host_key(host))
        if entry is None:
            raise click.ClickException(f"No credentials found for: {host}")
        _echo_entry(entry)
        return

    if not entries:
        click.echo("No credentials found.")
        return

    for key, entry in entries.items():
        click.echo(f"  {_host_label(key)}")
        _echo_entry(entry, indent="    ")
        click.echo()


@main.command(name="set")
@click.argument("host")
@netrc_option
@click.option("--login", "-l", help="Login name")
@click.option("--password", "-p", help="Password")
@click.option("--account", "-a", help="Account name")
def set_cmd(
    host: str,
    netrc_path: Path | None,
    login: str | None,
    password: str | None,
    account: str | None,
):
    """Add or update the entry for HOST ("default" for the default entry)."""
    if login is None and password is None and account is None:
        raise click.UsageError("Give at least one of --login, --password, --account")

    netrc_path = resolve_path(netrc_path)
    entries = _load(netrc_path)

    entry = entries.setdefault(_host_key(host), Entry())
    if login is not None:
        entry.login = login
    if password is not None:
        entry.password = password
    if account is not None:
        entry.account = account

    _save(entries, netrc_path)
    click.echo(f"Saved: {host}")


@main.command()
@click.argument("host")
@netrc_option
def remove(host: str, netrc_path: Path | None):
    """Remove the entry for HOST ("default" for the default entry)."""
    netrc_path = resolve_path(netrc_path)
    entries = _load(netrc_path)

    if entries.pop(_host_key(host), None) is None:
        raise click.ClickException(f"No entry for: {host}")

    _save(entries, netrc_path)
    click.echo(f"Removed: {host}")


if __name__ == "__main__":
    main()
