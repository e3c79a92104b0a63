"""linklist CLI - Click command definition and main entry point."""

from __future__ import annotations

import asyncio

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from linklist.errors import LinklistError
from linklist.extract import LinkSelection, extract_links
from linklist.fetch import fetch_page
from linklist.format import DisplayMode
from linklist.origin import resolve_base_path, resolve_origin
from linklist.output import links_to_json, print_links
from linklist.scan import scan
from linklist.utils import ensure_scheme

console = Console(stderr=True)


@click.command()
@click.argument("url")
@click.option("-p", "--path", "as_path", is_flag=True,
              help="Show as relative paths instead of full URL")
@click.option("-l", "--login", is_flag=True,
              help="Provide login credentials interactively")
@click.option("--user-name", envvar="LINKLIST_USER", default=None,
              help="Server login username")
@click.option("--password", envvar="LINKLIST_PASSWORD", default=None,
              help="Server login password")
@click.option("-d", "--disable-ssl-verify", is_flag=True,
              help="Allow invalid certificates")
@click.option("-f", "--file-type", default=None,
              help="Also list files of a particular type <all/png/..>")
@click.option("--color", is_flag=True, help="Colorise results by category")
@click.option("--json", "as_json", is_flag=True, help="Print links as JSON")
@click.option("--timeout", default=30, help="Request timeout in seconds")
@click.option("-v", "--verbose", is_flag=True, help="Verbose progress output")
@click.version_option(package_name="linklist")
def main(
    url: str,
    as_path: bool,
    login: bool,
    user_name: str | None,
    password: str | None,
    disable_ssl_verify: bool,
    file_type: str | None,
    color: bool,
    as_json: bool,
    timeout: int,
    verbose: bool,
):
    """List local links within a webpage by parsing for 'href' tags.

    URL may omit the scheme, in which case http:// is assumed.

    \b
    Examples:
        linklist https://example.com              # page links
        linklist example.com/docs/ --path         # paths without domain
        linklist https://example.com -f all       # pages and every file
        linklist https://example.com -f png       # only .png files
        linklist https://example.com --login      # prompt for credentials
    """
    url = ensure_scheme(url)

    # Fail on a malformed URL before prompting or fetching
    try:
        origin = resolve_origin(url)
    except LinklistError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        console.print(f"[dim]Origin: {origin}[/dim]")
        console.print(f"[dim]Base: {resolve_base_path(url)}[/dim]")

    if login:
        if not user_name:
            user_name = click.prompt("Username", err=True)
        password = click.prompt("Password", hide_input=True, err=True)

    selection = LinkSelection.from_file_type(file_type)
    display_mode = DisplayMode.RELATIVE if as_path else DisplayMode.ABSOLUTE

    try:
        with Progress(
            SpinnerColumn(), TextColumn("[progress.description]{task.description}"),
            console=console, transient=True,
        ) as progress:
            if verbose:
                progress.add_task(description="Fetching...", total=None)

            result = asyncio.run(fetch_page(
                url,
                timeout=timeout,
                verify_ssl=not disable_ssl_verify,
                username=user_name,
                password=password,
            ))

        if verbose:
            console.print(f"[dim]Fetched {result.url} (status {result.status})[/dim]")
            candidates = sum(1 for _ in scan(result.html))
            console.print(f"[dim]Scanned {candidates} href candidates[/dim]")

        entries = extract_links(result.html, url, selection, display_mode)
    except LinklistError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        console.print(f"[dim]Found {len(entries)} links[/dim]")

    if as_json:
        click.echo(links_to_json(entries).decode())
    else:
        print_links(entries, Console(), color=color)


if __name__ == "__main__":
    main()
