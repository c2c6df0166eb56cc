from __future__ import annotations

import logging
from typing import Any

import typer

from ipa_client.application.dtos.bag_dto import BagResultDTO
from ipa_client.application.dtos.lookup_dto import LookupResultDTO
from ipa_client.application.use_cases.fetch_bag import FetchBagUseCase
from ipa_client.application.use_cases.lookup_app import LookupAppUseCase
from ipa_client.config import settings
from ipa_client.exceptions import IpaClientError
from ipa_client.infrastructure.adapters.http.httpx_client import HttpxClient
from ipa_client.infrastructure.adapters.machine.system_machine import SystemMachine
from ipa_client.infrastructure.adapters.session.file_cookie_jar import FileCookieJar

app = typer.Typer(help="App Store HTTP client")

_machine = SystemMachine()


def build_client(result_type: Any) -> HttpxClient[Any]:
    jar = FileCookieJar(settings.cookie_path)
    return HttpxClient(result_type, cookie_jar=jar, max_redirects=settings.max_redirects)


def _fail(e: IpaClientError) -> typer.Exit:
    typer.echo(f"error: {e}", err=True)
    return typer.Exit(code=1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level.upper())


@app.command()
def bag() -> None:
    """Print the authentication endpoint advertised by the device bag."""
    try:
        with build_client(BagResultDTO) as client:
            out = FetchBagUseCase(client=client, machine=_machine).execute()
    except IpaClientError as e:
        raise _fail(e) from e
    typer.echo(out.auth_endpoint)


@app.command()
def lookup(
    bundle_id: str = typer.Option(..., "--bundle-identifier", "-b"),
    country: str = typer.Option("US", "--country", "-c"),
    device_family: str = typer.Option("iPhone", "--device-family", "-d"),
) -> None:
    """Print the App Store listing of a bundle identifier."""
    try:
        with build_client(LookupResultDTO) as client:
            found = LookupAppUseCase(client=client).execute(bundle_id, country, device_family)
    except IpaClientError as e:
        raise _fail(e) from e
    typer.echo(f"{found.name} ({found.bundle_id}) id={found.id} version={found.version} price={found.price}")
