"""fobkeys CLI application with Typer."""

from pathlib import Path
from typing import Annotated, NoReturn

import typer

from fobkeys import __version__
from fobkeys.bootstrap import build_verifier, open_generator
from fobkeys.config import get_settings, set_settings
from fobkeys.errors import FobKeyError, InvalidKey
from fobkeys.utils.cli_output import json_response
from fobkeys.utils.license_url import build_license_url, parse_license_url

app = typer.Typer(
    name="fobkeys",
    help="Generate and verify DSA-signed registration keys",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"fobkeys version {__version__}")
        raise typer.Exit()


def _fail(message: str, *, code: int = 2) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    url_scheme: Annotated[
        str | None,
        typer.Option("--scheme", help="URL scheme for registration links"),
    ] = None,
) -> None:
    """fobkeys - registration keys for licensee names."""
    settings = get_settings()
    if url_scheme:
        settings.url_scheme = url_scheme
    set_settings(settings)


@app.command("generate")
def generate(
    name: Annotated[str, typer.Argument(help="Licensee name the key is bound to")],
    private_key: Annotated[
        Path | None,
        typer.Option("--private-key", "-k", help="DSA private key PEM file"),
    ] = None,
    url: Annotated[
        bool,
        typer.Option("--url", help="Also print a registration URL"),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """Generate a registration key for NAME.

    DSA signatures are randomized, so each run prints a different key for the
    same name. Every one of them verifies.

    Example:
        fobkeys generate "Jane Appleseed" --private-key dsa_priv.pem
    """
    settings = get_settings()
    scheme = settings.url_scheme
    if url and not scheme:
        _fail("--url requires a URL scheme. Pass --scheme or set FOBKEYS_URL_SCHEME.")

    try:
        with open_generator(settings, private_key_path=private_key) as generator:
            key = generator.generate(name)
    except FobKeyError as exc:
        _fail(str(exc))

    license_url = None
    if url and scheme:
        try:
            license_url = build_license_url(scheme, name, key)
        except ValueError as exc:
            _fail(str(exc))

    if json_output:
        payload: dict[str, str] = {"name": name, "key": key}
        if license_url is not None:
            payload["url"] = license_url
        typer.echo(json_response("registration_key", 1, **payload))
        return

    typer.echo(key)
    if license_url is not None:
        typer.echo(license_url)


def _report_verification(name: str, key: str, valid: bool, json_output: bool) -> None:
    if json_output:
        typer.echo(json_response("verification", 1, name=name, key=key, valid=valid))
    elif valid:
        typer.secho(f"Valid registration key for {name}", fg=typer.colors.GREEN)
    else:
        typer.secho(f"Invalid registration key for {name}", fg=typer.colors.RED, err=True)

    if not valid:
        raise typer.Exit(code=1)


@app.command("verify")
def verify(
    name: Annotated[str, typer.Argument(help="Licensee name")],
    key: Annotated[str, typer.Argument(help="Registration key to check")],
    public_key: Annotated[
        Path | None,
        typer.Option("--public-key", "-p", help="DSA public key PEM file"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """Check that KEY is an authentic registration key for NAME.

    Exits with status 1 when the key does not verify.
    """
    try:
        verifier = build_verifier(get_settings(), public_key_path=public_key)
    except InvalidKey as exc:
        _fail(str(exc))

    _report_verification(name, key, verifier.verify(name, key), json_output)


@app.command("verify-url")
def verify_url(
    url: Annotated[str, typer.Argument(help="Registration URL")],
    public_key: Annotated[
        Path | None,
        typer.Option("--public-key", "-p", help="DSA public key PEM file"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """Check the name and key carried by a registration URL."""
    try:
        verifier = build_verifier(get_settings(), public_key_path=public_key)
    except InvalidKey as exc:
        _fail(str(exc))

    try:
        parsed = parse_license_url(url)
    except FobKeyError as exc:
        _fail(str(exc), code=1)

    _report_verification(parsed.name, parsed.key, verifier.verify_url(url), json_output)


if __name__ == "__main__":
    app()
