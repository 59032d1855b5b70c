"""Command line interface entry point."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click
import httpx

from .client import AuthenticationError, authenticate, fetch_spec
from .codegen import render_base, render_declarations, write_output
from .config import (
    DEFAULT_ALL_TYPE_NAME,
    DEFAULT_APP_TYPE_NAME,
    DEFAULT_DIRECTUS_TYPE_NAME,
    ConfigurationError,
    GeneratorOptions,
)
from .context_builder import build_context
from .loader import SpecError, assert_spec_has_no_errors, dump_spec

EXIT_FAILURE = 1
EXIT_SPEC_ERRORS = 3


class CliError(Exception):
    """Custom CLI error."""


async def run(
    options: GeneratorOptions,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[Path, int]:
    """Authenticate, fetch the spec and write the declaration file.

    Returns the written path and the number of collections.
    """
    options.validate()
    async with httpx.AsyncClient(transport=transport, timeout=None) as client:
        token = await authenticate(
            client,
            options.host,
            options.email,
            options.password,
            options.password_is_static_token,
        )
        spec = await fetch_spec(client, options.host, token)

    assert_spec_has_no_errors(spec)

    if options.spec_out_file:
        dump_spec(spec, options.spec_out_file)

    context = build_context(spec, options)
    source = render_declarations(context, render_base(context))
    output_path = write_output(source, options.out_file)
    return output_path, context["collection_count"]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--host", required=True, envvar="DIRECTUS_HOST", help="Base URL of the Directus instance")
@click.option("--email", required=True, envvar="DIRECTUS_EMAIL", help="Login email")
@click.option("--password", required=True, envvar="DIRECTUS_PASSWORD", help="Login password or static token")
@click.option(
    "--passwordIsStaticToken",
    "password_is_static_token",
    is_flag=True,
    default=False,
    help="Use --password directly as the bearer token instead of logging in",
)
@click.option(
    "--appTypeName",
    "--typeName",
    "app_type_name",
    default=DEFAULT_APP_TYPE_NAME,
    show_default=True,
    help="Name of the aggregate type for app collections",
)
@click.option(
    "--directusTypeName",
    "directus_type_name",
    default=DEFAULT_DIRECTUS_TYPE_NAME,
    show_default=True,
    help="Name of the aggregate type for system collections",
)
@click.option(
    "--allTypeName",
    "all_type_name",
    default=DEFAULT_ALL_TYPE_NAME,
    show_default=True,
    help="Name of the aggregate type combining both",
)
@click.option(
    "--specOutFile",
    "spec_out_file",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to dump the fetched OpenAPI spec",
)
@click.option(
    "--outFile",
    "out_file",
    required=True,
    type=click.Path(path_type=str),
    help="Path of the TypeScript declaration file to write",
)
@click.option(
    "--wrapGlobal/--no-wrapGlobal",
    "wrap_global",
    default=True,
    show_default=True,
    help="Wrap the output in a `declare global` block",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log HTTP and file activity")
def cli(verbose: bool, **kwargs: object) -> None:
    """Generate TypeScript types from a Directus OpenAPI spec."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    options = GeneratorOptions(**kwargs)  # type: ignore[arg-type]
    try:
        output_path, count = asyncio.run(run(options))
    except (AuthenticationError, ConfigurationError, httpx.HTTPError, ValueError, OSError) as exc:
        raise CliError(str(exc) or exc.__class__.__name__) from exc
    click.echo(f"Generated {output_path} ({count} collections)")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except SpecError as exc:
        click.echo(str(exc), err=True)
        return EXIT_SPEC_ERRORS
    except CliError as exc:
        click.echo(str(exc), err=True)
        return EXIT_FAILURE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
