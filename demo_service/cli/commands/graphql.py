"""GraphQL schema and query commands."""

import json

import click
import httpx

from demo_service.cli.utils import coro, error, success
from demo_service.client import DEFAULT_URL, OPERATIONS, GraphQLClient


def _parse_header(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for value in values:
        name, sep, header_value = value.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected NAME:VALUE, got {value!r}", ctx=ctx, param=param)
        headers[name.strip()] = header_value.strip()
    return headers


@click.group(name="graphql")
def graphql() -> None:
    """GraphQL schema and query commands."""


@graphql.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to a file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from demo_service.features.graphql.schema import schema as graphql_schema

    sdl = graphql_schema.as_str()
    if output is None:
        click.echo(sdl)
        return

    with open(output, "w", encoding="utf-8") as fh:
        fh.write(sdl + "\n")
    success(f"Schema written to {output}")


@graphql.command()
@click.argument("operation", required=False, type=click.Choice(sorted(OPERATIONS)))
@click.option("--query", "-q", "document", default=None, help="Ad-hoc GraphQL document")
@click.option("--variables", "-v", default=None, help="Variables as a JSON object")
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    callback=_parse_header,
    help="Extra request header as NAME:VALUE (repeatable)",
)
@click.option("--url", default=DEFAULT_URL, show_default=True, help="GraphQL endpoint URL")
@coro
async def query(
    operation: str | None,
    document: str | None,
    variables: str | None,
    headers: dict[str, str],
    url: str,
) -> None:
    """Run a canned OPERATION or an ad-hoc --query against a running server.

    \b
    Examples:
      demo-service graphql query users
      demo-service graphql query movie -v '{"name": "Interstellar"}'
      demo-service graphql query -q '{ user(id: 1) { name } }' -H customHeader:testtest
    """
    if (operation is None) == (document is None):
        raise click.UsageError("Provide exactly one of OPERATION or --query")

    try:
        parsed_variables = json.loads(variables) if variables else None
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint="--variables") from exc

    click.secho(f"ℹ POST {url}", fg="blue", err=True)
    async with GraphQLClient(url, headers=headers) as client:
        try:
            body = await client.execute(document or OPERATIONS[operation], parsed_variables)
        except httpx.HTTPError as exc:
            error(f"Request failed: {exc}")
            raise click.exceptions.Exit(1) from exc

    click.echo(json.dumps(body, indent=2))
    if body.get("errors"):
        raise click.exceptions.Exit(1)
