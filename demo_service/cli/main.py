"""Main CLI entry point for demo-service management commands."""

import click

from demo_service import __version__
from demo_service.cli.commands import graphql, server
from demo_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="demo-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Demo Service CLI - run the GraphQL server and talk to it.

    \b
    Command Groups:
      server     Run the API server
      graphql    Print the schema, run queries against a server

    \b
    Quick Start:
      demo-service server run              # Serve on APP_HOST:APP_PORT
      demo-service graphql schema          # Print the SDL
      demo-service graphql query users     # Run the GetAllUsers operation
    """
    ctx.ensure_object(dict)


cli.add_command(server.server)
cli.add_command(graphql.graphql)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
