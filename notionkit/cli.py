import json
import logging
import logging.config
from typing import Any

import click
from pydantic_core import to_jsonable_python

from notionkit import blocks
from notionkit.client import Client
from notionkit.errors import NotionError
from notionkit.objects import SearchFilter, SearchRequest, Sort

LOGGING_CONFIG = {
    "version": 1,
    "formatters": {
        "brief": {"format": "%(message)s"},
        "default": {
            "format": "%(asctime)s %(levelname)-8s %(name)-15s %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "notionkit": {"level": logging.INFO, "handlers": ["console"]},
    },
}

logger = logging.getLogger(__name__)


def _echo(value: Any) -> None:
    click.echo(json.dumps(to_jsonable_python(value), indent=2, ensure_ascii=False))


def _client(ctx: click.Context) -> Client:
    try:
        return ctx.obj["client_factory"]()
    except RuntimeError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="notionkit")
@click.option("-v", "--verbose", is_flag=True, help="Log requests and responses.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    "Read and write Notion pages, databases and blocks."
    logging.config.dictConfig(LOGGING_CONFIG)
    if verbose:
        logging.getLogger("notionkit").setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj.setdefault("client_factory", Client.from_env)


@cli.command(name="search")
@click.argument("query", required=False)
@click.option(
    "-f",
    "--filter",
    "filter_value",
    type=click.Choice(["page", "database"]),
    help="Only return pages or databases.",
)
@click.option(
    "-s",
    "--sort",
    "direction",
    type=click.Choice(["ascending", "descending"]),
    help="Order by last edited time.",
)
@click.option("-n", "--page-size", type=int, help="Max number of results.")
@click.option("-c", "--start-cursor", help="Cursor from a previous response.")
@click.pass_context
def search(ctx, query, filter_value, direction, page_size, start_cursor):
    request = SearchRequest(
        query=query,
        sort=Sort(direction=direction) if direction else None,
        filter=SearchFilter(value=filter_value) if filter_value else None,
        start_cursor=start_cursor,
        page_size=page_size,
    )
    try:
        _echo(_client(ctx).search(request))
    except NotionError as e:
        raise click.ClickException(str(e)) from e


@cli.command(name="children")
@click.argument("block_id")
@click.option("-c", "--start-cursor", help="Cursor from a previous response.")
@click.pass_context
def children(ctx, block_id, start_cursor):
    try:
        _echo(_client(ctx).list_children(block_id, start_cursor=start_cursor))
    except NotionError as e:
        raise click.ClickException(str(e)) from e


@cli.command(name="page")
@click.argument("page_id")
@click.pass_context
def page(ctx, page_id):
    try:
        _echo(_client(ctx).retrieve_page(page_id))
    except NotionError as e:
        raise click.ClickException(str(e)) from e


@cli.command(name="database")
@click.argument("database_id")
@click.pass_context
def database(ctx, database_id):
    try:
        _echo(_client(ctx).retrieve_database(database_id))
    except NotionError as e:
        raise click.ClickException(str(e)) from e


@cli.command(name="append")
@click.argument("block_id")
@click.argument("paragraphs", nargs=-1, required=True)
@click.pass_context
def append(ctx, block_id, paragraphs):
    """Append PARAGRAPHS as paragraph blocks to BLOCK_ID."""
    children = [blocks.paragraph(text) for text in paragraphs]
    try:
        _echo(_client(ctx).append_children(block_id, children))
    except NotionError as e:
        raise click.ClickException(str(e)) from e

    logger.info(f"Appended {len(children)} block(s) to {block_id}")


if __name__ == "__main__":
    cli()
