"""CLI entry point for prismic-client."""

import asyncio
import json
import logging

import click
import yaml

from prismic_client.errors import PrismicError
from prismic_client.models.api import ApiDescriptor
from prismic_client.pipeline import Model, fetch_api, submit
from prismic_client.predicates import Predicate, any_in, at, at_in, fulltext
from prismic_client.render.html import render_document
from prismic_client.render.nodes import to_html
from prismic_client.request import RequestBuilder, bookmark, form
from prismic_client.settings import get_settings
from prismic_client.transport import RequestsTransport


def _describe_api(api: ApiDescriptor) -> dict:
    """Summary of a descriptor for printing."""
    return {
        "version": api.version,
        "refs": [
            {"id": r.id, "label": r.label, "ref": r.ref, "master": r.is_master}
            for r in api.refs
        ],
        "forms": {
            form_id: {"name": f.name, "action": f.action, "fields": sorted(f.fields)}
            for form_id, f in api.forms.items()
        },
        "bookmarks": dict(api.bookmarks),
        "types": dict(api.types),
        "tags": list(api.tags),
    }


def _build_request(
    form_id: str,
    ref_id: str | None,
    bookmark_name: str | None,
    predicates: list[Predicate],
) -> RequestBuilder:
    builder = bookmark(bookmark_name) if bookmark_name else form(form_id)
    if ref_id:
        builder = builder.ref(ref_id)
    if predicates:
        builder = builder.query(predicates)
    return builder


def _collect_predicates(ats, at_ins, anys, fulltexts) -> list[Predicate]:
    predicates: list[Predicate] = [at(f, v) for f, v in ats]
    predicates += [at_in(f, _split(v)) for f, v in at_ins]
    predicates += [any_in(f, _split(v)) for f, v in anys]
    predicates += [fulltext(f, v) for f, v in fulltexts]
    return predicates


def _split(values: str) -> list[str]:
    return [v.strip() for v in values.split(",") if v.strip()]


def _resolve_url(url: str | None) -> str:
    url = url or get_settings().api_url
    if not url:
        raise click.UsageError("No API URL given (pass URL or set PRISMIC_API_URL).")
    return url


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
def main(verbose: bool):
    """Prismic client: query a repository and render its documents."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("url", required=False)
@click.option("--format", "fmt", default="yaml", type=click.Choice(["yaml", "json"]), help="Output format.")
def api(url: str | None, fmt: str):
    """Fetch and print a repository's API descriptor."""
    model = Model(api_url=_resolve_url(url))
    transport = RequestsTransport()
    try:
        model = asyncio.run(fetch_api(model, transport))
    except PrismicError as e:
        raise click.ClickException(str(e))
    finally:
        transport.close()

    summary = _describe_api(model.api)
    if fmt == "json":
        click.echo(json.dumps(summary, indent=2))
    else:
        click.echo(yaml.safe_dump(summary, sort_keys=False, allow_unicode=True))


@main.command()
@click.argument("url", required=False)
@click.option("--form", "form_id", default="everything", help="Form to submit.")
@click.option("--ref", "ref_id", default=None, help="Ref id to query (default: master).")
@click.option("--bookmark", "bookmark_name", default=None, help="Fetch the document behind a bookmark.")
@click.option("--at", "ats", nargs=2, multiple=True, help="at(FRAGMENT, VALUE) predicate.")
@click.option("--at-in", "at_ins", nargs=2, multiple=True, help="at(FRAGMENT, [VALUES]) predicate, comma-separated values.")
@click.option("--any", "anys", nargs=2, multiple=True, help="any(FRAGMENT, [VALUES]) predicate, comma-separated values.")
@click.option("--fulltext", "fulltexts", nargs=2, multiple=True, help="fulltext(FRAGMENT, VALUE) predicate.")
@click.option("--html", "as_html", is_flag=True, help="Render each document to HTML.")
def query(url, form_id, ref_id, bookmark_name, ats, at_ins, anys, fulltexts, as_html):
    """Submit a query and print the matching documents."""
    model = Model(api_url=_resolve_url(url))
    predicates = _collect_predicates(ats, at_ins, anys, fulltexts)
    builder = _build_request(form_id, ref_id, bookmark_name, predicates)

    transport = RequestsTransport()
    try:
        response, _ = asyncio.run(submit(model, builder, transport))
    except PrismicError as e:
        raise click.ClickException(str(e))
    finally:
        transport.close()

    click.echo(f"Found {response.total_results_size} documents (page {response.page}/{response.total_pages}).")
    for result in response.results:
        click.echo(f"- {result.type} {result.id} {result.uid or ''}".rstrip())
        if as_html:
            click.echo(to_html(render_document(result.data)))
