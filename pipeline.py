"""zaurnews CLI: the Zaur news panel backend."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

import click

from zaurnews.commentary.generator import header_thought
from zaurnews.config import settings
from zaurnews.db import open_store
from zaurnews.discovery import check_for_time_based_discoveries, discover_new_item
from zaurnews.ingest.balance import build_feed
from zaurnews.ingest.sources import CATEGORIES, sources_for
from zaurnews.panel import mark_discovered_items, process_news_items, rotate_items, sort_with_discoveries_at_top
from zaurnews.updater import run_update


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level.")
def cli(verbose):
    """zaurnews: fetch, balance and comment on tech news.

        \b
        pipeline.py ingest          # 1. Fetch all sources into the store
        pipeline.py list            # 2. Review stored items
        pipeline.py feed            # 3. Render the balanced, commented panel
        pipeline.py discover        # 4. Run the scheduled discovery check
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Ingest
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--category", default=None, type=click.Choice(list(CATEGORIES)), help="Only fetch one category.")
@click.option("--max-items", default=None, type=int, help="Items to keep after pruning.")
def ingest(category, max_items):
    """Fetch every source and merge the results into the store."""
    with open_store(settings) as store:
        result = asyncio.run(run_update(store, sources=sources_for(category), max_items=max_items))
        click.echo(f"Added {result.added}, updated {result.updated}, {result.total} items stored.")
        click.echo("\nNewest 5:")
        for item in store.query(category)[:5]:
            click.echo(f"  {item.publish_date:%Y-%m-%d %H:%M}  [{item.source_id:<18}] {item.title[:60]}")


@cli.command()
@click.option("--max-items", default=None, type=int, help="Items to keep.")
def prune(max_items):
    """Drop the oldest items beyond the configured maximum."""
    with open_store(settings) as store:
        removed = store.prune(settings.max_news_items if max_items is None else max_items)
    click.echo(f"Pruned {removed} items.")


# ---------------------------------------------------------------------------
# Review
# ---------------------------------------------------------------------------


@cli.command("list")
@click.option("--category", default=None, help="Filter by category.")
@click.option("--limit", default=20, help="Max items to show.")
def list_items(category, limit):
    """Show stored items, newest first."""
    with open_store(settings) as store:
        items = store.query(category)

    if not items:
        click.echo("No items found. Run 'ingest' first.")
        return

    for item in items[:limit]:
        click.echo(f"  {item.publish_date:%Y-%m-%d %H:%M}  {item.source_id:<18} {item.title[:55]}")
        click.echo(f"             ID: {item.id}  URL: {item.url[:60]}")

    if len(items) > limit:
        click.echo(f"\n  ... and {len(items) - limit} more. Use --limit to show more.")


@cli.command()
@click.argument("item_id")
def show(item_id):
    """Show full details for an item (by ID or ID prefix)."""
    with open_store(settings) as store:
        item = store.get(item_id)
        if item is None:
            matches = [i for i in store.query() if i.id.startswith(item_id)]
            if not matches:
                click.echo(f"No item matching '{item_id}'.")
                return
            if len(matches) > 1:
                click.echo(f"Ambiguous ID prefix '{item_id}' matches {len(matches)} items.")
                return
            item = matches[0]
        comment = store.get_comment(item.id)

    click.echo(f"Title:     {item.title}")
    click.echo(f"Source:    {item.source} ({item.source_id})")
    click.echo(f"Category:  {item.category}")
    click.echo(f"URL:       {item.url}")
    click.echo(f"Published: {item.publish_date.isoformat()}")
    click.echo(f"Author:    {item.author or '-'}")
    click.echo(f"\n{item.summary}")
    if comment:
        click.echo(f"\nZaur: {comment}")


@cli.command()
def comments():
    """List the saved commentary."""
    with open_store(settings) as store:
        saved = store.list_comments()
    if not saved:
        click.echo("No comments saved yet.")
        return
    for c in saved:
        click.echo(f"  {c.timestamp:%Y-%m-%d %H:%M}  {c.item_id:<28} {c.comment[:70]}")


# ---------------------------------------------------------------------------
# Panel
# ---------------------------------------------------------------------------


def _render_panel(store, category, limit=None):
    now = datetime.now(timezone.utc)
    feed, synthetic = build_feed(store.query(category), sources_for(category), now=now)
    saved = store.comment_map()
    discoveries = store.list_discoveries()

    items = process_news_items(feed, saved)
    items, _ = mark_discovered_items(items, discoveries, saved, now)
    if limit:
        items = rotate_items(items, now, limit)
    return sort_with_discoveries_at_top(items, discoveries), synthetic


@cli.command()
@click.option("--category", default=None, help="Filter by category.")
@click.option("--limit", default=None, type=int, help="Show this hour's rotation of N items.")
def feed(category, limit):
    """Render the balanced feed with Zaur's commentary."""
    with open_store(settings) as store:
        items, synthetic = _render_panel(store, category, limit)

    click.echo(header_thought(datetime.now(timezone.utc)))
    if synthetic:
        click.echo("(no stored news yet, showing placeholders)")
    for item in items:
        marker = "*" if item.is_emphasized else " "
        click.echo(f"\n{marker} [{item.mood:<10}] {item.decoded_title[:70]}")
        click.echo(f"    {item.item.source} · {item.publish_date:%Y-%m-%d %H:%M}")
        if item.comment:
            click.echo(f"    Zaur: {item.comment}")


@cli.command()
@click.option("--force", is_flag=True, help="Discover now, ignoring the schedule.")
@click.option("--category", default=None, help="Filter by category.")
def discover(force, category):
    """Run the scheduled discovery check and record the result."""
    now = datetime.now()
    with open_store(settings) as store:
        available = store.query(category)
        discovered_ids = {d.item_id for d in store.list_discoveries()}

        check = check_for_time_based_discoveries(now, False, available, discovered_ids)
        if not check.should_discover and not force:
            click.echo(f"No discovery at {now:%H:%M}. Discovery minutes: {settings.discovery_minutes}.")
            return
        if not available:
            click.echo("Nothing stored to discover. Run 'ingest' first.")
            return

        seed = check.seed if check.should_discover else now.hour * 100 + now.minute
        current, _ = _render_panel(store, category)
        found = discover_new_item(available, current, discovered_ids, seed, store=store)

    click.echo(found.discovery_comment)
    click.echo(f"  {found.decoded_title}")
    click.echo(f"  {found.item.url}")
    if found.comment:
        click.echo(f"  Zaur: {found.comment}")


if __name__ == "__main__":
    cli()
