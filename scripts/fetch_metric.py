"""Fetch one BTC metric from the CoinMetrics community API and print it.

Usage:
    python -m scripts.fetch_metric --metric CapRealUSD
    python -m scripts.fetch_metric -m CapRealUSD --start 2021-04-01 --end 2021-04-22
    python -m scripts.fetch_metric -m CapRealUSD --json
"""

from __future__ import annotations

import asyncio
import sys

import click
import httpx
from rich.console import Console
from rich.table import Table

from config.settings import Settings, get_settings
from endpoints.dates import yesterday_simple_date
from endpoints.metric_data import get_metric_data
from observability.logger import setup_logging
from providers.community_client import CommunityClient
from providers.exceptions import CoinMetricsError
from schemas.metric_data import MetricData, MetricQueryOptions

console = Console()


def build_client(settings: Settings, api_key: str | None = None) -> CommunityClient:
    if api_key is None:
        return CommunityClient.from_settings(settings)
    return CommunityClient(api_key=api_key, base_url=settings.coinmetrics_base_url)


def build_series_table(data: MetricData) -> Table:
    table = Table(title="📈 BTC metric data", show_lines=False)
    table.add_column("Time", style="cyan")
    for name in data.data.metrics:
        table.add_column(name, justify="right")

    for point in data.data.series:
        table.add_row(point.time, *point.values)

    return table


async def fetch(client: CommunityClient, options: MetricQueryOptions) -> MetricData:
    async with client:
        return await get_metric_data(client, options)


@click.command("fetch-metric")
@click.option("--metric", "-m", default="CapRealUSD", help="Metric name (default: CapRealUSD).")
@click.option("--start", "-s", default="", help="Start date YYYY-MM-DD (default: omitted).")
@click.option("--end", "-e", default=None, help="End date YYYY-MM-DD (default: yesterday).")
@click.option("--api-key", default=None, help="Bearer token (default: COINMETRICS_API_KEY).")
@click.option("--json", "as_json", is_flag=True, help="Print the raw envelope as JSON.")
def main(metric: str, start: str, end: str | None, api_key: str | None, as_json: bool) -> None:
    settings = get_settings()
    setup_logging(level=settings.log_level, fmt=settings.log_format)

    options = MetricQueryOptions(
        metrics=metric,
        start=start,
        end=yesterday_simple_date() if end is None else end,
    )
    client = build_client(settings, api_key)

    try:
        data = asyncio.run(fetch(client, options))
    except (CoinMetricsError, httpx.InvalidURL) as e:
        click.echo(f"fetch-metric: {type(e).__name__}: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(data.model_dump_json(by_alias=True, indent=2))
        return

    if not data.data.series:
        console.print("[dim]No data points returned.[/dim]")
        return
    console.print(build_series_table(data))


if __name__ == "__main__":
    main()
