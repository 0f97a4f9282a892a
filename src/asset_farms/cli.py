"""CLI entry point for asset_farms."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Awaitable, Callable

import click

from asset_farms.api.farms_api import FarmQueryAPI
from asset_farms.clock import SystemClock
from asset_farms.config import load_config
from asset_farms.errors import FarmError
from asset_farms.farming.execution import farm_execution
from asset_farms.farming.registry import FarmRegistry
from asset_farms.farming.rewards import add_farm_reward, set_boosted_shares
from asset_farms.models.config import FarmsConfig
from asset_farms.models.farm_id import FarmId
from asset_farms.storage.sqlite import SQLiteFarmStore


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


def _farm_id(value: str) -> FarmId:
    try:
        return FarmId.parse(value)
    except FarmError as exc:
        raise click.BadParameter(str(exc)) from None


def _run(cfg: FarmsConfig, action: Callable[[SQLiteFarmStore], Awaitable[None]]) -> None:
    """Open the store, run ``action`` and report farm errors as exit status 1."""

    async def _main():
        store = SQLiteFarmStore(cfg.db_path)
        await store.initialize()
        try:
            await action(store)
        finally:
            await store.close()

    try:
        asyncio.run(_main())
    except FarmError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _execute(cfg: FarmsConfig, action: Callable[[FarmRegistry], Awaitable[None]]) -> None:
    """Run ``action`` as one committed execution."""

    async def _in_execution(store: SQLiteFarmStore) -> None:
        async with farm_execution(store, SystemClock()) as registry:
            await action(registry)

    _run(cfg, _in_execution)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """asset-farms - boosted-share reward farms."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["config"] = cfg

    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration and asset index size."""
    cfg: FarmsConfig = ctx.obj["config"]

    async def _status(store: SQLiteFarmStore) -> None:
        click.echo(f"DB path:    {cfg.db_path}")
        click.echo(f"Log level:  {cfg.log_level}")
        click.echo(f"Assets:     {await store.count_asset_ids()}")

    _run(cfg, _status)


# ── Configuration ──────────────────────────────────────


@cli.command("add-asset")
@click.argument("token_id")
@click.pass_context
def add_asset(ctx: click.Context, token_id: str) -> None:
    """Append an underlying asset to the index and configure its farms."""

    async def _add(store: SQLiteFarmStore) -> None:
        index = await store.add_asset_id(token_id)
        async with farm_execution(store, SystemClock()) as registry:
            await registry.configure(FarmId.supplied(token_id))
            await registry.configure(FarmId.borrowed(token_id))
        click.echo(f"Asset {token_id} at index {index}")

    _run(ctx.obj["config"], _add)


@cli.command("init-farm")
@click.argument("farm_id")
@click.pass_context
def init_farm(ctx: click.Context, farm_id: str) -> None:
    """Create an empty farm, e.g. supplied:wrap.near."""
    fid = _farm_id(farm_id)

    async def _init(registry: FarmRegistry) -> None:
        farm = await registry.configure(fid)
        _echo_json(farm.to_dict())

    _execute(ctx.obj["config"], _init)


@cli.command("add-reward")
@click.argument("farm_id")
@click.argument("token_id")
@click.option("--reward-per-day", type=int, required=True, help="Smallest units per day")
@click.option("--booster-log-base", type=int, default=0, help="Booster log base (fixed-point)")
@click.option("--amount", type=int, required=True, help="Budget to add (smallest units)")
@click.pass_context
def add_reward(
    ctx: click.Context,
    farm_id: str,
    token_id: str,
    reward_per_day: int,
    booster_log_base: int,
    amount: int,
) -> None:
    """Add reward budget to a farm, reactivating an exhausted reward."""
    fid = _farm_id(farm_id)

    async def _add(registry: FarmRegistry) -> None:
        reward = await add_farm_reward(
            registry, fid, token_id, reward_per_day, booster_log_base, amount,
        )
        _echo_json(reward.to_dict())

    _execute(ctx.obj["config"], _add)


@cli.command("set-shares")
@click.argument("farm_id")
@click.argument("token_id")
@click.argument("shares", type=int)
@click.pass_context
def set_shares(ctx: click.Context, farm_id: str, token_id: str, shares: int) -> None:
    """Overwrite the boosted shares of an active reward."""
    fid = _farm_id(farm_id)

    async def _set(registry: FarmRegistry) -> None:
        reward = await set_boosted_shares(registry, fid, token_id, shares)
        _echo_json(reward.to_dict())

    _execute(ctx.obj["config"], _set)


# ── Queries ────────────────────────────────────────────


@cli.command()
@click.argument("farm_id")
@click.pass_context
def show(ctx: click.Context, farm_id: str) -> None:
    """Show one farm advanced to the current time."""
    fid = _farm_id(farm_id)

    async def _show(store: SQLiteFarmStore) -> None:
        farm = await FarmQueryAPI(store, SystemClock()).get_farm(fid)
        if farm is None:
            click.echo(f"Farm {fid} not found.")
            return
        _echo_json(farm.to_dict())

    _run(ctx.obj["config"], _show)


@cli.command("list")
@click.option("--from-index", type=click.IntRange(min=0), default=None, help="First asset index")
@click.option("-n", "--limit", type=click.IntRange(min=0), default=None, help="Number of assets (not farms)")
@click.pass_context
def list_farms(ctx: click.Context, from_index: int | None, limit: int | None) -> None:
    """List farms for a page of the asset index."""

    async def _list(store: SQLiteFarmStore) -> None:
        farms = await FarmQueryAPI(store, SystemClock()).get_farms_paged(from_index, limit)
        _echo_json([[str(fid), farm.to_dict()] for fid, farm in farms])

    _run(ctx.obj["config"], _list)


@cli.command()
@click.argument("farm_id")
@click.argument("token_id")
@click.pass_context
def inactive(ctx: click.Context, farm_id: str, token_id: str) -> None:
    """Show an exhausted reward of a farm."""
    fid = _farm_id(farm_id)

    async def _inactive(store: SQLiteFarmStore) -> None:
        reward = await FarmQueryAPI(store, SystemClock()).get_inactive_reward(fid, token_id)
        if reward is None:
            click.echo(f"No inactive reward {token_id} on {fid}.")
            return
        _echo_json(reward.to_dict())

    _run(ctx.obj["config"], _inactive)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
