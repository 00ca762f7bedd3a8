from __future__ import annotations

import time
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from tokenflow.core.config import ParserConfig
from tokenflow.core.constants import DEPOSIT_T0, TRANSFER_T0, WITHDRAWAL_T0
from tokenflow.logging_setup import setup_logging

console = Console()


@click.group()
def cli() -> None:
    """tokenflow: ERC-20 / ERC-721 transfer decoding for raw EVM logs."""


@cli.command("parse-logs")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--out-dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="Write Parquet here")
@click.option("--transfer-topic0", default=TRANSFER_T0, show_default=True)
@click.option("--deposit-topic0", default=DEPOSIT_T0, show_default=True)
@click.option("--withdrawal-topic0", default=WITHDRAWAL_T0, show_default=True)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def parse_logs_cmd(
    input_path: Path,
    out_dir: Path | None,
    transfer_topic0: str,
    deposit_topic0: str,
    withdrawal_topic0: str,
    log_level: str,
) -> None:
    """Decode token transfers from a JSON / JSON-lines dump of eth_getLogs records."""
    setup_logging(log_level.upper(), console=Console(stderr=True))

    from tokenflow.adapters.rpc_logs import load_event_logs
    from tokenflow.export import tokens_to_arrow_table, transfers_to_arrow_table, write_parquet
    from tokenflow.transform.token_transfers import parse

    try:
        config = ParserConfig(
            transfer_topic0=transfer_topic0,
            deposit_topic0=deposit_topic0,
            withdrawal_topic0=withdrawal_topic0,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    try:
        logs = load_event_logs(input_path)
    except (ValueError, ValidationError) as e:
        raise click.ClickException(f"cannot read logs from {input_path}: {e}") from e

    t0 = time.time()
    result = parse(logs, config=config)
    elapsed = time.time() - t0

    stats = result.stats
    console.print(f"[bold]done[/]: {stats.total_logs} logs • {elapsed:.2f}s")
    console.print(
        f"[bold]summary[/]: "
        f"[green]transfers[/]={stats.classified}  "
        f"[red]unclassified[/]={stats.unclassified}  "
        f"[yellow]filtered_out[/]={stats.filtered_out}"
    )

    if out_dir is not None:
        transfers_path = write_parquet(transfers_to_arrow_table(result.transfers), out_dir / "transfers.parquet")
        tokens_path = write_parquet(tokens_to_arrow_table(result.tokens), out_dir / "tokens.parquet")
        console.print(f"💾 wrote → {transfers_path}  (rows={len(result.transfers)})")
        console.print(f"💾 wrote → {tokens_path}  (rows={len(result.tokens)})")


@cli.command("signatures")
def signatures_cmd() -> None:
    """Print the recognized topic0 signatures."""
    config = ParserConfig()
    table = Table("event", "topic0")
    table.add_row("Transfer(address,address,uint256)", config.transfer_topic0)
    table.add_row("Deposit(address,uint256)", config.deposit_topic0)
    table.add_row("Withdrawal(address,uint256)", config.withdrawal_topic0)
    console.print(table)


if __name__ == "__main__":
    cli()
