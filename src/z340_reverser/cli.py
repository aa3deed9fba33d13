import logging
import sys
from typing import Optional

import click
import structlog

from z340_reverser.assembler import (
    Z340_BLOCKS,
    read_block,
    reverse_transposition,
    split_segments,
)
from z340_reverser.ciphertext import Z340
from z340_reverser.ui import get_console, render_block, render_rows
from z340_reverser.utils import (
    ConfigurationError,
    TranscriptionLoadError,
    load_transcription,
    wrap_rows,
)


log = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Send structured logs to stderr so stdout only carries ciphertext."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def load_ciphertext(ciphertext_path: Optional[str]) -> str:
    """Load the transcription file, or fall back to the built-in Z-340 transcription."""
    if ciphertext_path is None:
        return Z340
    try:
        ciphertext = load_transcription(ciphertext_path)
    except TranscriptionLoadError as e:
        raise click.ClickException(str(e))
    log.debug("transcription loaded", path=ciphertext_path, length=len(ciphertext))
    return ciphertext


def intermediate_ciphertext(ciphertext: str, normalize: bool = True) -> str:
    try:
        return reverse_transposition(ciphertext, normalize=normalize)
    except ConfigurationError as e:
        raise click.ClickException(str(e))


ciphertext_path_option = click.option(
    "--ciphertext-path",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Transcription file, one grid row per line. Defaults to the built-in Z-340.",
)


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Log every step to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Reverse the Z-340 transposition into the intermediate ciphertext."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(reverse)


@cli.command()
@ciphertext_path_option
@click.option("--raw", is_flag=True, help="Keep ; and | instead of replacing them with Ä and Ö.")
@click.option("--pause/--no-pause", default=True, help="Wait for a key press before exiting.")
def reverse(ciphertext_path: Optional[str], raw: bool, pause: bool):
    """Print the intermediate ciphertext on a single line."""
    ciphertext = load_ciphertext(ciphertext_path)
    click.echo(intermediate_ciphertext(ciphertext, normalize=not raw))
    if pause:
        click.pause()


@cli.command()
@ciphertext_path_option
@click.option("--width", "-w", default=17, show_default=True, type=click.IntRange(min=1))
@click.option("--raw", is_flag=True, help="Keep ; and | instead of replacing them with Ä and Ö.")
def rows(ciphertext_path: Optional[str], width: int, raw: bool):
    """Print the intermediate ciphertext wrapped into fixed-width rows."""
    ciphertext = load_ciphertext(ciphertext_path)
    for row in wrap_rows(intermediate_ciphertext(ciphertext, normalize=not raw), width):
        click.echo(row)


@cli.command()
@ciphertext_path_option
@click.option("--block", "-b", "block_number", type=click.Choice(["1", "2"]), default="1", show_default=True)
@click.option("--order", is_flag=True, help="Show the step at which the walk visits each cell.")
def show(ciphertext_path: Optional[str], block_number: str, order: bool):
    """Render a transposed block as a grid, then its read-out."""
    ciphertext = load_ciphertext(ciphertext_path)
    try:
        segments = split_segments(ciphertext, Z340_BLOCKS)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    index = int(block_number) - 1
    policy = Z340_BLOCKS[index]
    block = segments[index]
    highlight = ()
    if policy.correction is not None:
        block = policy.correction.apply(block)
        highlight = (policy.correction.target,)

    console = get_console()
    spec = policy.grid
    console.print(
        render_block(
            block,
            spec,
            title=f"{policy.name}  |  {spec.rows}x{spec.cols}  |  steps ({spec.col_step}, {spec.row_step})",
            exclusion=policy.exclusion,
            highlight=highlight,
            show_order=order,
        )
    )
    if policy.correction is not None:
        console.print(f"Symbol moved from offset {policy.correction.source} to {policy.correction.target}.")
    console.print(render_rows(read_block(segments[index], policy), title=f"{policy.name} read out"))


if __name__ == "__main__":
    cli()
