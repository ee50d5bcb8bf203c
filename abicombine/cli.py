from pathlib import Path
from typing import List, Optional
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_config
from .core import Combiner
from .errors import CombineError

app = typer.Typer(help="Combine Foundry artifact ABIs into one JSON file", add_completion=False)

console = Console()
err_console = Console(stderr=True)

def _version_callback(value: bool):
    if value:
        from . import __version__
        console.print(__version__, highlight=False)
        raise typer.Exit()

@app.command()
def combine(
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", help="Foundry build output folder (default: out)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="combined ABI file (default: CombinedABI.json)"),
    artifact: Optional[List[str]] = typer.Option(None, "--artifact", "-a", help="artifact name, repeatable; replaces the default facet list"),
    config: Optional[Path] = typer.Option(None, "--config", help="path to JSON config (optional)"),
    log: Optional[Path] = typer.Option(None, "--log", help="append JSONL step events to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="print step events and a per-artifact summary"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="show version and exit"),
):
    """
    Read out/<Name>.sol/<Name>.json for every facet, concatenate their
    abi arrays in order and write the result. Nothing is written unless
    every artifact was read and parsed.
    """
    try:
        cfg = load_config(config, out_dir=out_dir, output=output, artifacts=artifact or None)
        result = Combiner(cfg, log_path=log, console=console, verbose=verbose).run()
    except CombineError as e:
        err_console.print(f"Error: {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    if verbose:
        table = Table(title="Artifacts")
        table.add_column("artifact")
        table.add_column("entries", justify="right")
        table.add_column("abi")
        for s in result.artifacts:
            table.add_row(s.name, str(s.entries), "yes" if s.has_abi else "[yellow]missing[/yellow]")
        console.print(table)
    console.print(f"{escape(str(result.output))} written.", highlight=False, soft_wrap=True)

if __name__ == "__main__":
    app()
