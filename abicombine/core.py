from __future__ import annotations
from pathlib import Path
from datetime import datetime, timezone
from typing import Any, List, Optional
import json

from rich.console import Console
from rich.markup import escape

from .config import CombineConfig
from .errors import CombineError, ParseError, ReadError, WriteError
from .models import ArtifactSummary, CombineResult
from .utils import artifact_path, has_abi_list, json_dump_atomic

def _reject_constant(name: str) -> Any:
    raise ValueError(f"unexpected constant {name}")

def read_artifact(path: Path) -> Any:
    """Read and parse one artifact file. Raises ReadError / ParseError."""
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8 text: {e.reason}", path) from e
    except OSError as e:
        raise ReadError(f"cannot read {path}: {e.strerror or e}", path) from e
    try:
        # NaN / Infinity are not JSON
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParseError(f"invalid JSON in {path}: {e}", path) from e
    except RecursionError as e:
        raise ParseError(f"invalid JSON in {path}: nesting too deep", path) from e

def write_combined(entries: List[Any], output: Path, indent: int = 4) -> Path:
    """Serialize the combined list to `output`, replacing it atomically."""
    try:
        json_dump_atomic(output, entries, indent=indent)
    except OSError as e:
        raise WriteError(f"cannot write {output}: {e.strerror or e}", output) from e
    except RecursionError as e:
        raise WriteError(f"cannot write {output}: entries nested too deep to serialize", output) from e
    return output

class Combiner:
    def __init__(self, config: Optional[CombineConfig] = None, log_path: Optional[Path] = None, console: Optional[Console] = None, verbose: bool = False):
        self.config = config or CombineConfig()
        self.log_path = log_path
        self.console = console or Console()
        self.verbose = verbose
        self.summaries: List[ArtifactSummary] = []

    def extract(self) -> List[Any]:
        """Concatenate every artifact's abi list, in artifact order.

        The first read or parse failure aborts the pass. An artifact whose
        record has no abi array contributes nothing.
        """
        cfg = self.config
        combined: List[Any] = []
        self.summaries = []
        for name in cfg.artifacts:
            path = artifact_path(cfg.out_dir, name, cfg.unit_extension)
            record = read_artifact(path)
            if has_abi_list(record):
                abi = record["abi"]
                combined.extend(abi)
                self.summaries.append(ArtifactSummary(name=name, path=path, entries=len(abi), has_abi=True))
                self._log("artifact.read", {"name": name, "path": str(path), "entries": len(abi)})
            else:
                self.summaries.append(ArtifactSummary(name=name, path=path))
                self._log("artifact.skip", {"name": name, "path": str(path)})
        return combined

    def run(self) -> CombineResult:
        cfg = self.config
        self._log("run.start", {"artifacts": list(cfg.artifacts), "out_dir": str(cfg.out_dir), "output": str(cfg.output)})
        try:
            entries = self.extract()
            write_combined(entries, cfg.output, indent=cfg.indent)
        except CombineError as e:
            self._log("run.error", {"kind": type(e).__name__, "message": e.message, "path": str(e.path) if e.path else None})
            raise
        self._log("write.done", {"output": str(cfg.output), "entries": len(entries)})
        return CombineResult(output=cfg.output, entries=entries, artifacts=self.summaries)

    def _log(self, event: str, data: dict) -> None:
        if self.verbose:
            self.console.print(f"[dim]{event}[/dim] {escape(json.dumps(data))}", highlight=False, soft_wrap=True)
        if not self.log_path:
            return
        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            rec = {"ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"), "event": event, **(data or {})}
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(rec) + "\n")
        except OSError as e:
            # the event log is best-effort; it must not fail the pass
            Console(stderr=True).print(f"[yellow]warning:[/yellow] event log unavailable: {escape(str(e))}", highlight=False, soft_wrap=True)

def extract_abis(config: Optional[CombineConfig] = None) -> List[Any]:
    return Combiner(config).extract()

def run(config: Optional[CombineConfig] = None, log_path: Optional[Path] = None) -> CombineResult:
    return Combiner(config, log_path=log_path).run()
