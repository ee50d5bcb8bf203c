from __future__ import annotations
import errno, json, os, tempfile
from pathlib import Path
from typing import Any, Dict
from jsonschema import Draft202012Validator

# Only the shape of the record is checked: an object carrying an "abi" array.
# Individual descriptor entries are passed through untouched.
ARTIFACT_SHAPE_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {"abi": {"type": "array"}},
    "required": ["abi"],
}

Draft202012Validator.check_schema(ARTIFACT_SHAPE_SCHEMA)
_SHAPE_VALIDATOR = Draft202012Validator(ARTIFACT_SHAPE_SCHEMA)

def has_abi_list(record: Any) -> bool:
    return _SHAPE_VALIDATOR.is_valid(record)

def artifact_path(out_dir: Path, name: str, unit_extension: str = "sol") -> Path:
    """Foundry layout: <out>/<Name>.sol/<Name>.json"""
    return out_dir / f"{name}.{unit_extension}" / f"{name}.json"

def _file_mode() -> int:
    # mode a plain open() would give a new file under the current umask
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask

def atomic_write(path: Path, data: str) -> None:
    if path.name in ("", ".", ".."):
        raise IsADirectoryError(errno.EISDIR, "output path names a directory", str(path))
    path.parent.mkdir(parents=True, exist_ok=True)
    # unique sibling name so an unrelated <output>.tmp is never clobbered
    with tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False) as f:
        tmp = Path(f.name)
    try:
        tmp.write_text(data, encoding="utf-8")
        os.chmod(tmp, _file_mode())
        tmp.replace(path)
    finally:
        if tmp.exists():
            tmp.unlink()

def dumps_pretty(obj: Any, indent: int = 4) -> str:
    # same text JSON.stringify(obj, null, 4) produces for plain JSON data
    return json.dumps(obj, indent=indent, ensure_ascii=False)

def json_dump_atomic(path: Path, obj: Any, indent: int = 4) -> None:
    atomic_write(path, dumps_pretty(obj, indent=indent))
