"""
Shared fixtures: a scratch Foundry `out/` tree under tmp_path, with the
working directory switched into it so relative defaults resolve there.
"""
import json
import pytest

from abicombine.config import DEFAULT_ARTIFACTS


def _write_artifact(root, name, record, ext="sol"):
    d = root / "out" / f"{name}.{ext}"
    d.mkdir(parents=True, exist_ok=True)
    p = d / f"{name}.json"
    if isinstance(record, str):
        p.write_text(record, encoding="utf-8")
    else:
        p.write_text(json.dumps(record), encoding="utf-8")
    return p


def _facet_abi(name):
    return [
        {"type": "function", "name": f"{name[0].lower()}{name[1:]}Version", "inputs": [], "outputs": [{"name": "", "type": "uint256"}], "stateMutability": "view"},
        {"type": "event", "name": f"{name}Updated", "inputs": [{"name": "caller", "type": "address", "indexed": True}], "anonymous": False},
    ]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def facets(workdir):
    """All six default facets present, each with a two-entry abi."""
    for name in DEFAULT_ARTIFACTS:
        _write_artifact(workdir, name, {"abi": _facet_abi(name), "bytecode": {"object": "0x6080"}})
    return workdir


@pytest.fixture
def write_artifact():
    """write_artifact(root, name, record) -> path of root/out/<name>.sol/<name>.json"""
    return _write_artifact


@pytest.fixture
def facet_abi():
    return _facet_abi
