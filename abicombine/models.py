from typing import List, Any
from pathlib import Path
from pydantic import BaseModel

class ArtifactSummary(BaseModel):
    name: str
    path: Path
    entries: int = 0
    has_abi: bool = False

class CombineResult(BaseModel):
    output: Path
    entries: List[Any] = []
    artifacts: List[ArtifactSummary] = []

    @property
    def total(self) -> int:
        return len(self.entries)
