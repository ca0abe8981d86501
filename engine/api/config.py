from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    mirror: bool = False
    debug: bool = False
    # None means the engine default under runtime/cache
    store_path: Optional[Path] = None
    persist: bool = True
