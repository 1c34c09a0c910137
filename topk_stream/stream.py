from __future__ import annotations

from typing import Any, Dict, Iterator

import numpy as np

from .utils.seed import make_rng


def make_stream(cfg: Dict[str, Any]) -> np.ndarray:
    """Draw ``stream.length`` values from a seeded generator."""
    sc = cfg["stream"]
    n = int(sc["length"])
    rng = make_rng(sc.get("seed"))
    dist = str(sc.get("distribution", "normal")).lower()
    if dist == "normal":
        return rng.normal(size=n)
    if dist == "uniform":
        return rng.uniform(float(sc["low"]), float(sc["high"]), size=n)
    if dist == "integers":
        return rng.integers(int(sc["low"]), int(sc["high"]), size=n)
    raise ValueError(f"Unsupported stream.distribution: {dist}")


def iter_stream(values) -> Iterator[Any]:
    # numpy scalars -> plain Python numbers
    for v in values:
        yield v.item() if isinstance(v, np.generic) else v
