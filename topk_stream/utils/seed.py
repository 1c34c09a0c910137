from typing import Optional

import numpy as np


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Build the value generator for a stream.

    seed 为 None 时使用操作系统熵，结果不可复现。
    """
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(int(seed))
