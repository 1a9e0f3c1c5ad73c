from __future__ import annotations
import random
import numpy as np

def seed_all(seed: int) -> None:
    """Seed the global generators used by scripts. Library code never reads them."""
    random.seed(seed)
    np.random.seed(seed)
