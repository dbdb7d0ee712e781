import random

import numpy as np


def set_global_seed(seed: int) -> None:
	random.seed(seed)
	np.random.seed(seed)
