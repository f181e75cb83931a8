from collections.abc import Sequence

import numpy as np

type Scalar = float | int | np.float64
type Shape = tuple[int, ...]
type ShapeLike = Sequence[int]
type Index = Sequence[int]
