from __future__ import annotations

from typing import Literal, Sequence, Union

import numpy as np
import numpy.typing as npt
import pandas as pd

Label = Literal[0, 1]
Sample = Union[Sequence[float], npt.NDArray[np.floating]]
Dataset = Union[Sequence[Sample], npt.NDArray[np.floating], pd.DataFrame]
Labels = Union[Sequence[int], npt.NDArray[np.integer], pd.Series]

FeatureMatrix = npt.NDArray[np.float64]
LabelArray = npt.NDArray[np.intp]
