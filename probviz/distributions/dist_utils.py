from numpy.typing import NDArray

import numpy as np


def _clip_unit_interval(x: NDArray[np.floating]) -> NDArray[np.floating]:
    """Clips CDF values to [0, 1] to absorb approximation overshoot."""
    return np.clip(x, 0.0, 1.0)


def _integer_mask(x: NDArray[np.floating]) -> NDArray[np.bool_]:
    """True where ``x`` is finite and integer-valued."""
    finite = np.isfinite(x)
    out = np.zeros(x.shape, dtype=bool)
    out[finite] = x[finite] == np.floor(x[finite])
    return out


def _finite_or_zero(x: NDArray[np.floating]) -> NDArray[np.floating]:
    """Replaces NaN and infinities by 0."""
    return np.where(np.isfinite(x), x, 0.0)
