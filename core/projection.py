# core/projection.py
import numpy as np

from .errors import DegenerateNormalError
from .models import Axis, Projection


def select_projection(normal) -> Projection:
    """
    Pick the coordinate axis to drop when viewing a loop with this normal in 2D.

    The axis most aligned with the normal is dropped, so the loop keeps the
    largest possible projected extent and cos_theta is never below 1/sqrt(3).
    Exact ties go to the first axis (X, then Y, then Z).
    """
    n = np.asarray(normal, dtype=np.float64).reshape(3)
    norm = float(np.linalg.norm(n))
    if not np.isfinite(norm) or norm == 0.0:
        raise DegenerateNormalError(f"Normal {n.tolist()} has no direction")

    # |dot| with the canonical axes (1,0,0), (0,1,0), (0,0,1)
    cosines = np.abs(n / norm)
    dim = int(np.argmax(cosines))
    return Projection(dropped=Axis(dim), cos_theta=float(cosines[dim]))
