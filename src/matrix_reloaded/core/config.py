"""
Config — параметры сравнения чисел

Единственное место, где задаются толерантности для приближённых сравнений
векторов и матриц с float-элементами. Целочисленные операции точны и
толерантности не используют.
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close (важна при сравнении с нулём)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Толерантности для поэлементного сравнения.

    Immutable: один экземпляр можно разделять между потоками.
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        if self.rel_tol < 0:
            raise ValueError(f"rel_tol must be non-negative, got {self.rel_tol}")
        if self.abs_tol < 0:
            raise ValueError(f"abs_tol must be non-negative, got {self.abs_tol}")


DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig()
