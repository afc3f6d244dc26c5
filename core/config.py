"""
Projection configuration.
Assumption values live in core/schema.py (AssumptionSet); this is only the
knobs that are not exposed as sliders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd


@dataclass(frozen=True)
class ProjectionConfig:
    # last simulated age (inclusive)
    horizon_age: int = 80

    # FI check inside the projection: net worth >= annual expenses * multiplier
    retirement_target_multiplier: float = 25.0

    # Path.target_amount headline figure; kept separate from the FI check
    target_amount_multiplier: float = 25.0

    # calendar year of the first snapshot; None = this year
    start_year: Optional[int] = None

    def first_year(self) -> int:
        if self.start_year is not None:
            return int(self.start_year)
        return int(pd.Timestamp.today().year)


DEFAULT_CONFIG = ProjectionConfig()
