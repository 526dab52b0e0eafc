"""Type aliases for PyEquilibrium."""

from typing import Literal, TypeAlias

# Market structure for production economies
Regime: TypeAlias = Literal["competitive", "monopoly"]
