from enum import Enum
from typing import Dict
from pydantic import BaseModel

# symbol -> symbol -> coefficient in [-1, 1]
CorrelationMatrix = Dict[str, Dict[str, float]]

class CorrelationStrength(str, Enum):
    VERY_STRONG = "Very Strong"
    STRONG = "Strong"
    MODERATE = "Moderate"
    WEAK = "Weak"
    VERY_WEAK = "Very Weak"

class CorrelationPair(BaseModel):
    """One off-diagonal cell of a correlation matrix"""
    symbol_a: str
    symbol_b: str
    correlation: float
    strength: CorrelationStrength
