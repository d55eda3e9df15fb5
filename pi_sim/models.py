from dataclasses import dataclass, field
from typing import List

@dataclass
class TrialResult:
    method: str
    trials: int
    hits: int
    probability: float
    pi_estimate: float

@dataclass
class MethodReport:
    key: str
    title: str
    count_label: str
    count_width: int = 6
    show_probability: bool = True
    results: List[TrialResult] = field(default_factory=list)
