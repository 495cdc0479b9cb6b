from .aggregator import NamedView, RiskImpactPoint, TalentAggregator, ViewShare
from .classifier import GridCell, NineBoxCategory, build_grid, classify, classify_employee

__all__ = [
    "GridCell",
    "NamedView",
    "NineBoxCategory",
    "RiskImpactPoint",
    "TalentAggregator",
    "ViewShare",
    "build_grid",
    "classify",
    "classify_employee",
]
