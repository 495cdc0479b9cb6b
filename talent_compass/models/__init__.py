from .employee import AssessmentRecord, Employee
from .enums import Direction, JobGrade, PerformanceRating, PotentialRating, Readiness, RiskLevel, UserRole
from .permissions import Capability, UserPermissions
from .user import User

__all__ = [
    "AssessmentRecord",
    "Capability",
    "Direction",
    "Employee",
    "JobGrade",
    "PerformanceRating",
    "PotentialRating",
    "Readiness",
    "RiskLevel",
    "User",
    "UserPermissions",
    "UserRole",
]
