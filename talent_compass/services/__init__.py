from .employees import AssessmentEntry, EmployeeDirectory
from .users import UserDirectory

__all__ = ["AssessmentEntry", "EmployeeDirectory", "UserDirectory"]
