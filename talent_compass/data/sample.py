"""Bundled sample records used when no snapshot file is configured."""

from __future__ import annotations

from typing import Any, Dict, List

from talent_compass.core.permissions import default_permissions
from talent_compass.models.employee import Employee
from talent_compass.models.user import User

SAMPLE_EMPLOYEES: List[Dict[str, Any]] = [
    {
        "id": "E001",
        "name": "Mohamed Youssef",
        "job_title": "Operations Director",
        "job_grade": "G1",
        "direction": "Operations",
        "department": "Plant Operations",
        "performance": 3,
        "evolution_potential": 3,
        "risk_of_loss": "Medium",
        "impact_of_loss": "High",
        "readiness": "Ready Now",
        "next_role": "Chief Operating Officer",
        "last_3_years_performance": 3,
    },
    {
        "id": "E002",
        "name": "Laila Mahmoud",
        "job_title": "Finance Manager",
        "job_grade": "G2",
        "direction": "Finance",
        "department": "Corporate Finance",
        "performance": 3,
        "evolution_potential": 2,
        "risk_of_loss": "Low",
        "impact_of_loss": "High",
        "readiness": "1-3 Years",
        "next_role": "Finance Director",
        "last_3_years_performance": 3,
    },
    {
        "id": "E003",
        "name": "Youssef Kamal",
        "job_title": "Maintenance Engineer",
        "job_grade": "G3",
        "direction": "Operations",
        "department": "Maintenance",
        "performance": 2,
        "evolution_potential": 3,
        "risk_of_loss": "High",
        "impact_of_loss": "Medium",
        "readiness": "1-3 Years",
        "next_role": "Maintenance Supervisor",
        "last_3_years_performance": 2,
    },
    {
        "id": "E004",
        "name": "Nour El-Din",
        "job_title": "HR Specialist",
        "job_grade": "G3",
        "direction": "HR",
        "department": "Talent Acquisition",
        "performance": 2,
        "evolution_potential": 2,
        "risk_of_loss": "Low",
        "impact_of_loss": "Low",
        "readiness": "More than 3 Years",
        "next_role": "HR Business Partner",
        "last_3_years_performance": 2,
    },
    {
        "id": "E005",
        "name": "Hana Saleh",
        "job_title": "Sales Manager",
        "job_grade": "G2",
        "direction": "Sales & Marketing",
        "department": "Regional Sales",
        "performance": 3,
        "evolution_potential": 3,
        "risk_of_loss": "High",
        "impact_of_loss": "High",
        "readiness": "Ready Now",
        "next_role": "Sales Director",
        "last_3_years_performance": 3,
    },
    {
        "id": "E006",
        "name": "Tarek Fawzy",
        "job_title": "IT Systems Administrator",
        "job_grade": "G3",
        "direction": "IT",
        "department": "Infrastructure",
        "performance": 3,
        "evolution_potential": 1,
        "risk_of_loss": "Medium",
        "impact_of_loss": "High",
        "readiness": "More than 3 Years",
        "next_role": "Senior Systems Administrator",
        "last_3_years_performance": 3,
    },
    {
        "id": "E007",
        "name": "Mona Adel",
        "job_title": "Accountant",
        "job_grade": "G4",
        "direction": "Finance",
        "department": "Accounts Payable",
        "performance": 2,
        "evolution_potential": 1,
        "risk_of_loss": "Low",
        "impact_of_loss": "Low",
        "readiness": "More than 3 Years",
        "next_role": "Senior Accountant",
        "last_3_years_performance": 2,
    },
    {
        "id": "E008",
        "name": "Karim Samir",
        "job_title": "Marketing Coordinator",
        "job_grade": "G4",
        "direction": "Sales & Marketing",
        "department": "Marketing",
        "performance": 1,
        "evolution_potential": 3,
        "risk_of_loss": "High",
        "impact_of_loss": "Low",
        "readiness": "1-3 Years",
        "next_role": "Marketing Specialist",
        "last_3_years_performance": 1.5,
    },
    {
        "id": "E009",
        "name": "Rania Farouk",
        "job_title": "Production Supervisor",
        "job_grade": "G3",
        "direction": "Operations",
        "department": "Production",
        "performance": 1,
        "evolution_potential": 2,
        "risk_of_loss": "Medium",
        "impact_of_loss": "Medium",
        "readiness": "More than 3 Years",
        "next_role": "Production Manager",
        "last_3_years_performance": 1.7,
    },
    {
        "id": "E010",
        "name": "Amr Nabil",
        "job_title": "Warehouse Clerk",
        "job_grade": "G4",
        "direction": "Operations",
        "department": "Logistics",
        "performance": 1,
        "evolution_potential": 1,
        "risk_of_loss": "High",
        "impact_of_loss": "Low",
        "readiness": "More than 3 Years",
        "next_role": "Warehouse Supervisor",
        "last_3_years_performance": 1,
    },
    {
        "id": "E011",
        "name": "Dina Mostafa",
        "job_title": "Software Developer",
        "job_grade": "G3",
        "direction": "IT",
        "department": "Application Development",
        "performance": 2,
        "evolution_potential": 3,
        "risk_of_loss": "Medium",
        "impact_of_loss": "Medium",
        "readiness": "1-3 Years",
        "next_role": "Technical Lead",
        "last_3_years_performance": 2.3,
    },
    {
        "id": "E012",
        "name": "Hesham Ragab",
        "job_title": "HR Manager",
        "job_grade": "G2",
        "direction": "HR",
        "department": "Employee Relations",
        "performance": 3,
        "evolution_potential": 2,
        "risk_of_loss": "Low",
        "impact_of_loss": "Medium",
        "readiness": "Ready Now",
        "next_role": "HR Director",
        "last_3_years_performance": 2.7,
    },
    {
        "id": "E013",
        "name": "Salma Ezzat",
        "job_title": "Financial Analyst",
        "job_grade": "G3",
        "direction": "Finance",
        "department": "Financial Planning",
        "performance": 2,
        "evolution_potential": 2,
        "risk_of_loss": "Medium",
        "impact_of_loss": "Low",
        "readiness": "1-3 Years",
        "next_role": "Senior Financial Analyst",
        "last_3_years_performance": 2,
    },
    {
        "id": "E014",
        "name": "Walid Gamal",
        "job_title": "Key Account Manager",
        "job_grade": "G3",
        "direction": "Sales & Marketing",
        "department": "Key Accounts",
        "performance": 3,
        "evolution_potential": 3,
        "risk_of_loss": "Low",
        "impact_of_loss": "High",
        "readiness": "Ready Now",
        "next_role": "Sales Manager",
        "last_3_years_performance": 3,
    },
    {
        "id": "E015",
        "name": "Yasmin Hany",
        "job_title": "Network Engineer",
        "job_grade": "G3",
        "direction": "IT",
        "department": "Networks",
        "performance": 2,
        "evolution_potential": 1,
        "risk_of_loss": "High",
        "impact_of_loss": "High",
        "readiness": "More than 3 Years",
        "next_role": "Senior Network Engineer",
        "last_3_years_performance": 2,
    },
    {
        "id": "E016",
        "name": "Sherif Lotfy",
        "job_title": "Safety Officer",
        "job_grade": "G4",
        "direction": "Operations",
        "department": "HSE",
        "performance": 2,
        "evolution_potential": 2,
        "risk_of_loss": "Low",
        "impact_of_loss": "Medium",
        "readiness": "1-3 Years",
        "next_role": "HSE Supervisor",
        "last_3_years_performance": 2,
    },
]

# Account data only; sign-in is handled outside this package.
SAMPLE_USERS: List[Dict[str, Any]] = [
    {
        "id": "user-1",
        "username": "manager1",
        "full_name": "Ahmed Hassan",
        "email": "ahmed.hassan@ecpc.com",
        "role": "Manager",
        "department": "Operations",
        "created_at": "2024-01-15T10:00:00Z",
    },
    {
        "id": "user-2",
        "username": "manager2",
        "full_name": "Sara Mohamed",
        "email": "sara.mohamed@ecpc.com",
        "role": "Manager",
        "department": "Finance",
        "created_at": "2024-01-20T10:00:00Z",
    },
    {
        "id": "user-3",
        "username": "manager3",
        "full_name": "Khaled Ali",
        "email": "khaled.ali@ecpc.com",
        "role": "Manager",
        "department": "Sales & Marketing",
        "created_at": "2024-02-01T10:00:00Z",
    },
    {
        "id": "user-4",
        "username": "hr1",
        "full_name": "Fatima Abdullah",
        "email": "fatima.abdullah@ecpc.com",
        "role": "HR",
        "department": "HR",
        "created_at": "2024-01-10T10:00:00Z",
    },
    {
        "id": "user-5",
        "username": "hr2",
        "full_name": "Omar Ibrahim",
        "email": "omar.ibrahim@ecpc.com",
        "role": "HR",
        "department": "HR",
        "created_at": "2024-01-12T10:00:00Z",
    },
]


def sample_employees() -> List[Employee]:
    return [Employee.model_validate(record) for record in SAMPLE_EMPLOYEES]


def sample_users() -> List[User]:
    users = []
    for record in SAMPLE_USERS:
        permissions = default_permissions(record["role"], record["department"])
        users.append(User.model_validate({**record, "permissions": permissions}))
    return users


__all__ = ["SAMPLE_EMPLOYEES", "SAMPLE_USERS", "sample_employees", "sample_users"]
