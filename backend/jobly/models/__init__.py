"""Database models"""
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User, UserRole
from jobly.models.application import Application

__all__ = [
    "Company",
    "Job",
    "User",
    "UserRole",
    "Application",
]
