from models.account import Account, AccountProfile, Role
from models.resume import Resume, ResumeStatus

__all__ = [
    "Account",
    "AccountProfile",
    "Role",
    "Resume",
    "ResumeStatus",
]
