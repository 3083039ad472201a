from recruitment.services import records
from recruitment.services.authorization import ensure_role

__all__ = [
    "records",
    "ensure_role",
]
