from .employees import EmployeePermission

__all__ = [
    'EmployeePermission',
]
