"""
Employee Service Package.

In-memory CRUD service for employee records with route, query and
header parameter binding.
"""

__version__ = "1.0.0"
__description__ = "In-memory employee records service"

__all__ = [
    "__version__",
]
