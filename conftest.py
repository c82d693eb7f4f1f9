"""
Root conftest.py for the employee service project.

Puts each service directory on sys.path so its ``app`` package is
importable from the service's tests without installation.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Add service directories to sys.path.

    Runs before collection so that service-level conftest modules can
    import ``app`` at module load.
    """
    services_dir = Path(__file__).parent / "services"

    for service_path in sorted(services_dir.iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))
