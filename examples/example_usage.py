"""Example: using the service layer directly (no Flask).

Controllers are a thin layer; the use cases live in the services.
"""

import importlib

from dotenv import load_dotenv

from taskboard.config import get_settings_module
from taskboard.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.employee_service.department_distribution())
    print(container.employee_service.monthly_joining_distribution())


if __name__ == "__main__":
    main()
