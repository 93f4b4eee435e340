from __future__ import annotations

import importlib

from dotenv import load_dotenv

from taskboard.config import get_settings_module
from taskboard.database.bootstrap import apply_schema, ensure_demo_employees


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    added = ensure_demo_employees(db_config)

    print(
        "OK: Seeded demo employees -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(added={added})"
    )


if __name__ == "__main__":
    main()
