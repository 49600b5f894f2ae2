from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .dashboard.controller import register as register_dashboard

logger = logging.getLogger(__name__)


def create_app(*, data_path: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    data_path = data_path or getattr(settings, "DATA_PATH")
    logger.info("settings=%s data=%s", settings_module, data_path)

    container = build_container(data_path=data_path, id_seed=int(getattr(settings, "ID_SEED", 0)))
    container.dashboard_service.load(container.loader)
    app.extensions["attendance_dashboard"] = container

    register_dashboard(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
