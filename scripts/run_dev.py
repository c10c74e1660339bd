"""
Development server launcher.

Serves ``grind.main:app`` with uvicorn.  Host, port and reload come from
``DEV_HOST``, ``DEV_PORT`` and ``DEV_RELOAD`` (environment or .env); the
uvicorn log level follows ``LOG_LEVEL``.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from grind.core.config import Settings, settings

APP = "grind.main:app"


def server_options(cfg: Settings) -> dict:
    """Keyword arguments for ``uvicorn.run``."""
    options = {"host": cfg.DEV_HOST, "port": cfg.DEV_PORT, "reload": cfg.DEV_RELOAD,
               "log_level": cfg.LOG_LEVEL.lower()}
    if cfg.DEV_RELOAD:
        options["reload_dirs"] = [str(project_root / "grind")]
    return options


def main() -> None:
    options = server_options(settings)
    base = f"http://{options['host']}:{options['port']}"
    print(f"{settings.PROJECT_NAME} v{settings.VERSION}")
    print(f"Database: {'sqlite' if settings.is_sqlite else settings.DATABASE_HOST}")
    print(f"API: {base}/api/v1  Docs: {base}/docs  (reload {'on' if options['reload'] else 'off'})")
    uvicorn.run(APP, **options)


if __name__ == "__main__":
    main()
