"""Keeplist - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import flet as ft
from dotenv import load_dotenv

from keeplist.shared.core.configuration import SystemConfig, get_config
from keeplist.shared.core.event_bus import EventBus
from keeplist.state import Store
from keeplist.ui.shell import build_shell

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(config: SystemConfig, project_root: Optional[Path] = None) -> Path:
    """Install the rotating file handler and the console handler.

    File: configured level (``LOG_LEVEL`` wins), everything.
    Console: warnings and errors only by default.

    Returns:
        Path of the log file
    """
    project_root = project_root or Path.cwd()
    logs_dir = Path(config.logging.log_dir)
    if not logs_dir.is_absolute():
        logs_dir = project_root / logs_dir
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = logs_dir / "keeplist.log"

    file_log_level = logging.getLevelName(config.logging.level.upper())
    if not isinstance(file_log_level, int):
        file_log_level = logging.INFO
    console_log_level = logging.getLevelName(config.logging.console_level.upper())
    if not isinstance(console_log_level, int):
        console_log_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(min(file_log_level, console_log_level))
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=config.logging.max_bytes,
        backupCount=config.logging.backup_count,
        encoding='utf-8',
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_log_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.getLogger("flet_controls").setLevel(logging.WARNING)
    logging.getLogger("flet_transport").setLevel(logging.WARNING)

    logger.info(f"Logging configured: file={log_file_path}, console={logging.getLevelName(console_log_level)}+")
    return log_file_path


async def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    logger.info("Initializing Keeplist...")

    config = get_config()
    page.title = config.ui.title

    event_bus = EventBus()
    Store.reset()
    store = Store.initialize(event_bus, config)
    await store.start()

    page.views.append(build_shell(page, store))
    page.update()

    logger.info("Application initialized successfully")


def run() -> None:
    """Console entry point: load ``.env``, configure logging, start Flet."""
    load_dotenv(dotenv_path=Path.cwd() / ".env")

    config = get_config()
    configure_logging(config)

    if config.ui.flet_web_mode:
        port = config.ui.flet_port
        logger.info(f"Starting Flet app in WEB mode on port {port}")
        ft.run(main, view=ft.AppView.WEB_BROWSER, port=port, host="127.0.0.1")
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
