#!/usr/bin/env python3
import sys
import threading

import gi

from dotpanel.core.log_setup import setup_logging

APPLICATION_ID = "co.dothq.os.panel"

logger = setup_logging()


def global_exception_handler(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.error(
        "Uncaught exception",
        exc_info=(exc_type, exc_value, exc_traceback),
        thread_name=threading.current_thread().name,
    )


def load_panel():
    for namespace, version in [
        ("Gio", "2.0"),
        ("Gtk4LayerShell", "1.0"),
        ("Gtk", "4.0"),
        ("Gdk", "4.0"),
        ("Adw", "1"),
    ]:
        gi.require_version(namespace, version)

    from dotpanel.panel import Panel

    return Panel(logger=logger, application_id=APPLICATION_ID)


def main():
    sys.excepthook = global_exception_handler
    try:
        panel = load_panel()
        status = panel.run(sys.argv[:1])
    except Exception:
        logger.critical("Fatal error during initialization", exc_info=True)
        raise
    sys.exit(status or panel.exit_status)


if __name__ == "__main__":
    main()
