# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"bye", "exit", "/bye", "/exit"})
PROMPT = "> "


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", state.manager.num_of_tasks)
    app_name = str(getattr(state.settings, "app_name", "taskmate"))
    print(state.ui.greet(app_name))

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = state.ui.show_error("Internal error while handling a command.")

        print(reply)

    print(state.ui.goodbye())
    logger.info("Console connector finished.")
