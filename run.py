# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #

"""
Single Entry Point for the Saweria Discord Relay.
Starts the keep-alive web server (via Waitress) and the Discord bot in a single process.
"""

import threading
import sys
import time
from waitress import serve
from app.web import create_app
from bot import load_configuration_or_exit, main as run_bot
from utils.logging_utils import get_module_logger

# Setup logger
logger = get_module_logger("main")


def start_web_server(port: int):
    """Starts the keep-alive Flask app using Waitress in a separate thread."""
    try:
        logger.info(f"🌐 Keep-alive server running on port {port}")
        logger.info(f"📍 URL for UptimeRobot: http://your-host:{port}/ping")

        app = create_app()
        serve(
            app,
            host="0.0.0.0",
            port=port,
            threads=2,
            ident="SDR-KeepAlive",
            _quiet=True
        )
    except OSError as e:
        # The bot keeps relaying donations even without the keep-alive server
        logger.critical(f"🔥 Keep-alive server failed to start: {e}", exc_info=True)


def main():
    """Main execution flow."""
    logger.info("==================================================")
    logger.info("   Saweria Discord Relay - Startup Sequence        ")
    logger.info("==================================================")

    config = load_configuration_or_exit()

    # 1. Start keep-alive server (daemon thread, dies with the bot)
    web_thread = threading.Thread(target=start_web_server, args=(config.port,), daemon=True, name="KeepAlive")
    web_thread.start()

    # Give the web server a moment to bind its port
    time.sleep(1)

    # 2. Start Discord bot (main thread)
    logger.info("🤖 Starting Discord Bot...")
    try:
        run_bot(config)
    except KeyboardInterrupt:
        logger.info("🛑 Received KeyboardInterrupt, shutting down...")
    except Exception as e:
        logger.critical(f"💀 Bot crashed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
