# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Application layer: bootstrap, Discord bot glue and the keep-alive web server."""
