#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Example usage of the stoxum_logging module.

This script demonstrates namespaced loggers and switching between the
built-in output engines.
"""

from stoxum_logging import engines, log, set_engine


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("Stoxum Logging Examples")
    print("=" * 60)
    print()

    # Example 1: Plain text output
    print("Example 1: basic engine")
    print("-" * 60)
    set_engine(engines["basic"])

    server_log = log.sub("server")
    server_log.info("connection successful")
    server_log.sub("http").warn("slow response", {"path": "/ledger", "ms": 1200})
    server_log.error("failed", {"code": 7})
    print()

    # Example 2: Rich console output
    print("Example 2: interactive engine")
    print("-" * 60)
    set_engine(engines["interactive"])

    orderbook_log = log.sub("orderbook")
    orderbook_log.info("snapshot", {"bids": [[101.5, 3]], "asks": [[102.0, 1]]})
    orderbook_log.debug("depth", 2)
    print()

    # Example 3: Silence everything
    print("Example 3: none engine (no output below)")
    print("-" * 60)
    set_engine(engines["none"])
    log.error("this is discarded")
    print()


if __name__ == "__main__":
    main()
