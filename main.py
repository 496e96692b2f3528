#!/usr/bin/env python3
"""
Cloudflare DNS Manager - Main Entry Point

This is the main entry point for the Cloudflare DNS Manager.
It can be run directly or imported as a module.
"""

from cloudflare_dns_manager.cli.main import main

if __name__ == "__main__":
    main()
