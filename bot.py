#!/usr/bin/env python3
"""
FPL Bot - Entry Point

Slack webhook responder that posts Fantasy Premier League standings.
The actual implementation is in the fplbot package.
"""

if __name__ == "__main__":
    from fplbot import main
    main()
