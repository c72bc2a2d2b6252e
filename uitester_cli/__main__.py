"""
Main entry point for UI Tester CLI.
"""

from uitester_cli import uitester

if __name__ == "__main__":
    uitester()
