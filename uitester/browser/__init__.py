"""
Browser access for UI Tester.

## Key Components

1. **BrowserDriver / BrowserSession / ElementHandle** - Capability interface used by the engine
2. **PlaywrightDriver** - Implementation on top of patchright
"""

from .base import BrowserDriver, BrowserSession, ElementHandle
from .playwright_driver import PlaywrightDriver, PlaywrightSession

__all__ = [
    "BrowserDriver",
    "BrowserSession",
    "ElementHandle",
    "PlaywrightDriver",
    "PlaywrightSession",
]
