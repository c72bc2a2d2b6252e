"""
Run-scoped cancellation for UI Tester.
"""

import asyncio


class CancellationToken:
    """Cancellation flag shared by the parts of one run.

    The run orchestrator owns the token and hands it to the step interpreter
    and the upload operation, which check it at step and document boundaries.
    Cancelling is idempotent.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        """Suspend until the token is cancelled."""
        await self._event.wait()
