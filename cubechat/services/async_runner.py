"""Background asyncio loop for running coroutines from Tk callbacks.

Tk owns the main thread, so coroutines (chat backend calls) run on a
dedicated daemon thread with its own event loop. Results come back through
concurrent.futures.Future; UI code marshals them to the Tk thread with
``root.after(0, ...)``.
"""

import asyncio
import threading
from concurrent.futures import Future
from typing import Callable, Coroutine, Optional

from .logging_config import get_logger

logger = get_logger("async")


class AsyncRunner:
    """Runs coroutines on a background event loop.

    Usage:
        runner = AsyncRunner()
        runner.start()
        future = runner.submit(session.get_response("hi"), on_done=callback)
        # ... later ...
        runner.stop()
    """

    def __init__(self):
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._ready = threading.Event()

    @property
    def is_running(self) -> bool:
        """Check if the loop thread is running."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the event loop thread."""
        if self.is_running:
            return

        self._ready.clear()
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run_loop, name="cubechat-async", daemon=True)
        self._thread.start()
        self._ready.wait()
        logger.info("Async runner started")

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.call_soon(self._ready.set)
        self._loop.run_forever()

    def submit(self, coro: Coroutine, on_done: Optional[Callable[[Future], None]] = None) -> Future:
        """Schedule a coroutine on the loop.

        on_done, if given, is called with the finished future on the loop
        thread.
        """
        if not self.is_running:
            coro.close()
            raise RuntimeError("AsyncRunner is not running")

        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        if on_done is not None:
            future.add_done_callback(on_done)
        return future

    def run(self, coro: Coroutine, timeout: Optional[float] = None):
        """Run a coroutine on the loop and block until it finishes."""
        return self.submit(coro).result(timeout)

    def stop(self) -> None:
        """Cancel pending coroutines, stop the loop and wait for the thread to exit.

        Futures returned by submit() for unfinished coroutines end up
        cancelled, and their on_done callbacks run before the loop closes.
        """
        if not self.is_running:
            return

        asyncio.run_coroutine_threadsafe(self._cancel_pending(), self._loop).result()
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join()
        self._loop.close()
        self._thread = None
        self._loop = None
        logger.info("Async runner stopped")

    async def _cancel_pending(self) -> None:
        current = asyncio.current_task()
        tasks = [task for task in asyncio.all_tasks() if task is not current]
        if not tasks:
            return

        logger.info(f"Cancelling {len(tasks)} pending task(s)")
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
