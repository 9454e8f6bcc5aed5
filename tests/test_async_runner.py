#!/usr/bin/env python3
"""Test suite for AsyncRunner - background event loop.

Run with: python -m pytest tests/test_async_runner.py -v
Or standalone: python tests/test_async_runner.py
"""

import sys
import os
import asyncio
import threading
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cubechat.services.async_runner import AsyncRunner


async def add(a, b):
    await asyncio.sleep(0)
    return a + b


async def fail():
    raise ValueError("boom")


class TestAsyncRunner(unittest.TestCase):
    """Tests for running coroutines off the main thread."""

    def setUp(self):
        self.runner = AsyncRunner()
        self.runner.start()

    def tearDown(self):
        self.runner.stop()

    def test_run_returns_result(self):
        """Test blocking run returns the coroutine result."""
        self.assertEqual(self.runner.run(add(2, 3), timeout=5), 5)

    def test_runs_on_background_thread(self):
        """Test coroutines do not run on the caller's thread."""
        async def thread_name():
            return threading.current_thread().name

        self.assertEqual(self.runner.run(thread_name(), timeout=5), "cubechat-async")

    def test_submit_callback(self):
        """Test on_done receives the finished future."""
        done = threading.Event()
        results = []

        def on_done(future):
            results.append(future.result())
            done.set()

        self.runner.submit(add(1, 1), on_done=on_done)
        self.assertTrue(done.wait(5))
        self.assertEqual(results, [2])

    def test_exception_propagates(self):
        """Test errors surface through the future."""
        with self.assertRaises(ValueError):
            self.runner.run(fail(), timeout=5)

    def test_start_is_idempotent(self):
        """Test a second start keeps the same thread."""
        self.runner.start()
        self.assertTrue(self.runner.is_running)
        self.assertEqual(self.runner.run(add(0, 1), timeout=5), 1)

    def test_stop_and_restart(self):
        """Test the runner can be stopped twice and started again."""
        self.runner.stop()
        self.runner.stop()
        self.assertFalse(self.runner.is_running)
        self.runner.start()
        self.assertEqual(self.runner.run(add(4, 4), timeout=5), 8)

    def test_stop_cancels_pending_coroutines(self):
        """Test stop resolves unfinished futures as cancelled and calls on_done."""
        started = threading.Event()
        finished = []

        async def wait_forever():
            started.set()
            try:
                await asyncio.Event().wait()
            finally:
                finished.append(True)

        callbacks = []
        future = self.runner.submit(wait_forever(), on_done=callbacks.append)
        self.assertTrue(started.wait(5))

        self.runner.stop()

        self.assertTrue(future.done())
        self.assertTrue(future.cancelled())
        self.assertEqual(callbacks, [future])
        self.assertEqual(finished, [True])
        self.assertFalse(self.runner.is_running)

    def test_stop_leaves_finished_results(self):
        """Test stop does not disturb futures that already completed."""
        future = self.runner.submit(add(2, 2))
        self.assertEqual(future.result(5), 4)
        self.runner.stop()
        self.assertFalse(future.cancelled())
        self.assertEqual(future.result(), 4)

    def test_submit_when_stopped(self):
        """Test submitting to a stopped runner raises."""
        self.runner.stop()
        with self.assertRaises(RuntimeError):
            self.runner.submit(add(1, 2))


if __name__ == "__main__":
    unittest.main(verbosity=2)
