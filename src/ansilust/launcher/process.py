#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Spawn-and-wait execution of the native binary.

The child inherits the launcher's stdin, stdout, stderr and environment
untouched. Its outcome is reported as an ``ExecResult`` which maps onto the
launcher's own exit status:

- ``Exited(code)``: the child's code
- ``Signaled(signal)``: ``128 + signal``
- ``SpawnFailed(cause, status)``: the reported status, else 1
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
import contextlib
import os
from pathlib import Path
import signal
import threading
from typing import Any

from attrs import frozen
from provide.foundation import logger
from provide.foundation.process import run

from ansilust.config.defaults import FAILURE_EXIT_CODE, SIGNAL_EXIT_BASE


@frozen
class Exited:
    code: int

    @property
    def exit_status(self) -> int:
        return self.code


@frozen
class Signaled:
    signal: int

    @property
    def exit_status(self) -> int:
        return SIGNAL_EXIT_BASE + self.signal


@frozen
class SpawnFailed:
    cause: str
    status: int | None = None

    @property
    def exit_status(self) -> int:
        return self.status or FAILURE_EXIT_CODE


ExecResult = Exited | Signaled | SpawnFailed


def result_from_returncode(returncode: int) -> ExecResult:
    """Classify a subprocess return code (negative means killed by signal)."""
    if returncode < 0:
        return Signaled(-returncode)
    return Exited(returncode)


def spawn_and_wait(binary_path: Path, args: Sequence[str]) -> ExecResult:
    """Run the binary to completion with inherited stdio.

    No timeout is applied; the child runs until it exits or is signaled.
    """
    command = [str(binary_path), *args]
    logger.debug(f"🏃 Executing: {binary_path} ({len(args)} args)")

    # The full environment is passed explicitly; run() otherwise scrubs it to an allowlist
    try:
        with _shield_interrupts():
            result = run(command, env=dict(os.environ), capture_output=False, check=False)
    except Exception as e:
        logger.debug(f"❌ Execution failed: {e}")
        return SpawnFailed(cause=str(e), status=_reported_status(e))

    outcome = result_from_returncode(result.returncode)
    logger.debug(f"🏁 Child finished: {outcome}")
    return outcome


def _reported_status(error: BaseException) -> int | None:
    status = getattr(error, "returncode", None)
    return status if isinstance(status, int) and status > 0 else None


def _ignore_signal(signum: int, frame: Any) -> None:
    """Leave SIGINT to the child; its exit status reports the interruption."""


@contextlib.contextmanager
def _shield_interrupts() -> Iterator[None]:
    # A Python-level handler (unlike SIG_IGN) is reset to the default in the exec'd child
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGINT, _ignore_signal)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


# 🌶️📦🔚
