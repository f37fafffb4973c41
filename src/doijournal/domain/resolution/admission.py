"""Single-flight admission of concurrent lookups.

A key moves between two states: unclaimed and claimed. ``acquire`` claims a key
for ``lease_seconds`` or rejects the caller immediately when a live lease exists;
nothing ever waits for another lookup to finish. Every lease has a background
timer that drops it when it fires, whether or not the guarded work completed, so
a lease bounds exclusivity from above. ``release`` drops it earlier.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger

from .errors import AdmissionConflictError

log = getLogger(__name__)

type Clock = Callable[[], float]
type TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


def _daemon_timer(interval: float, function: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


@dataclass(eq=False, slots=True)
class AdmissionLease:
    key: str
    expiry: float
    _timer: threading.Timer | None = field(default=None, repr=False)

    def is_live(self, now: float) -> bool:
        return now < self.expiry


class AdmissionGate:
    """Process-wide table of in-flight keys guarded by a single mutex."""

    def __init__(
        self,
        lease_seconds: float,
        *,
        clock: Clock = time.monotonic,
        timer_factory: TimerFactory = _daemon_timer,
    ) -> None:
        if lease_seconds <= 0:
            raise ValueError("lease_seconds must be positive")
        self.lease_seconds = lease_seconds
        self._clock = clock
        self._timer_factory = timer_factory
        self._leases: dict[str, AdmissionLease] = {}
        self._lock = threading.Lock()

    def acquire(self, key: str) -> AdmissionLease:
        """Claim ``key`` or raise ``AdmissionConflictError`` if it is already claimed."""

        with self._lock:
            now = self._clock()
            current = self._leases.get(key)
            if current is not None and current.is_live(now):
                log.info("Rejecting %s: lookup already in progress", key)
                raise AdmissionConflictError(key)
            if current is not None:
                self._discard(current)

            lease = AdmissionLease(key=key, expiry=now + self.lease_seconds)
            timer = self._timer_factory(self.lease_seconds, lambda: self._expire(lease))
            lease._timer = timer  # noqa: SLF001
            self._leases[key] = lease
            timer.start()
            log.debug("Admitted %s until %.3f", key, lease.expiry)
            return lease

    def release(self, key: str, *, lease: AdmissionLease | None = None) -> None:
        """Drop the lease for ``key``; a no-op when there is none.

        Passing ``lease`` restricts the release to that lease, leaving a newer
        claim on the same key untouched.
        """

        with self._lock:
            current = self._leases.get(key)
            if current is None or (lease is not None and current is not lease):
                return
            self._discard(current)
            log.debug("Released %s", key)

    def is_claimed(self, key: str) -> bool:
        with self._lock:
            lease = self._leases.get(key)
            return lease is not None and lease.is_live(self._clock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._leases)

    def _expire(self, lease: AdmissionLease) -> None:
        with self._lock:
            # a newer lease for the same key has its own timer
            if self._leases.get(lease.key) is lease:
                del self._leases[lease.key]
                log.debug("Lease for %s expired", lease.key)

    def _discard(self, lease: AdmissionLease) -> None:
        del self._leases[lease.key]
        self._cancel_timer(lease)

    @staticmethod
    def _cancel_timer(lease: AdmissionLease) -> None:
        if lease._timer is not None:  # noqa: SLF001
            lease._timer.cancel()  # noqa: SLF001
