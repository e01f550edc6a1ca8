import threading

# Largest value the counter may hold (an unsigned 64-bit word).
MAX_COUNT = 2**64 - 1


class CounterOverflowError(Exception):
    pass


class CounterStore:
    """Process-local counter shared by all request handlers.

    Every read and update happens under a single lock; nothing else is done
    while it is held.
    """

    def __init__(self, initial: int = 0, limit: int = MAX_COUNT):
        if initial < 0 or initial > limit:
            raise ValueError(f"initial value {initial} out of range 0..{limit}")
        self.limit = limit
        self.value = initial
        self.lock = threading.Lock()

    def read(self) -> int:
        with self.lock:
            return self.value

    def increment_by(self, diff: int) -> int:
        if diff < 0:
            raise ValueError("diff must be non-negative")
        with self.lock:
            if diff > self.limit - self.value:
                raise CounterOverflowError(
                    f"count {self.value} + {diff} exceeds {self.limit}"
                )
            self.value += diff
            return self.value
