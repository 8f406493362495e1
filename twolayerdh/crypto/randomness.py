"""Thread-safe uniform integer source for auto-mode exponent selection."""

import random
import secrets
import threading
from typing import Optional
from twolayerdh.common.errors import InvalidParameterError


class RandomSource:
    """Uniform integers in [0, R), safe to share between threads."""
    
    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random source.
        
        Args:
            seed: Integer seed for a reproducible generator. None selects
                  the operating system's entropy pool.
        """
        if seed is None:
            self._generator = secrets.SystemRandom()
        else:
            self._generator = random.Random(seed)
        self.seed = seed
        self._lock = threading.Lock()
    
    @property
    def is_deterministic(self) -> bool:
        return self.seed is not None
    
    def uniform_below(self, upper: int) -> int:
        """
        Draw a uniform integer r with 0 <= r < upper.
        
        Raises:
            InvalidParameterError: If upper is less than 1
        """
        if upper < 1:
            raise InvalidParameterError(f"BAD_PARAM: range must be at least 1, got {upper}")
        with self._lock:
            return self._generator.randrange(upper)


_default_source: Optional[RandomSource] = None
_default_lock = threading.Lock()


def default_source() -> RandomSource:
    """Return the process-wide OS-entropy source, creating it on first use."""
    global _default_source
    with _default_lock:
        if _default_source is None:
            _default_source = RandomSource()
        return _default_source
