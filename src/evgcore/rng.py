"""Random number service shared by the selection algorithms."""

import threading
from typing import Optional

import numpy as np


class RandomService:
    """Thread-safe wrapper around a `numpy.random.Generator`.

    Create one instance at start-up and hand it to every component that needs
    random numbers. Draws are serialized, so the service can be shared between
    threads.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.__seed = seed
        self.__generator = np.random.default_rng(seed)
        self.__lock = threading.Lock()

    @property
    def seed(self) -> Optional[int]:
        return self.__seed

    def integer(self, high: int) -> int:
        """Draw an integer uniformly from :math:`[0, high)`."""
        if high <= 0:
            raise ValueError(f"Cannot draw an integer from [0, {high})")
        with self.__lock:
            return int(self.__generator.integers(0, high))

    def uniform(self) -> float:
        """Draw a float uniformly from :math:`[0, 1)`."""
        with self.__lock:
            return float(self.__generator.random())
