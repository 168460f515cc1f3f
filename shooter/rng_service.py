import random

from shooter.logger import get_logger

log = get_logger("rng")


class RNGService:
    """Seedable random source owned by a simulation.

    Wraps a private `random.Random` so enemy spawning never touches the
    global generator and two runs with the same seed spawn identically.
    """

    def __init__(self, seed: int | None = None):
        self._generator = random.Random(seed)
        log.info(f"RNG initialized with seed: {seed!r}")

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self._generator.random() < probability

    def randrange(self, stop: int) -> int:
        """Return a random integer N such that 0 <= N < stop."""
        return self._generator.randrange(stop)
