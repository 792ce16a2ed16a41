import random
import secrets

from .curve import ORDER, SCALAR_BYTES


class RandomSource:
    """Random draws for key, hash and mutation choices.

    Backed by OS entropy unless a seed is given, in which case every draw
    (and therefore the whole fuzz corpus) is reproducible.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = secrets.SystemRandom() if seed is None else random.Random(seed)

    def bytes(self, n):
        return bytes(self._rng.getrandbits(8) for _ in range(n))

    def byte(self):
        return self._rng.getrandbits(8)

    def scalar(self):
        return self.bytes(SCALAR_BYTES)

    def private(self):
        while True:
            candidate = self.scalar()
            if 0 < int.from_bytes(candidate, "big") < ORDER:
                return candidate

    def below(self, n):
        return self._rng.randrange(n)

    def coin(self):
        return self._rng.getrandbits(1) == 1
