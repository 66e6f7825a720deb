"""Generation of unique account numbers."""

import os
import random
import time

from db.index import AccountIndex

ACCOUNT_NUMBER_LENGTHS = (7, 8, 9)


def make_rng() -> random.Random:
    """Create the process-wide random source, seeded from time and PID."""
    return random.Random(time.time_ns() ^ os.getpid())


class AccountNumberGenerator:
    """Produces account numbers not currently listed in the index.

    Args:
        index: Index used for the collision check.
        rng: Random source; created once per process and shared.
    """

    def __init__(self, index: AccountIndex, rng: random.Random):
        self.index = index
        self.rng = rng

    def candidate(self) -> str:
        """Draw one candidate of 7, 8 or 9 digits with a non-zero first digit."""
        length = self.rng.choice(ACCOUNT_NUMBER_LENGTHS)
        digits = [str(self.rng.randint(1, 9))]
        digits.extend(str(self.rng.randint(0, 9)) for _ in range(length - 1))
        return "".join(digits)

    def generate(self) -> str:
        """Return a fresh account number.

        Candidates already in the index are discarded. There is no retry
        bound; the number space is far larger than any realistic index.
        """
        while True:
            acc_num = self.candidate()
            if not self.index.exists(acc_num):
                return acc_num
