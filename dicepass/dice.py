"""Secure 6-sided dice"""
import secrets

from dicepass.errors import RandomnessUnavailable
from dicepass.wordlist import DICE_PER_WORD

FACES = '123456'


class Dice:
    """Dice backed by the OS CSPRNG.

    Args:
        randbelow: callable returning a uniform int in [0, n). Only tests should replace it.
    """

    def __init__(self, randbelow=secrets.randbelow):
        self._randbelow = randbelow

    def _draw(self, n):
        try:
            return self._randbelow(n)
        except (OSError, NotImplementedError) as e:
            raise RandomnessUnavailable('failed to generate random number: {}'.format(e)) from e

    def roll(self):
        """Roll one die, 1-6"""
        return self._draw(6) + 1

    def roll_code(self, n=DICE_PER_WORD):
        """Roll n dice and return the faces as a string, e.g. '16254'"""
        return ''.join(str(self.roll()) for _ in range(n))

    def flip(self):
        """One secure random bit"""
        return self._draw(2) == 0


def is_roll_code(code):
    """True for a string of DICE_PER_WORD faces, e.g. '16254'"""
    return (isinstance(code, str) and len(code) == DICE_PER_WORD
            and all(c in FACES for c in code))
