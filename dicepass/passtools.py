# Helper functions
import copy
import math

from dicepass.errors import InvalidWordCount
from dicepass.wordlist import WORDLIST_SIZE

EXACT_HOLDERS = 100000


def split_capitalized_words(s):
    """Split a CamelCase passphrase back into its words, e.g. 'HelloWorldTest' -> ['Hello', 'World', 'Test']
    A new word starts at every uppercase letter after the first character."""
    words = []
    current = ''
    for i, c in enumerate(s):
        if i > 0 and c.isupper():
            words.append(current)
            current = ''
        current += c

    if current:
        words.append(current)

    return words


def merge_dict(bot, top):
    """Helper function for merging dict fields over another dict.
    Merge top dict onto bot dict, so that the returned new dict has the updated top vals."""
    new = copy.deepcopy(bot)
    for k, v in top.items():
        new[k] = v
    return new


def collision_probability(holders, word_count, wordlist_size=WORDLIST_SIZE):
    """Probability that at least two of `holders` independently generated passphrases are identical.

    Birthday problem over N = wordlist_size ** word_count equally likely passphrases:
        P(no collision) = prod_{i<holders} (1 - i/N)
    summed in log space so that large N neither overflows nor rounds to exactly 0.

    Up to EXACT_HOLDERS the terms are summed one by one. Beyond that the sum
    is expanded as -sum_m S_m / (m * N**m), with S_m = sum_{i<holders} i**m,
    keeping the first three terms; holders is then tiny next to N, or the
    result is 1.0 to double precision anyway.
    """
    if word_count < 1:
        raise InvalidWordCount(word_count)
    if holders < 2:
        return 0.0

    total = wordlist_size ** word_count
    if holders > total:
        return 1.0

    if holders <= EXACT_HOLDERS:
        log_no_collision = 0.0
        for i in range(1, holders):
            log_no_collision += math.log1p(-i / total)
        return -math.expm1(log_no_collision)

    n = holders - 1
    s1 = n * (n + 1) // 2
    if s1 / total > 50:
        # P(no collision) < e**-50
        return 1.0
    s2 = n * (n + 1) * (2 * n + 1) // 6
    s3 = s1 * s1
    log_no_collision = -(s1 / total + s2 / (2 * total ** 2) + s3 / (3 * total ** 3))
    return -math.expm1(log_no_collision)
