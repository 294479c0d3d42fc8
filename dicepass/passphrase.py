"""Generate Diceware passphrases.

Every word is picked by rolling five dice and looking the result up in a 7776 word list,
so each word adds log2(7776) ~ 12.925 bits of entropy:

    4 words: ~51.7 bits
    6 words: ~77.5 bits (recommended minimum)
    8 words: ~103.4 bits

Words are capitalized and joined with no separator by default, e.g. 'ColtDefaultArousalThimble'.
"""
import math
import functools
from collections import namedtuple

from dicepass.dice import Dice
from dicepass.errors import InvalidWordCount, WordNotFound
from dicepass.wordlist import Language, WORDLIST_SIZE, default_store

Word = namedtuple('Word', ['code', 'language', 'text'])

BITS_PER_WORD = math.log2(WORDLIST_SIZE)


def capitalize(word):
    """Uppercase the first letter and leave the rest alone (unlike str.capitalize)"""
    return word[:1].upper() + word[1:]


class PassphraseGenerator:
    """Rolls dice and turns them into passphrases using the wordlists of a store

    Args:
        store: WordlistStore, defaults to the bundled wordlists
        dice: Dice, defaults to dice backed by the OS CSPRNG
    """

    def __init__(self, store=None, dice=None):
        self.store = store if store is not None else default_store()
        self.dice = dice if dice is not None else Dice()

    def select_word(self, code, language):
        """Look up the word for a roll code.
        In MIXED mode a fresh coin is flipped for every word to choose the wordlist."""
        language = Language.parse(language)
        if language is Language.MIXED:
            language = Language.ENGLISH if self.dice.flip() else Language.ROMANIAN

        word = self.store.wordlist(language).get(code)
        if word is None:
            raise WordNotFound(code)
        return Word(code, language, capitalize(word))

    def draw_words(self, word_count, language=Language.ENGLISH):
        """Roll and look up word_count words. Any failure aborts the whole draw."""
        if word_count < 1:
            raise InvalidWordCount(word_count)
        language = Language.parse(language)

        words = []
        for _ in range(word_count):
            code = self.dice.roll_code()
            words.append(self.select_word(code, language))

        return words

    def generate(self, word_count, language=Language.ENGLISH, separator=''):
        words = self.draw_words(word_count, language)
        return separator.join(word.text for word in words)

    def generate_with_rolls(self, word_count, language=Language.ENGLISH):
        """Passphrase (no separator) plus the dice rolls behind each word, for auditing"""
        words = self.draw_words(word_count, language)
        return ''.join(word.text for word in words), [word.code for word in words]


@functools.lru_cache(maxsize=None)
def default_generator():
    return PassphraseGenerator()


def generate(word_count):
    return generate_with_language_and_separator(word_count, Language.ENGLISH, '')


def generate_with_separator(word_count, separator):
    return generate_with_language_and_separator(word_count, Language.ENGLISH, separator)


def generate_with_language(word_count, language):
    return generate_with_language_and_separator(word_count, language, '')


def generate_with_language_and_separator(word_count, language, separator):
    return default_generator().generate(word_count, language, separator)


def generate_with_rolls(word_count):
    return generate_with_rolls_and_language(word_count, Language.ENGLISH)


def generate_with_rolls_and_language(word_count, language):
    return default_generator().generate_with_rolls(word_count, language)


def entropy(word_count):
    """Bits of entropy of a passphrase with word_count words from a 7776 word list"""
    return word_count * BITS_PER_WORD


def wordlist_size():
    return default_store().size(Language.ENGLISH)


def wordlist_size_by_language(language):
    """Number of words available for a language; MIXED counts both wordlists"""
    return default_store().size(Language.parse(language))
