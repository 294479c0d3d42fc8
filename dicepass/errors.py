"""Errors raised by the passphrase engine"""


class DicewareError(Exception):
    """Base class for all passphrase generation errors"""


class InvalidWordCount(DicewareError, ValueError):
    def __init__(self, word_count):
        super().__init__('word count must be at least 1, got {}'.format(word_count))
        self.word_count = word_count


class RandomnessUnavailable(DicewareError):
    """The secure random source could not supply entropy"""


class WordNotFound(DicewareError, KeyError):
    def __init__(self, code):
        super().__init__(code)
        self.code = code

    def __str__(self):
        return 'no word found for dice roll: {}'.format(self.code)


class UnsupportedLanguage(DicewareError, ValueError):
    def __init__(self, language):
        super().__init__('unsupported language: {!r}'.format(language))
        self.language = language
