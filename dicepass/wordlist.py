"""Diceware wordlists: roll code -> word mappings for each supported language"""
import os
import enum
import functools
from types import MappingProxyType

from dicepass.errors import UnsupportedLanguage

this_dir = os.path.dirname(os.path.realpath(__file__))

DEFAULT_ENGLISH_WORDLIST = os.path.join(this_dir, 'wordlist_en.txt')
DEFAULT_ROMANIAN_WORDLIST = os.path.join(this_dir, 'wordlist_ro.txt')

DICE_PER_WORD = 5
WORDLIST_SIZE = 6 ** DICE_PER_WORD


class Language(enum.Enum):
    ENGLISH = 'en'
    ROMANIAN = 'ro'
    MIXED = 'mixed'  # per-word choice between ENGLISH and ROMANIAN

    @property
    def title(self):
        return _TITLES[self]

    @classmethod
    def parse(cls, name):
        """Look up a language by code or name, e.g. 'en', 'Romanian', 'mix'"""
        if isinstance(name, cls):
            return name
        try:
            return _ALIASES[str(name).strip().lower()]
        except KeyError:
            raise UnsupportedLanguage(name) from None


_ALIASES = {
    'en': Language.ENGLISH,
    'english': Language.ENGLISH,
    'ro': Language.ROMANIAN,
    'romanian': Language.ROMANIAN,
    'mixed': Language.MIXED,
    'mix': Language.MIXED,
}
_TITLES = {
    Language.ENGLISH: 'English',
    Language.ROMANIAN: 'Romanian',
    Language.MIXED: 'Mixed (English + Romanian)',
}


def parse_wordlist(data):
    """Parse wordlist text into a dict of {dice rolls: word} pairs.
    Each line is '<code> <word>'. Blank lines and lines that don't split into exactly
    two fields are skipped, so PGP armor or a trailing newline in the file is harmless."""
    words = {}
    for line in data.splitlines():
        line = line.strip()
        if not line:
            continue

        parts = line.split()
        if len(parts) == 2:
            words[parts[0]] = parts[1]

    return words


def read_wordlist(wordlist_file):
    """Read and parse a wordlist file"""
    with open(wordlist_file, 'r', encoding='utf-8') as f:
        return parse_wordlist(f.read())


class WordlistStore:
    """Read-only English and Romanian wordlists, built once and shared by all generators.

    The two lists are kept separate; mixed-language passphrases pick between them per word.
    """

    def __init__(self, english, romanian):
        self._wordlists = {
            Language.ENGLISH: MappingProxyType(dict(english)),
            Language.ROMANIAN: MappingProxyType(dict(romanian)),
        }

    @classmethod
    def load(cls, english_file=None, romanian_file=None):
        """Build a store from wordlist files, defaulting to the bundled ones"""
        english = read_wordlist(english_file or DEFAULT_ENGLISH_WORDLIST)
        romanian = read_wordlist(romanian_file or DEFAULT_ROMANIAN_WORDLIST)
        return cls(english, romanian)

    @property
    def english(self):
        return self._wordlists[Language.ENGLISH]

    @property
    def romanian(self):
        return self._wordlists[Language.ROMANIAN]

    def wordlist(self, language):
        """Mapping for a single-source language. MIXED has no wordlist of its own."""
        try:
            return self._wordlists[language]
        except (KeyError, TypeError):
            raise UnsupportedLanguage(language) from None

    def size(self, language=Language.ENGLISH):
        if language is Language.MIXED:
            return len(self.english) + len(self.romanian)
        return len(self.wordlist(language))


@functools.lru_cache(maxsize=None)
def default_store():
    """Store over the bundled wordlists, loaded on first use and reused afterwards"""
    return WordlistStore.load()
