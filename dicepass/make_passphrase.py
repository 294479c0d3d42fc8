"""Generate a Diceware passphrase from the command line
Defaults can be kept in a YAML config file; sample config at configs/default.conf
"""
import sys
import yaml
import logging
import argparse

from dicepass.dice import is_roll_code
from dicepass.errors import DicewareError
from dicepass.passphrase import PassphraseGenerator, entropy
from dicepass.passtools import collision_probability, merge_dict, split_capitalized_words
from dicepass.wordlist import WORDLIST_SIZE, Language, WordlistStore, default_store

log = logging.getLogger(__name__)

MIN_WORDS = 1
MAX_WORDS = 20
DEFAULTS = {
    'words': 6,
    'separator': '',
    'language': 'en',
    'rolls': False,
    'wordlists': {},
}

EPILOG = """Recommended word counts:
  4 words  - ~52 bits  - minimum for low-value accounts
  6 words  - ~78 bits  - most accounts
  8 words  - ~103 bits - high security accounts
  12 words - ~155 bits - cryptocurrency wallets
"""


def build_parser():
    # Defaults are None so that only flags given explicitly override the config file
    parser = argparse.ArgumentParser(
        description='Generate a Diceware passphrase. Words are capitalized and concatenated by default, '
                    'e.g. ColtDefaultArousal.',
        epilog=EPILOG, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-w', '--words', type=int,
                        help='Number of words in passphrase (default: {}, range: {}-{})'.format(
                            DEFAULTS['words'], MIN_WORDS, MAX_WORDS))
    parser.add_argument('-s', '--separator', help='Separator between words (default: none)')
    parser.add_argument('-l', '--lang', dest='language',
                        help='Language: en (English), ro (Romanian), or mixed (default: en)')
    parser.add_argument('-r', '--rolls', action='store_true', default=None,
                        help='Show dice rolls used to generate passphrase')
    parser.add_argument('-c', '--config', help='YAML config file with default options')
    parser.add_argument('--wordlist', help='English wordlist file')
    parser.add_argument('--wordlist-ro', help='Romanian wordlist file')
    parser.add_argument('--collision', type=int, metavar='N',
                        help='Also print the chance that N people generating passphrases like this share one')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log what is being loaded')
    return parser


def load_config(filename):
    """Read YAML config file. An empty file is an empty config."""
    with open(filename, 'r') as f:
        doc = yaml.safe_load(f)

    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise ValueError('Config file {} must contain a mapping of options'.format(filename))
    return doc


def resolve_settings(args):
    """Layer DEFAULTS, then the config file, then explicit command line flags"""
    settings = DEFAULTS
    if args.config:
        log.info('Loading config file {}'.format(args.config))
        settings = merge_dict(settings, load_config(args.config))

    wordlists = dict(settings.get('wordlists') or {})
    if args.wordlist:
        wordlists['en'] = args.wordlist
    if args.wordlist_ro:
        wordlists['ro'] = args.wordlist_ro

    flags = {k: getattr(args, k) for k in ('words', 'separator', 'language', 'rolls')}
    settings = merge_dict(settings, {k: v for k, v in flags.items() if v is not None})
    settings['wordlists'] = wordlists
    return settings


def load_store(wordlists):
    """Bundled wordlists unless custom files are configured"""
    if not wordlists:
        return default_store()

    store = WordlistStore.load(wordlists.get('en'), wordlists.get('ro'))
    for language in (Language.ENGLISH, Language.ROMANIAN):
        size = store.size(language)
        log.info('{} wordlist has {} words'.format(language.title, size))
        unreachable = sorted(code for code in store.wordlist(language) if not is_roll_code(code))
        if unreachable:
            log.warning('{} wordlist has {} entries that no dice roll can reach, e.g. {}'.format(
                language.title, len(unreachable), unreachable[0]))
            size -= len(unreachable)
        if size != WORDLIST_SIZE:
            log.warning('{} wordlist has {} words instead of {}; some dice rolls have no word'.format(
                language.title, size, WORDLIST_SIZE))
    return store


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(levelname)s : %(asctime)s : %(name)s : %(message)s')

    try:
        settings = resolve_settings(args)

        words = settings['words']
        # YAML true/false load as bool, which is an int subclass
        if isinstance(words, bool) or not isinstance(words, int) or not MIN_WORDS <= words <= MAX_WORDS:
            raise ValueError('word count must be between {} and {}'.format(MIN_WORDS, MAX_WORDS))
        show_rolls = settings['rolls']
        if not isinstance(show_rolls, bool):
            raise ValueError('rolls must be true or false, got {!r}'.format(show_rolls))
        language = Language.parse(settings['language'])
        separator = str(settings['separator'] or '')

        generator = PassphraseGenerator(load_store(settings['wordlists']))

        if show_rolls:
            passphrase, rolls = generator.generate_with_rolls(words, language)
            # Re-separate instead of regenerating so the rolls still match
            if separator:
                passphrase = separator.join(split_capitalized_words(passphrase))
            print('Dice rolls:', ' '.join(rolls))
            print('Passphrase:', passphrase)
        else:
            print(generator.generate(words, language, separator))

        collision = None
        if args.collision is not None:
            collision = collision_probability(args.collision, words)

    except (DicewareError, ValueError, OSError, yaml.YAMLError) as e:
        print('Error: {}'.format(e), file=sys.stderr)
        return 1

    print('\nEntropy: {:.1f} bits ({} words, {} wordlist)'.format(entropy(words), words, language.title),
          file=sys.stderr)
    if collision is not None:
        print('Collision chance for {} passphrases: {:.2e} ({:.8f}%)'.format(
            args.collision, collision, collision * 100), file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
