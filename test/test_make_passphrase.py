import io
import os
import itertools
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from unittest import TestCase

from dicepass.make_passphrase import load_store, main
from dicepass.wordlist import Language

this_dir = os.path.dirname(os.path.realpath(__file__))
config_dir = os.path.join(this_dir, '../configs')


def run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        status = main(list(argv))
    return status, out.getvalue(), err.getvalue()


class MakePassphraseTest(TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tempdir.cleanup)

    def write(self, name, content):
        filename = os.path.join(self.tempdir.name, name)
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(content)
        return filename

    def test_defaults(self):
        status, out, err = run()
        self.assertEqual(0, status)
        self.assertEqual(1, len(out.splitlines()))
        self.assertIn('Entropy: 77.5 bits (6 words, English wordlist)', err)

    def test_words_and_separator(self):
        for i in range(1, 11):
            status, out, err = run('-w', str(i), '-s', '-')
            self.assertEqual(0, status)
            self.assertEqual(i, len(out.strip().split('-')))

    def test_word_count_out_of_range(self):
        for words in ('0', '-3', '21'):
            status, out, err = run('--words', words)
            self.assertEqual(1, status)
            self.assertEqual('', out)
            self.assertIn('Error: word count must be between 1 and 20', err)

    def test_unsupported_language(self):
        status, out, err = run('-l', 'klingon')
        self.assertEqual(1, status)
        self.assertIn("Error: unsupported language: 'klingon'", err)

    def test_languages(self):
        for name, title in [('ro', 'Romanian'), ('mixed', 'Mixed (English + Romanian)'), ('english', 'English')]:
            status, out, err = run('-l', name, '-w', '4', '-s', ' ')
            self.assertEqual(0, status)
            self.assertEqual(4, len(out.split()))
            self.assertIn('(4 words, {} wordlist)'.format(title), err)

    def test_rolls(self):
        status, out, err = run('-r', '-w', '3', '-s', ' ')
        self.assertEqual(0, status)
        rolls_line, passphrase_line = out.splitlines()
        rolls = rolls_line[len('Dice rolls: '):].split(' ')
        self.assertEqual(3, len(rolls))
        self.assertTrue(all(len(roll) == 5 for roll in rolls))
        self.assertEqual(3, len(passphrase_line[len('Passphrase: '):].split(' ')))

    def test_config_file(self):
        config = self.write('test.conf', "words: 5\nseparator: '_'\nlanguage: ro\n")
        status, out, err = run('-c', config)
        self.assertEqual(0, status)
        self.assertEqual(5, len(out.strip().split('_')))
        self.assertIn('Romanian wordlist', err)

        # command line flags win over the config file
        status, out, err = run('-c', config, '-w', '3', '-l', 'en')
        self.assertEqual(3, len(out.strip().split('_')))
        self.assertIn('English wordlist', err)

    def test_example_config(self):
        status, out, err = run('-c', os.path.join(config_dir, 'default.conf'))
        self.assertEqual(0, status)
        self.assertEqual(6, len(out.strip().split('-')))

    def test_bad_config(self):
        config = self.write('list.conf', '- words\n- 5\n')
        status, out, err = run('-c', config)
        self.assertEqual(1, status)
        self.assertIn('must contain a mapping', err)

        status, out, err = run('-c', os.path.join(self.tempdir.name, 'missing.conf'))
        self.assertEqual(1, status)
        self.assertIn('Error:', err)

    def test_bad_config_types(self):
        for content, message in [('words: true\n', 'word count must be between 1 and 20'),
                                 ("words: '6'\n", 'word count must be between 1 and 20'),
                                 ("rolls: 'no'\n", "rolls must be true or false, got 'no'"),
                                 ('rolls: 1\n', 'rolls must be true or false, got 1')]:
            config = self.write('types.conf', content)
            status, out, err = run('-c', config)
            self.assertEqual(1, status, content)
            self.assertEqual('', out)
            self.assertIn('Error: ' + message, err)

        config = self.write('rolls.conf', 'rolls: true\nwords: 2\n')
        status, out, err = run('-c', config)
        self.assertEqual(0, status)
        self.assertTrue(out.startswith('Dice rolls: '))

    def test_custom_wordlist(self):
        lines = ['{} w{}'.format(''.join(dice), ''.join(dice)) for dice in itertools.product('123456', repeat=5)]
        wordlist = self.write('custom.txt', '\n'.join(lines))
        status, out, err = run('--wordlist', wordlist, '-w', '4', '-s', ' ')
        self.assertEqual(0, status)
        for word in out.split():
            self.assertRegex(word, r'^W[1-6]{5}$')

    def test_incomplete_wordlist_warning(self):
        wordlist = self.write('short.txt', '11111 abacus\n11112 abdomen\n')
        with self.assertLogs('dicepass.make_passphrase', level='WARNING') as cm:
            store = load_store({'en': wordlist})
        self.assertEqual(2, store.size(Language.ENGLISH))
        self.assertIn('English wordlist has 2 words instead of 7776', '\n'.join(cm.output))

    def test_unreachable_codes_warning(self):
        wordlist = self.write('bad_codes.txt', '11111 abacus\n11117 abdomen\n1111 able\n')
        with self.assertLogs('dicepass.make_passphrase', level='WARNING') as cm:
            store = load_store({'en': wordlist})
        self.assertEqual(3, store.size(Language.ENGLISH))
        output = '\n'.join(cm.output)
        self.assertIn('English wordlist has 2 entries that no dice roll can reach, e.g. 1111', output)
        self.assertIn('English wordlist has 1 words instead of 7776', output)
        self.assertNotIn('Romanian', output)

    def test_collision(self):
        status, out, err = run('-w', '4', '--collision', '70')
        self.assertEqual(0, status)
        self.assertIn('Collision chance for 70 passphrases:', err)

        status, out, err = run('-w', '6', '--collision', str(10 ** 9))
        self.assertEqual(0, status)
        self.assertIn('Collision chance for 1000000000 passphrases: 2.26e-06', err)
