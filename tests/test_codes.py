"""Tests for chatfmt.core.codes — marker scanner and legacy normalisation."""

from chatfmt.core.codes import HEX, LEGACY, TEXT, Token, hex_marker_at, iter_tokens, normalize


class TestIterTokens:
    def test_plain_text_is_one_token(self):
        assert list(iter_tokens('hello')) == [Token(TEXT, 'hello')]

    def test_empty(self):
        assert list(iter_tokens('')) == []

    def test_legacy_marker(self):
        assert list(iter_tokens('a&cb')) == [
            Token(TEXT, 'a'),
            Token(LEGACY, '&c', '#FF5555'),
            Token(TEXT, 'b'),
        ]

    def test_hex_marker_upper_cased(self):
        assert list(iter_tokens('&#ff00aaX')) == [
            Token(HEX, '&#ff00aa', '#FF00AA'),
            Token(TEXT, 'X'),
        ]

    def test_adjacent_markers(self):
        kinds = [t.kind for t in iter_tokens('&a&#123456&b')]
        assert kinds == [LEGACY, HEX, LEGACY]

    def test_lone_ampersand_is_text(self):
        assert list(iter_tokens('rock & roll &')) == [Token(TEXT, 'rock & roll &')]

    def test_non_hex_after_ampersand_is_text(self):
        assert list(iter_tokens('&g&z')) == [Token(TEXT, '&g&z')]

    def test_short_hex_marker_is_not_a_marker(self):
        # '&#12345' has only five digits: '&' + '#' are literal, no legacy match either
        assert list(iter_tokens('&#12345')) == [Token(TEXT, '&#12345')]

    def test_legacy_disabled(self):
        assert list(iter_tokens('&cA&#00FF00B', legacy=False)) == [
            Token(TEXT, '&cA'),
            Token(HEX, '&#00FF00', '#00FF00'),
            Token(TEXT, 'B'),
        ]

    def test_literal_runs_are_maximal(self):
        tokens = list(iter_tokens('ab&xcd&1ef'))
        assert tokens[0] == Token(TEXT, 'ab&xcd')
        assert tokens[-1] == Token(TEXT, 'ef')


class TestHexMarkerAt:
    def test_match(self):
        assert hex_marker_at('x&#abcdef', 1) == '#ABCDEF'

    def test_no_prefix(self):
        assert hex_marker_at('&abcdef', 0) is None

    def test_too_short_at_end(self):
        assert hex_marker_at('&#abc', 0) is None

    def test_non_hex_digit(self):
        assert hex_marker_at('&#abcdeg', 0) is None


class TestNormalize:
    def test_legacy_red(self):
        assert normalize('&c') == '&#FF5555'

    def test_uppercase_legacy(self):
        assert normalize('&C') == '&#FF5555'

    def test_default_fallback_format(self):
        assert normalize('&7%player%&f: %message%') == '&#AAAAAA%player%&#FFFFFF: %message%'

    def test_hex_markers_pass_through(self):
        assert normalize('&#123abcX') == '&#123abcX'

    def test_no_markers_unchanged(self):
        assert normalize('just text & more') == 'just text & more'

    def test_no_legacy_markers_remain(self):
        out = normalize('&0&1&2&3&4&5&6&7&8&9&a&b&c&d&e&f')
        tokens = list(iter_tokens(out))
        assert all(t.kind == HEX for t in tokens)
        assert len(tokens) == 16

    def test_double_ampersand(self):
        assert normalize('&&c') == '&&#FF5555'
