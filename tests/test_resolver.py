"""Tests for chatfmt.core.resolver — first configured group wins."""

from chatfmt.core.resolver import resolve_template

FALLBACK = '&7%player%&f: %message%'
TABLE = {
    'admin': '&c[Admin] %player%: %message%',
    'vip': '&6[VIP] %player%: %message%',
}


class TestResolveTemplate:
    def test_single_group(self):
        assert resolve_template({'vip'}, TABLE, FALLBACK) == TABLE['vip']

    def test_config_order_wins(self):
        assert resolve_template({'vip', 'admin'}, TABLE, FALLBACK) == TABLE['admin']

    def test_config_order_wins_regardless_of_membership_order(self):
        assert resolve_template(['vip', 'admin'], TABLE, FALLBACK) == TABLE['admin']
        assert resolve_template(['admin', 'vip'], TABLE, FALLBACK) == TABLE['admin']

    def test_reordered_table_changes_winner(self):
        table = {'vip': TABLE['vip'], 'admin': TABLE['admin']}
        assert resolve_template({'admin', 'vip'}, table, FALLBACK) == TABLE['vip']

    def test_case_insensitive_member_group(self):
        assert resolve_template({'VIP'}, TABLE, FALLBACK) == TABLE['vip']

    def test_case_insensitive_table_key(self):
        assert resolve_template({'admin'}, {'Admin': 'x'}, FALLBACK) == 'x'

    def test_empty_table_gives_fallback(self):
        assert resolve_template({'admin'}, {}, FALLBACK) == FALLBACK

    def test_no_match_gives_fallback(self):
        assert resolve_template({'builder', 'default'}, TABLE, FALLBACK) == FALLBACK

    def test_no_groups_gives_fallback(self):
        assert resolve_template(set(), TABLE, FALLBACK) == FALLBACK

    def test_empty_template_is_returned_as_is(self):
        assert resolve_template({'mute'}, {'mute': ''}, FALLBACK) == ''
