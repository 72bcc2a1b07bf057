"""Tests for chatfmt.core.types — RichMessage and ChatSettings."""

import dataclasses

import pytest
from chatfmt.core.types import ChatSettings, ColorSegment, Renderer, RichMessage


class TestRichMessage:
    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            RichMessage(())

    def test_raw_is_single_white(self):
        msg = RichMessage.raw('hi')
        assert msg.is_single
        assert msg.segments == (ColorSegment('hi', '#FFFFFF'),)

    def test_plain_joins_in_order(self):
        msg = RichMessage((ColorSegment('a', '#000000'), ColorSegment('b', '#FFFFFF')))
        assert msg.plain == 'ab'
        assert len(msg) == 2
        assert not msg.is_single
        assert [s.text for s in msg] == ['a', 'b']


class TestChatSettings:
    def test_defaults(self):
        s = ChatSettings()
        assert s.enabled is True
        assert s.fallback_format == '&7%player%&f: %message%'
        assert s.formats == ()
        assert s.table == {}

    def test_table_keeps_order(self):
        s = ChatSettings(formats=(('b', '2'), ('a', '1')))
        assert list(s.table) == ['b', 'a']

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ChatSettings().enabled = False  # type: ignore[misc]


class TestRenderer:
    def test_execute_without_run_raises(self):
        with pytest.raises(RuntimeError):
            Renderer('x').execute(RichMessage.raw('hi'), None)

    def test_execute_returns_output(self):
        rend = Renderer('upper')

        @rend.run
        def run(message, args):
            return message.plain.upper()

        assert rend.execute(RichMessage.raw('hi'), None) == 'HI'
