"""Tests for name parsing and display rules."""

from __future__ import annotations

from xml.etree.ElementTree import fromstring

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from rimsave.domain.enums import NameKind
from rimsave.domain.errors import MissingFieldError, UnknownVariantError
from rimsave.domain.models import Name
from rimsave.domain.names import parse_name

words = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJ", min_size=1, max_size=12)


class TestParseName:
    def test_null_marker(self):
        name = parse_name(fromstring('<name IsNull="True" />'))
        assert name.kind is NameKind.NULL
        assert name.full_name == "???"

    def test_null_marker_wins_over_class(self):
        name = parse_name(fromstring('<name IsNull="True" Class="NameTriple" />'))
        assert name.kind is NameKind.NULL

    def test_triple(self):
        node = fromstring(
            '<name Class="NameTriple"><first>Marcus</first>'
            "<nick>Sparrow</nick><last>Vale</last></name>"
        )
        name = parse_name(node)
        assert name == Name.triple(first="Marcus", last="Vale", nick="Sparrow")
        assert name.kind is NameKind.TRIPLE

    def test_single(self):
        name = parse_name(fromstring('<name Class="NameSingle"><name>Wren</name></name>'))
        assert name.kind is NameKind.SINGLE
        assert name.first == ""
        assert name.last == ""
        assert name.nick == "Wren"
        assert name.full_name == "'Wren'"

    def test_triple_missing_part_raises(self):
        node = fromstring('<name Class="NameTriple"><first>Marcus</first><last>Vale</last></name>')
        with pytest.raises(MissingFieldError) as info:
            parse_name(node)
        assert info.value.field == "nick"

    def test_unknown_class_raises(self):
        with pytest.raises(UnknownVariantError) as info:
            parse_name(fromstring('<name Class="NameShort"><name>X</name></name>'))
        assert info.value.attributes == {"Class": "NameShort"}

    def test_no_attributes_raises(self):
        with pytest.raises(UnknownVariantError):
            parse_name(fromstring("<name><first>A</first></name>"))

    def test_is_null_false_is_not_null(self):
        with pytest.raises(UnknownVariantError):
            parse_name(fromstring('<name IsNull="False" />'))


class TestFullName:
    def test_nick_equals_first(self):
        assert Name.triple("Hana", "Okoye", "Hana").full_name == "'Hana' Okoye"

    def test_nick_equals_last(self):
        assert Name.triple("Hana", "Okoye", "Okoye").full_name == "Hana 'Okoye'"

    def test_all_different(self):
        assert Name.triple("Marcus", "Vale", "Sparrow").full_name == "Marcus 'Sparrow' Vale"

    def test_str_uses_full_name(self):
        assert str(Name.single("Wren")) == "'Wren'"

    @given(first=words, last=words, nick=words)
    def test_all_different_property(self, first, last, nick):
        assume(len({first, last, nick}) == 3)
        assert Name.triple(first, last, nick).full_name == f"{first} '{nick}' {last}"

    @given(first=words, last=words)
    def test_nick_is_first_property(self, first, last):
        assume(first != last)
        assert Name.triple(first, last, first).full_name == f"'{first}' {last}"

    @given(first=words, last=words)
    def test_nick_is_last_property(self, first, last):
        assume(first != last)
        assert Name.triple(first, last, last).full_name == f"{first} '{last}'"

    def test_names_are_immutable(self):
        name = Name.single("Wren")
        with pytest.raises(AttributeError):
            name.nick = "Other"  # type: ignore[misc]
