"""
Tests for Dummy buffers — Purpose placeholder names
"""

import pytest

from purpose.core.dummy import (
    DUMMY_PREFIX, DUMMY_SUFFIX, create_dummy_buffer, decode, encode, is_dummy_name,
)
from purpose.core.layout import MemoryHost
from purpose.core.purposes import Purpose


class TestCodec:
    """encode/decode."""

    def test_encode_format(self):
        assert encode("edit") == "*pu-dummy-edit*"
        assert encode(Purpose("edit")) == DUMMY_PREFIX + "edit" + DUMMY_SUFFIX

    @pytest.mark.parametrize("name", ["edit", "terminal", "my purpose", "a-b_c.d", "x*y"])
    def test_round_trip(self, name):
        """decode(encode(P)) is P."""
        purpose = Purpose(name)
        assert decode(encode(purpose)) is purpose

    @pytest.mark.parametrize("name", ["main.py", "*scratch*", "*pu-dummy-*", "pu-dummy-edit*", "*pu-dummy-edit"])
    def test_non_dummy_names(self, name):
        """Names outside the pattern decode to None."""
        assert decode(name) is None
        assert not is_dummy_name(name)

    def test_is_dummy_name(self):
        assert is_dummy_name("*pu-dummy-search*")


class TestCreate:
    """Dummy buffers in a host."""

    def test_create_adds_buffer(self):
        host = MemoryHost()
        buffer = create_dummy_buffer(host, "search")
        assert buffer.name == "*pu-dummy-search*"
        assert host.get_buffer("*pu-dummy-search*") is buffer
        assert buffer.mode == "fundamental-mode"

    def test_create_is_idempotent(self):
        host = MemoryHost()
        assert create_dummy_buffer(host, "search") is create_dummy_buffer(host, "search")
