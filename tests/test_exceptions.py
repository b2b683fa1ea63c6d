"""Tests for the exception hierarchy."""

import pytest

from hookquery.exceptions import ChannelNotImplementedError, ConstructionError, HookQueryError, TransportError


class TestHookQueryError:
    def test_message_only(self):
        err = HookQueryError("Something failed")
        assert str(err) == "Something failed"
        assert err.details == {}

    def test_message_with_details(self):
        err = HookQueryError("Invalid name", name="Posts")
        assert str(err) == "Invalid name (name='Posts')"

    def test_details_only(self):
        assert str(HookQueryError(status=500)) == "status=500"

    def test_repr(self):
        err = HookQueryError("x", a=1)
        assert repr(err) == "HookQueryError(message='x', details={'a': 1})"


@pytest.mark.parametrize("cls", [ConstructionError, ChannelNotImplementedError, TransportError])
def test_subclasses_share_base(cls):
    assert issubclass(cls, HookQueryError)


def test_channel_error_is_not_implemented_error():
    with pytest.raises(NotImplementedError):
        raise ChannelNotImplementedError("Not implemented.", collection="posts")


def test_transport_error_status():
    assert TransportError("Not found", status=404, path="collection/posts/7").status == 404
    assert TransportError("Network down").status is None
