import threading

import pytest

from funciter.channel import Channel, from_channel, to_channel
from funciter.iterators import exhausted, lift


def _feed(channel, values):
    def produce():
        for value in values:
            channel.send(value)
        channel.close()

    thread = threading.Thread(target=produce, daemon=True)
    thread.start()
    return thread


def test_from_channel_buffered_example():
    channel = Channel(2)
    thread = _feed(channel, [1, 2])
    assert from_channel(channel).collect() == [1, 2]
    thread.join()


def test_from_channel():
    channel = Channel()
    thread = _feed(channel, [1, 2, 3])
    numbers = from_channel(channel)

    assert numbers.next().unwrap() == 1
    assert numbers.next().unwrap() == 2
    assert numbers.next().unwrap() == 3
    assert numbers.next().is_none()
    thread.join()


def test_from_channel_empty():
    channel = Channel()
    channel.close()
    assert from_channel(channel).next().is_none()


def test_from_channel_string():
    channel = Channel()
    channel.close()
    assert str(from_channel(channel)) == "Iterator<Channel>"


def test_buffered_send_without_receiver():
    channel = Channel(2)
    channel.send("a")
    channel.send("b")
    channel.close()
    assert list(channel) == ["a", "b"]


def test_send_on_closed_channel_raises():
    channel = Channel(1)
    channel.close()
    with pytest.raises(RuntimeError, match="send on closed channel"):
        channel.send(1)


def test_close_twice_raises():
    channel = Channel()
    channel.close()
    with pytest.raises(RuntimeError, match="close of closed channel"):
        channel.close()


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        Channel(-1)


def test_to_channel():
    assert list(to_channel(lift([1, 2, 3, 4]))) == [1, 2, 3, 4]


def test_to_channel_empty():
    assert list(to_channel(exhausted())) == []


def test_to_channel_method():
    assert list(lift([1, 2, 3]).to_channel()) == [1, 2, 3]


def test_to_channel_round_trip():
    assert from_channel(to_channel(lift(["x", "y"]))).collect() == ["x", "y"]