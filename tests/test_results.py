import io

from funciter.iterators import Iterator, exhausted
from funciter.lines import lines_string
from funciter.option import none, some
from funciter.result import err, ok
from funciter.results import collect_results


class FakeIterator(Iterator):
    def __init__(self, *returns, default=None):
        self._returns = list(returns)
        self._default = default if default is not None else none()
        self.calls = 0

    def next(self):
        index = self.calls
        self.calls += 1
        if index < len(self._returns):
            return self._returns[index]
        return self._default


def test_collect_results_example():
    words = collect_results(lines_string(io.BytesIO(b"hello\nfriend")))
    assert str(words) == "Ok(['hello', 'friend'])"


def test_collect_results():
    words = collect_results(lines_string(io.BytesIO(b"hello\nthere")))
    assert words.unwrap() == ["hello", "there"]


def test_collect_results_empty():
    assert collect_results(exhausted()).unwrap() == []


def test_collect_results_err():
    delegate = FakeIterator(default=some(err(ValueError("oops"))))
    numbers = collect_results(delegate)
    assert str(numbers.unwrap_err()) == "oops"


def test_collect_results_err_stops_consuming():
    delegate = FakeIterator(
        some(ok(42)),
        some(err(ValueError("oops"))),
        some(ok(43)),
    )
    numbers = collect_results(delegate)
    assert str(numbers.unwrap_err()) == "oops"
    assert delegate.next().unwrap() == ok(43)