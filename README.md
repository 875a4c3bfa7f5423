# funciter

Lazy, chainable iterators for Python, together with small `Option` and
`Result` types for values that may be missing or may have failed.

It is a library only: there is no command to run.

## Installation

```
pip install funciter
```

## Options and results

`funciter.option` provides `Option`, built with `some(value)` or `none()`;
`funciter.result` provides `Result`, built with `ok(value)` or
`err(exception)`.

```python
from funciter.option import some, none
from funciter.result import ok, err

some(4).unwrap()                        # 4
none().unwrap_or(3)                     # 3
none().unwrap_or_zero(int)              # 0
ok(42).is_ok()                          # True
err(ValueError("oops")).unwrap_or(0)    # 0
str(some("foo"))                        # 'Some(foo)'
str(err(ValueError("oops")))            # 'Err(oops)'
```

`unwrap` on an empty option or a failed result, `expect(message)` likewise,
and `unwrap_err` on a successful result raise `funciter.option.UnwrapError`.
`err` raises `TypeError` if it is not given an exception.

JSON helpers:

- `option_to_json(value)` serialises to compact JSON; a Some option becomes
  its value and an empty one becomes `null`, also when nested in lists or
  dicts.
- `option_from_json(data, kind)` gives `none()` for `null` and `some(value)`
  for a value that fits `kind` (for example `int` or `list[str]`).
- `result_from_json(data, kind)` gives `ok(value)`.

Both decoders raise `ValueError` when the value does not fit `kind`.

## Step-by-step iterators

In `funciter.iterators`, every iterator's `next()` returns an `Option`:
`some(item)` while items remain and `none()` once the iterator is exhausted.
Every iterator can also be used in an ordinary `for` loop. They all share the
chaining methods `take`, `drop`, `filter`, `exclude`, `transform`,
`filter_map`, `enumerate`, `chain`, `find`, `for_each`, `collect` and
`to_channel`.

```python
from funciter.iterators import count, lift, fold, mapped
from funciter.filters import is_even, greater_than, all_of, less_than
from funciter.ops import add

count().take(3).collect()                              # [0, 1, 2]
count().exclude(is_even).take(3).collect()             # [1, 3, 5]
lift([-1, 4, 6]).filter(greater_than(-1)).collect()    # [4, 6]
lift(range(8)).filter(all_of(greater_than(2), less_than(7))).collect()  # [3, 4, 5, 6]
fold(count().take(4), 0, add)                          # 6
mapped(count(), str).take(2).collect()                 # ['0', '1']
str(count())                                           # 'Iterator<Count>'
```

The module functions are `collect`, `fold`, `for_each`, `find`, `chain`,
`count`, `drop`, `enumerated`, `exhausted`, `select`, `exclude`,
`filter_map`, `mapped`, `transform`, `take` and `lift`. `take` and `drop`
raise `ValueError` for a negative count. `enumerate` yields `Pair(index,
item)` values; a `Pair` has the fields `one` and `two` and prints as
`(one, two)`.

`funciter.filters` holds predicates (`is_zero`, `is_even`, `is_odd`,
`greater_than`, `greater_than_equal`, `less_than`, `less_than_equal`,
`all_of`, `any_of`; with no predicates given, `all_of` and `any_of` are
always true). `funciter.ops` holds `add`, `multiply`, `bitwise_and`,
`bitwise_or`, `bitwise_xor`, `unwrap_option`, `unwrap_result` and
`passthrough`.

More sources and combinators:

- `funciter.combining`: `cycle`, `repeat`, `zip_pairs`
- `funciter.hashmap`: `lift_hash_map` (yields `Pair(key, value)`),
  `lift_hash_map_keys`, `lift_hash_map_values`; each can be closed early with
  `close()` or used as a context manager, and closing twice is safe
- `funciter.channel`: `Channel(capacity=0)` with `send`, `receive` and
  `close`; `from_channel` reads one until it is closed, and `to_channel`
  feeds an iterator into a new channel from a background thread
- `funciter.runes`: `runes` yields the characters of a string or a sequence
  of characters
- `funciter.lines`: `lines` and `lines_string` read a stream line by line
  with line endings trimmed and give each line as a `Result` (bytes or text);
  a read error appears as an `Err` whose message starts with `read line:`
- `funciter.results`: `collect_results` gathers `Ok` values into `ok(list)`
  and stops at the first `Err`, returning it

```python
import io
from funciter.lines import lines_string

lines_string(io.StringIO("hello\nthere")).collect_results().unwrap()
# ['hello', 'there']
```

## Generator-based sequences

`funciter.seq` wraps ordinary Python iterables in `Seq`. A `Seq` can be used
in a `for` loop directly, starts afresh from its source each time it is
iterated, and has the chaining methods `collect`, `chain`, `cycle`, `drop`,
`filter`, `exclude`, `take` and `transform`:

```python
from funciter.seq import count, lift, repeat, zip_pairs, identity
from funciter.seq_filters import is_even

for n in count().filter(is_even).take(3):
    print(n)                                        # 0, 2, 4

lift([1, 2]).cycle().take(5).collect()              # [1, 2, 1, 2, 1]
lift([1, 2]).drop(-2).collect()                     # [1, 2]
lift([1, 2, 3]).transform(identity).collect()       # [1, 2, 3]
zip_pairs(count().take(2), repeat("Hi")).collect()  # [Pair(0, 'Hi'), Pair(1, 'Hi')]
```

The module also has `chain`, `exhausted`, `select`, `exclude`, `mapped`,
`runes`, `lift_hash_map` and `lift_channel`. Unlike the step-by-step
iterators, `take` and `drop` here treat a negative count as zero.
`funciter.seq_filters` has the same comparison and parity predicates as
`funciter.filters`, without `all_of` and `any_of`.

## Running the tests

```
pip install -e ".[test]"
pytest
```