# bidb

A small in-memory database that keeps items in insertion order and tags
them with integer bitmap indexes. Queries start from one index and combine
others with AND, OR and AND-NOT. The result keeps insertion order.

Index `0` is special. Every item is added to it, so `db.all()` starts a
query over everything stored.

## Installation

```
pip install .
```

The package needs nothing outside the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from dataclasses import dataclass

from bidb.db import DB

MALE, FEMALE, ADULT = 1, 2, 3


@dataclass
class User:
    id: int
    name: str


db = DB()

# add several items under the same indexes
db.add_batch([User(1, "Andrew"), User(1, "John")], MALE)

# or one at a time; add() returns the database, so calls chain
(
    db.add(User(27, "Bot"))
    .add(User(2, "Mark"), MALE, ADULT)
    .add(User(10, "Felix"), MALE, ADULT)
    .add(User(5, "Mary"), FEMALE)
    .add(User(11, "Kate"), FEMALE, ADULT)
    .add(User(10324, "Janny"), FEMALE)
)

male_adults = db.index(MALE).and_(ADULT).get()          # Mark, Felix
female_minors = db.index(FEMALE).and_not(ADULT).get()   # Mary, Janny
unlabelled = db.all().and_not(MALE).and_not(FEMALE).get()  # Bot
```

### Adding items

- `db.add(item, *indexes)` appends one item and sets its bit in each
  given index, as well as in index `0`. It returns `db`.
- `db.add_batch(items, *indexes)` does the same for every item in an
  iterable. It also returns `db`.
- `len(db)` is the number of items stored.

### Queries

- `db.index(n)` starts a query from index `n`. `db.all()` starts from
  index `0`, which holds every item.
- `result.and_(n)`, `result.or_(n)` and `result.and_not(n)` each add a
  step. Steps are applied from left to right. Each one returns the same
  query object, so calls chain.
- `result.get()` runs the query and returns a list of the matching items.
  If the starting index, or any index named in a step, has never been
  used, the list is empty.
- `db.release_result(result)` drops a query's steps and sets its start
  back to index `0`.
- A query is also a context manager. Leaving the `with` block releases
  it:

  ```python
  with db.index(MALE).and_(ADULT) as query:
      print(query.get())
  ```

- `db.index_values(words)` returns the items whose positions are set in a
  bitmap given as a sequence of 64-bit words.

### Maintenance

- `db.reset()` removes all items and all indexes.
- `db.fill_from(other)` replaces the contents of `db` with a copy of the
  items and indexes of `other`.

Each database guards its operations with a lock, so it can be shared
between threads.

### Bitmap helpers

`bidb.bits` holds the word-level helpers the database is built on:

- `set_pos(words, pos)` sets bit `pos` in a list of 64-bit words. It
  extends the list as needed and returns the list. A negative position
  raises `ValueError`.
- `unpack(word)` returns the positions of the set bits of one word in
  ascending order.

## Example

The installed command builds the database shown above and prints two
queries:

```
$ bidb-example
Male adult:       [{2 Mark} {10 Felix}]
Female not adult: [{5 Mary} {10324 Janny}]
```

## What it does not do

- Data lives only in memory. Nothing is saved to disk or loaded from it.
- Items cannot be removed or updated one at a time. Only `reset()` clears
  the database.
- Indexes are plain integer labels chosen by the caller. There is no
  indexing by field value and no query language beyond the chained steps
  above.