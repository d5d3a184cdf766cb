"""A short demonstration of building and querying a database of users."""

from __future__ import annotations

from dataclasses import dataclass

from bidb.db import DB

INDEX_MALE = 1
INDEX_FEMALE = 2
INDEX_ADULT = 3


@dataclass(frozen=True)
class User:
    id: int
    name: str

    def __str__(self) -> str:
        return f"{{{self.id} {self.name}}}"


def _build_db() -> DB[User]:
    db: DB[User] = DB()
    db.add_batch([User(1, "Andrew"), User(1, "John")], INDEX_MALE)
    (
        db.add(User(27, "Bot"))
        .add(User(2, "Mark"), INDEX_MALE, INDEX_ADULT)
        .add(User(10, "Felix"), INDEX_MALE, INDEX_ADULT)
        .add(User(5, "Mary"), INDEX_FEMALE)
        .add(User(11, "Kate"), INDEX_FEMALE, INDEX_ADULT)
        .add(User(10324, "Janny"), INDEX_FEMALE)
    )
    return db


def _format(users: list[User]) -> str:
    return "[" + " ".join(str(user) for user in users) + "]"


def main(argv: list[str] | None = None) -> int:
    """Print the adult men and the women who are not adults."""
    db = _build_db()

    with db.index(INDEX_MALE).and_(INDEX_ADULT) as male_adult:
        print(f"Male adult:       {_format(male_adult.get())}")

    with db.index(INDEX_FEMALE).and_not(INDEX_ADULT) as female_not_adult:
        print(f"Female not adult: {_format(female_not_adult.get())}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())