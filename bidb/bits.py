"""Helpers for bitmaps stored as lists of 64-bit words."""

WORD_BITS = 64


def set_pos(words: list[int], pos: int) -> list[int]:
    """Set bit ``pos`` in ``words``, growing the list as needed, and return it."""
    if pos < 0:
        raise ValueError(f"bit position must be non-negative, got {pos}")
    group, shift = divmod(pos, WORD_BITS)
    if group >= len(words):
        words.extend([0] * (group - len(words) + 1))
    words[group] |= 1 << shift
    return words


def unpack(word: int) -> list[int]:
    """Return the positions of the set bits of ``word`` in ascending order."""
    positions = []
    while word > 0:
        lowest = word & -word
        positions.append(lowest.bit_length() - 1)
        word ^= lowest
    return positions