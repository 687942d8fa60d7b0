"""Edit distance between identifiers."""


def levenshtein(a: str, b: str) -> int:
    """Levenshtein distance with unit-cost insert, delete and substitute.

    Works on code points, so multi-byte characters count as one edit.
    Keeps two rows of the table, sized by the shorter string.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Minimum number of single-character edits turning ``a`` into ``b``.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            cur.append(min(cur[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = cur
    return prev[-1]
