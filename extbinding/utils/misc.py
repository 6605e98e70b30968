#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from collections.abc import Iterable


def edit_distance(a: str, b: str) -> int:
    """
    Computes the Levenshtein distance between two strings, the minimum number
    of single-character insertions, deletions or substitutions that turn
    *a* into *b*.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current

    return previous[-1]


def find_nearest(key: str, candidates: Iterable[str]) -> str:
    """
    Returns the candidate with the smallest edit distance from *key*. Ties are
    resolved in favor of the lexicographically smallest candidate. Returns an
    empty string if there are no candidates.
    """
    nearest = ''
    min_distance = -1
    for item in sorted(candidates):
        distance = edit_distance(key, item)
        if min_distance < 0 or distance < min_distance:
            nearest, min_distance = item, distance
    return nearest
