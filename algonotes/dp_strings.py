"""Dynamic programming over strings and sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest subsequence shared by both strings."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2):
            if a == b:
                current.append(previous[j] + 1)
            else:
                current.append(max(current[j], previous[j + 1]))
        previous = current
    return previous[-1]


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def num_distinct(s: str, t: str) -> int:
    """Return how many distinct subsequences of ``s`` spell ``t``."""
    ways = [1] + [0] * len(t)
    for ch in s:
        for j in reversed(range(len(t))):
            if t[j] == ch:
                ways[j + 1] += ways[j]
    return ways[-1]


def min_distance(word1: str, word2: str) -> int:
    """Return the fewest single-character inserts, deletes or replaces turning one word into the other."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def is_interleave(s1: str, s2: str, s3: str) -> bool:
    """Return True if ``s3`` is formed by interleaving all of ``s1`` and ``s2``."""
    if len(s1) + len(s2) != len(s3):
        return False
    reachable = [True]
    for j, ch in enumerate(s2):
        reachable.append(reachable[j] and ch == s3[j])
    for i, a in enumerate(s1, start=1):
        reachable[0] = reachable[0] and a == s3[i - 1]
        for j, b in enumerate(s2, start=1):
            target = s3[i + j - 1]
            reachable[j] = (reachable[j] and a == target) or (
                reachable[j - 1] and b == target
            )
    return reachable[-1]


def _palindromes_by_center(s: str) -> Iterable[tuple[int, int]]:
    """Yield (start, end) of every palindromic substring, grouped by centre."""
    n = len(s)
    for center in range(2 * n - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < n and s[lo] == s[hi]:
            yield lo, hi
            lo -= 1
            hi += 1


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring, the leftmost one on ties."""
    best_start, best_len = 0, 0
    for start, end in _palindromes_by_center(s):
        length = end - start + 1
        if length > best_len or (length == best_len and start < best_start):
            best_start, best_len = start, length
    return s[best_start : best_start + best_len]


def count_palindromic_substrings(s: str) -> int:
    """Return how many substrings, counted by position, read the same both ways."""
    return sum(1 for _ in _palindromes_by_center(s))


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Return True if ``s`` splits into a sequence of dictionary words."""
    words = {word for word in word_dict if word}
    reachable = [False] * (len(s) + 1)
    reachable[0] = True
    for i in range(len(s)):
        if not reachable[i]:
            continue
        for word in words:
            if s.startswith(word, i):
                reachable[i + len(word)] = True
    return reachable[-1]


def num_decodings(s: str) -> int:
    """Return how many ways a digit string decodes with 'A'=1 ... 'Z'=26."""
    following, after_next = 1, 0
    for i in reversed(range(len(s))):
        if s[i] == "0":
            ways = 0
        else:
            ways = following
            if i + 1 < len(s) and (s[i] == "1" or (s[i] == "2" and s[i + 1] <= "6")):
                ways += after_next
        following, after_next = ways, following
    return following