"""Exact string matching with a finite automaton and with Knuth-Morris-Pratt."""

from __future__ import annotations

from string import ascii_lowercase

ALPHABET = ascii_lowercase


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def _next_state(pattern: str, state: int, char: str) -> int:
    if state < len(pattern) and pattern[state] == char:
        return state + 1
    for length in range(state, 0, -1):
        if pattern[length - 1] == char and pattern[: length - 1] == pattern[state - length + 1 : state]:
            return length
    return 0


def transition_table(pattern: str) -> list[dict[str, int]]:
    """Build the matching automaton's transitions over lowercase letters.

    Entry ``state`` maps each letter to the next state.
    """
    _require_pattern(pattern)
    return [
        {char: _next_state(pattern, state, char) for char in ALPHABET}
        for state in range(len(pattern) + 1)
    ]


def automaton_search(text: str, pattern: str) -> list[int]:
    """Return the start of every (possibly overlapping) match of pattern.

    Characters outside the lowercase alphabet reset the automaton.
    """
    table = transition_table(pattern)
    length = len(pattern)
    matches = []
    state = 0
    for position, char in enumerate(text):
        state = table[state].get(char, 0)
        if state == length:
            matches.append(position - length + 1)
    return matches


def lps_table(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for each prefix of pattern."""
    _require_pattern(pattern)
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start of every (possibly overlapping) match using KMP."""
    lps = lps_table(pattern)
    text_length = len(text)
    pattern_length = len(pattern)
    matches = []
    t = p = 0
    while t < text_length:
        if text[t] == pattern[p]:
            t += 1
            p += 1
        if p == pattern_length:
            matches.append(t - p)
            p = lps[p - 1]
        elif t < text_length and text[t] != pattern[p]:
            if p:
                p = lps[p - 1]
            else:
                t += 1
    return matches