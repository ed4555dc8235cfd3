"""Non-echo guard: detect generated fields that copy the source document verbatim.

A field "echoes" the source when the word-level longest common subsequence of
the two texts covers more than ``threshold`` percent of the shorter one.
"""

from collections.abc import Mapping
from typing import Any

DEFAULT_ECHO_THRESHOLD = 30.0

# Fields expected to hold verbatim text
EXEMPT_KEY_MARKERS = ("quote", "citation", "excerpt", "anchor")


def _words(text: str) -> list[str]:
    return text.lower().split()


def _lcs_length(a: list[str], b: list[str]) -> int:
    previous = [0] * (len(b) + 1)
    for word_a in a:
        current = [0]
        for j, word_b in enumerate(b, start=1):
            if word_a == word_b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def calculate_text_overlap(text1: str, text2: str) -> float:
    """Percentage (0-100) of the shorter text's words shared in order with the other."""
    if not text1 or not text2:
        return 0.0

    words1 = _words(text1)
    words2 = _words(text2)
    if not words1 or not words2:
        return 0.0
    if words1 == words2:
        return 100.0

    return _lcs_length(words1, words2) / min(len(words1), len(words2)) * 100


def has_excessive_echo(value: str, source: str, threshold: float = DEFAULT_ECHO_THRESHOLD) -> bool:
    if not value or not source:
        return False
    return calculate_text_overlap(value, source) > threshold


def _is_exempt(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in EXEMPT_KEY_MARKERS)


def find_echo_violations(
    data: Mapping[str, Any],
    source: str,
    threshold: float = DEFAULT_ECHO_THRESHOLD,
    path: str = "",
) -> list[str]:
    """Return the paths of string fields in ``data`` that echo ``source``.

    Paths use dotted keys and ``[i]`` list indexes, e.g. ``risks[2].summary``.
    """
    violations: list[str] = []

    for key, value in data.items():
        key = str(key)
        current_path = f"{path}.{key}" if path else key

        if isinstance(value, str):
            if value and not _is_exempt(key) and has_excessive_echo(value, source, threshold):
                violations.append(current_path)
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                item_path = f"{current_path}[{index}]"
                if isinstance(item, Mapping):
                    violations.extend(find_echo_violations(item, source, threshold, item_path))
                elif isinstance(item, str) and item and not _is_exempt(key):
                    if has_excessive_echo(item, source, threshold):
                        violations.append(item_path)
        elif isinstance(value, Mapping):
            violations.extend(find_echo_violations(value, source, threshold, current_path))

    return violations
