"""Letter frequency analysis for substitution ciphers."""

from __future__ import annotations

from collections import Counter


def letter_frequencies(text: str) -> list[tuple[str, int]]:
    """Count the uppercase ASCII letters of ``text``.

    Letters are ranked by count, most frequent first; ties keep
    alphabetical order.
    """
    counts = Counter(ch for ch in text if "A" <= ch <= "Z")
    return sorted(sorted(counts.items()), key=lambda item: -item[1])


def freq_analysis(text: str, table: str) -> dict[str, str]:
    """Map each letter of ``text`` to ``table[rank]``, keyed alphabetically.

    ``table`` lists replacements from the most to the least frequent letter.
    """
    ranked = letter_frequencies(text)
    if len(table) < len(ranked):
        raise ValueError(
            f"table has {len(table)} entries but text holds {len(ranked)} distinct letters"
        )
    mapping = {letter: replacement for (letter, _), replacement in zip(ranked, table)}
    return dict(sorted(mapping.items()))


def print_freq_analysis(text: str, table: str) -> None:
    """Print one ``LETTER REPLACEMENT`` line per letter, alphabetically."""
    for letter, replacement in freq_analysis(text, table).items():
        print(f"{letter} {replacement}")