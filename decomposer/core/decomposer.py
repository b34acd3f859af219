"""
Algorithm Name Decomposer
==========================

Decomposes standard cryptographic algorithm names into their
sub-algorithm elements so that each element can be checked against
algorithm constraints independently. For example, ``"SHA1withRSA"``
decomposes into ``"SHA1"`` and ``"RSA"`` so that a policy can disable
SHA-1 without knowing anything about signature-name grammar.

Supported naming conventions:
    - Transformations: ``algorithm/mode/padding`` (``AES/CBC/PKCS5Padding``)
    - ``PBEWith<digest>And<encryption>`` / ``PBEWith<prf>And<encryption>``
    - ``OAEPWith<digest>And<mgf>Padding``
    - ``<digest>with<encryption>`` / ``<digest>with<encryption>and<mgf>``

References:
    - Java Security Standard Algorithm Names Specification.
    - NIST FIPS 180-4 (2015). Secure Hash Standard (SHS).
"""

from __future__ import annotations

import re
from typing import Iterable, Optional


# ===================================================================== #
#  Splitting Patterns
# ===================================================================== #

_TRANSFORMATION_SEPARATOR = re.compile("/")

# Connective words are matched as substrings, not whole words
_CONNECTIVE_PATTERN = re.compile("with|and", re.IGNORECASE)

# Signature names spell digests without a hyphen ("SHA256withRSA"),
# MessageDigest names with one ("SHA-256"). Both must be constrained.
DIGEST_VARIANTS: tuple[tuple[str, str], ...] = (
    ("SHA1", "SHA-1"),
    ("SHA224", "SHA-224"),
    ("SHA256", "SHA-256"),
    ("SHA384", "SHA-384"),
    ("SHA512", "SHA-512"),
)


class AlgorithmDecomposer:
    """Decomposes standard algorithm names into sub-elements.

    The decomposer holds no mutable state, so one instance may be shared
    freely between threads.

    Subclasses can support further naming patterns by overriding
    :meth:`split_transformation` or :meth:`split_components`.

    Usage::

        decomposer = AlgorithmDecomposer()
        decomposer.decompose("SHA256withECDSA")
        # {"SHA256", "SHA-256", "ECDSA"}
    """

    def __init__(
        self,
        extra_digest_pairs: Optional[Iterable[tuple[str, str]]] = None,
    ) -> None:
        """Initialise the decomposer.

        Args:
            extra_digest_pairs: Additional ``(plain, hyphenated)`` digest
                spellings treated as equivalent, applied after the
                standard SHA pairs. Pairs with an empty member are ignored.
        """
        pairs = list(DIGEST_VARIANTS)
        for pair in extra_digest_pairs or ():
            plain, hyphenated = pair
            if plain and hyphenated and (plain, hyphenated) not in pairs:
                pairs.append((plain, hyphenated))
        self._digest_pairs: tuple[tuple[str, str], ...] = tuple(pairs)

    @property
    def digest_pairs(self) -> tuple[tuple[str, str], ...]:
        """Equivalent digest spellings applied by this decomposer."""
        return self._digest_pairs

    # ------------------------------------------------------------------ #
    #  Public API
    # ------------------------------------------------------------------ #

    def decompose(self, algorithm: Optional[str]) -> set[str]:
        """Decompose an algorithm name into its sub-elements.

        Never raises: empty, absent, or malformed names yield whatever
        tokens the splitting rules produce, possibly none.

        Args:
            algorithm: Standard algorithm name or cipher transformation.

        Returns:
            A new set of non-empty element names, including the
            hyphenation variants of any SHA digest names found.
        """
        if not algorithm:
            return set()

        elements: set[str] = set()
        for segment in self.split_transformation(algorithm):
            for token in self.split_components(segment):
                if token:
                    elements.add(token)

        elements.update(self.digest_aliases(elements))
        return elements

    def segments(self, algorithm: Optional[str]) -> list[str]:
        """Return the non-empty ``/`` segments of *algorithm* in order."""
        if not algorithm:
            return []
        return list(self.split_transformation(algorithm))

    def digest_aliases(self, elements: Iterable[str]) -> set[str]:
        """Return the digest spellings missing from *elements*.

        Each pair is checked independently; *elements* is not modified.
        """
        present = set(elements)
        aliases: set[str] = set()
        for plain, hyphenated in self._digest_pairs:
            if plain in present and hyphenated not in present:
                aliases.add(hyphenated)
            if hyphenated in present and plain not in present:
                aliases.add(plain)
        return aliases

    # ------------------------------------------------------------------ #
    #  Overridable splitting rules
    # ------------------------------------------------------------------ #

    def split_transformation(self, algorithm: str) -> list[str]:
        """Split ``algorithm/mode/padding`` into its non-empty segments."""
        return [
            segment
            for segment in _TRANSFORMATION_SEPARATOR.split(algorithm)
            if segment
        ]

    def split_components(self, segment: str) -> list[str]:
        """Split one segment on the ``with`` / ``and`` connectives."""
        return [
            token
            for token in _CONNECTIVE_PATTERN.split(segment)
            if token
        ]


# ========================= Module-level convenience ========================

_DEFAULT_DECOMPOSER = AlgorithmDecomposer()


def decompose(algorithm: Optional[str]) -> set[str]:
    """Decompose *algorithm* with the standard digest table.

    Convenience wrapper around :meth:`AlgorithmDecomposer.decompose`.
    """
    return _DEFAULT_DECOMPOSER.decompose(algorithm)
