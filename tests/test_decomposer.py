from __future__ import annotations

import pytest

from decomposer.core.decomposer import (
    DIGEST_VARIANTS,
    AlgorithmDecomposer,
    decompose,
)


# ─────────────────────────────────────────────────────────────────────────────
# Documented decompositions
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "name,expected",
    [
        ("SHA1withRSA", {"SHA1", "SHA-1", "RSA"}),
        ("SHA256withECDSA", {"SHA256", "SHA-256", "ECDSA"}),
        ("PBEWithSHA1AndDESede", {"PBE", "SHA1", "SHA-1", "DESede"}),
        ("AES/CBC/PKCS5Padding", {"AES", "CBC", "PKCS5Padding"}),
        ("OAEPWithSHA-256AndMGF1Padding", {"OAEP", "SHA-256", "SHA256", "MGF1Padding"}),
        ("SHA256withRSAandMGF1", {"SHA256", "SHA-256", "RSA", "MGF1"}),
        ("MD5withRSA", {"MD5", "RSA"}),
        ("RSA", {"RSA"}),
    ],
)
def test_decompose_standard_names(name, expected):
    assert decompose(name) == expected


def test_padding_segment_is_split_on_connectives():
    out = decompose("RSA/ECB/OAEPWithSHA-1AndMGF1Padding")
    assert out == {"RSA", "ECB", "OAEP", "SHA-1", "SHA1", "MGF1Padding"}


def test_connectives_are_case_insensitive():
    assert decompose("sha384WITHecdsa") == {"sha384", "ecdsa"}
    assert decompose("SHA384WiThECDSA") == {"SHA384", "SHA-384", "ECDSA"}
    assert decompose("PBEWITHSHA1ANDRC2_40") == {"PBE", "SHA1", "SHA-1", "RC2_40"}


def test_connectives_split_inside_words():
    # substring matching, not whole-word matching
    assert decompose("Sandwich") == {"S", "wich"}
    assert decompose("withand") == set()


# ─────────────────────────────────────────────────────────────────────────────
# Empty and malformed input
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("name", [None, ""])
def test_absent_or_empty_name_yields_empty_set(name):
    assert decompose(name) == set()


@pytest.mark.parametrize(
    "name,expected",
    [
        ("/AES/", {"AES"}),
        ("AES//CBC", {"AES", "CBC"}),
        ("//AES///CBC//", {"AES", "CBC"}),
        ("/", set()),
        ("///", set()),
        ("with", set()),
        ("AND/with/", set()),
        ("SHA1with", {"SHA1", "SHA-1"}),
    ],
)
def test_empty_segments_and_pieces_are_discarded(name, expected):
    out = decompose(name)
    assert out == expected
    assert "" not in out


@pytest.mark.parametrize(
    "name",
    ["   ", "with with", "/ /", "\t", "!!//??", "ünïcödéWithß"],
)
def test_never_raises_and_never_returns_empty_token(name):
    out = decompose(name)
    assert isinstance(out, set)
    assert "" not in out


# ─────────────────────────────────────────────────────────────────────────────
# Digest hyphenation
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("plain,hyphenated", DIGEST_VARIANTS)
def test_plain_digest_gains_hyphenated_form(plain, hyphenated):
    assert decompose(f"{plain}withRSA") == {plain, hyphenated, "RSA"}


@pytest.mark.parametrize("plain,hyphenated", DIGEST_VARIANTS)
def test_hyphenated_digest_gains_plain_form(plain, hyphenated):
    assert decompose(hyphenated) == {plain, hyphenated}


def test_each_digest_pair_is_handled_independently():
    out = decompose("SHA256/SHA384")
    assert out == {"SHA256", "SHA-256", "SHA384", "SHA-384"}


def test_both_spellings_present_adds_nothing():
    assert decompose("SHA-512/SHA512") == {"SHA-512", "SHA512"}


def test_digest_table_covers_sha1_and_sha2():
    assert [plain for plain, _ in DIGEST_VARIANTS] == [
        "SHA1", "SHA224", "SHA256", "SHA384", "SHA512",
    ]


def test_digest_matching_is_case_sensitive():
    assert decompose("sha256withRSA") == {"sha256", "RSA"}


# ─────────────────────────────────────────────────────────────────────────────
# Purity and closure
# ─────────────────────────────────────────────────────────────────────────────

def test_repeated_calls_are_equal_and_independent():
    first = decompose("SHA1withDSA")
    first.add("mutated")
    second = decompose("SHA1withDSA")
    assert second == {"SHA1", "SHA-1", "DSA"}


@pytest.mark.parametrize(
    "name",
    [
        "SHA1withRSA",
        "PBEWithSHA1AndDESede",
        "OAEPWithSHA-256AndMGF1Padding",
        "RSA/ECB/OAEPWithSHA-512AndMGF1Padding",
        "SHA224withDSA",
    ],
)
def test_decomposing_a_token_stays_within_its_parent_set(name):
    tokens = decompose(name)
    for token in tokens:
        assert token in decompose(token)
        assert decompose(token) <= tokens


# ─────────────────────────────────────────────────────────────────────────────
# Extension points
# ─────────────────────────────────────────────────────────────────────────────

def test_extra_digest_pairs_apply_in_both_directions():
    decomposer = AlgorithmDecomposer(extra_digest_pairs=[("SHA3256", "SHA3-256")])
    assert decomposer.decompose("SHA3256withECDSA") == {"SHA3256", "SHA3-256", "ECDSA"}
    assert decomposer.decompose("SHA3-256") == {"SHA3256", "SHA3-256"}
    # standard pairs still apply
    assert decomposer.decompose("SHA1") == {"SHA1", "SHA-1"}


def test_malformed_extra_pairs_are_ignored():
    decomposer = AlgorithmDecomposer(extra_digest_pairs=[("", "X-1"), ("SHA1", "SHA-1")])
    assert decomposer.digest_pairs == DIGEST_VARIANTS


def test_digest_aliases_does_not_mutate_input():
    decomposer = AlgorithmDecomposer()
    elements = {"SHA1", "RSA"}
    assert decomposer.digest_aliases(elements) == {"SHA-1"}
    assert elements == {"SHA1", "RSA"}


def test_segments_preserve_order_and_drop_empties():
    decomposer = AlgorithmDecomposer()
    assert decomposer.segments("/AES//GCM/NoPadding") == ["AES", "GCM", "NoPadding"]
    assert decomposer.segments(None) == []


def test_subclass_can_add_naming_rules():
    class HmacAwareDecomposer(AlgorithmDecomposer):
        def split_components(self, segment):
            pieces = []
            for piece in super().split_components(segment):
                if piece.startswith("Hmac") and len(piece) > 4:
                    pieces.extend(["Hmac", piece[4:]])
                else:
                    pieces.append(piece)
            return pieces

    decomposer = HmacAwareDecomposer()
    assert decomposer.decompose("PBKDF2WithHmacSHA256") == {
        "PBKDF2", "Hmac", "SHA256", "SHA-256",
    }
    assert decomposer.decompose(None) == set()
