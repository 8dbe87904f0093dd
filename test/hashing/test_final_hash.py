from __future__ import annotations

import hashlib

from Yeth.hashing import compute_final_hash, hash_bytes

OWN = hashlib.sha256(b"own").hexdigest()
D1 = hashlib.sha256(b"d1").hexdigest()
D2 = hashlib.sha256(b"d2").hexdigest()


def test_final_hash_is_digest_of_concatenated_hex_strings():
    expected = hashlib.sha256((OWN + D1 + D2).encode("ascii")).hexdigest()
    assert compute_final_hash(OWN, [D1, D2]) == expected


def test_final_hash_is_order_sensitive():
    assert compute_final_hash(OWN, [D1, D2]) != compute_final_hash(OWN, [D2, D1])


def test_final_hash_without_dependencies_still_rehashes_own_hash():
    assert compute_final_hash(OWN, []) == hash_bytes(OWN.encode("ascii"))
    assert compute_final_hash(OWN, []) != OWN
