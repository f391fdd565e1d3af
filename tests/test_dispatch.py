"""
classical_cipher — Parallel Dispatcher Tests
============================================
Run with:  python -m pytest tests/test_dispatch.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import threading
import time

import pytest
from classical_cipher                    import cipher_factory, DispatchError
from classical_cipher.ciphers.base       import CipherMode, CipherType
from classical_cipher.ciphers.caesar     import CaesarCipher
from classical_cipher.dispatch           import ParallelDispatcher, even_chunks

ENC, DEC = CipherMode.ENCRYPT, CipherMode.DECRYPT

LONG_TEXT = "THISISQUITEALONGMESSAGESOTHEKEYWILLNEEDTOREPEATAFEWTIMES" * 7 + "END"

# ── Chunking ─────────────────────────────────────────────────────────────────
def test_even_chunks_remainder_goes_first():
    assert [len(c) for c in even_chunks("ABCDEFGHIJ", 3)] == [4, 3, 3]

def test_even_chunks_short_text():
    assert even_chunks("AB", 4) == ["A", "B", "", ""]
    assert even_chunks("", 3) == ["", "", ""]

def test_even_chunks_rejects_bad_counts():
    with pytest.raises(ValueError):
        even_chunks("ABC", 0)
    with pytest.raises(ValueError):
        even_chunks("ABC", 2, unit=0)

def test_caesar_split_count_and_lengths():
    d = ParallelDispatcher(workers=12)
    chunks = d.split(CaesarCipher("3"), "A" * 100)
    assert len(chunks) == 12
    assert [len(c) for c in chunks] == [9] * 4 + [8] * 8

def test_vigenere_split_is_key_aligned():
    d = ParallelDispatcher(workers=3)
    text = "THISISQUITEALONGMESSAGESOTHEKEYWILLNEEDTOREPEATAFEWTIMES"
    chunks = d.split(cipher_factory("vigenere", "hello"), text)
    assert [len(c) for c in chunks] == [20, 20, 16]
    assert "".join(chunks) == text

def test_vigenere_split_many_workers():
    d = ParallelDispatcher(workers=12)
    chunks = d.split(cipher_factory("vigenere", "hello"), "A" * 56)
    assert len(chunks) == 12
    assert [len(c) for c in chunks] == [5] * 11 + [1]
    offsets = [sum(len(c) for c in chunks[:i]) for i in range(len(chunks))]
    assert all(offset % 5 == 0 for offset in offsets)

def test_vigenere_text_shorter_than_key():
    d = ParallelDispatcher(workers=4)
    assert d.split(cipher_factory("vigenere", "hello"), "ABC") == ["", "", "", "ABC"]

def test_playfair_never_split():
    d = ParallelDispatcher(workers=8)
    assert d.split(cipher_factory("playfair", "hello"), LONG_TEXT) == [LONG_TEXT]

# ── Equivalence with a single pass ───────────────────────────────────────────
@pytest.mark.parametrize("workers", [1, 2, 3, 5, 12, 64, 1000])
@pytest.mark.parametrize("kind,key", [
    (CipherType.CAESAR,   "10"),
    (CipherType.CAESAR,   "99"),
    (CipherType.VIGENERE, "hello"),
    (CipherType.VIGENERE, "A"),
    (CipherType.VIGENERE, "ABCDEFGHIJKLMNOPQRSTUVWXYZQWERTY"),
    (CipherType.PLAYFAIR, "hello"),
])
def test_parallel_matches_single_pass(kind, key, workers):
    cipher = cipher_factory(kind, key)
    d = ParallelDispatcher(workers=workers)
    for mode in (ENC, DEC):
        assert d.run(cipher, LONG_TEXT, mode) == cipher.apply_cipher(LONG_TEXT, mode)

def test_parallel_roundtrip():
    cipher = cipher_factory("vigenere", "hello")
    d = ParallelDispatcher(workers=7)
    assert d.run(cipher, d.run(cipher, LONG_TEXT, ENC), DEC) == LONG_TEXT

def test_known_scenario_through_dispatcher():
    d = ParallelDispatcher(workers=12)
    assert d.run(cipher_factory("caesar", "10"), "HELLOWORLD", ENC) == "ROVVYGYBVN"

def test_empty_text():
    d = ParallelDispatcher(workers=4)
    assert d.run(cipher_factory("caesar", "3"), "", ENC) == ""
    assert d.run(cipher_factory("playfair", "hello"), "", ENC) == ""

# ── Ordering and failures ────────────────────────────────────────────────────
class SlowFirstChunk(CaesarCipher):
    """The chunk holding 'A' finishes last."""

    def apply_cipher(self, text, mode):
        if "A" in text:
            time.sleep(0.2)
        return super().apply_cipher(text, mode)


class FailingChunk(CaesarCipher):
    def apply_cipher(self, text, mode):
        if "Q" in text:
            raise RuntimeError("bad chunk")
        return super().apply_cipher(text, mode)


def test_order_follows_submission_not_completion():
    cipher = SlowFirstChunk("1")
    text = "AAAABBBBCCCCDDDD"
    assert ParallelDispatcher(workers=4).run(cipher, text, ENC) == "BBBBCCCCDDDDEEEE"

def test_chunks_run_on_pool_threads():
    seen = set()

    class Recording(CaesarCipher):
        def apply_cipher(self, text, mode):
            seen.add(threading.current_thread().name)
            return super().apply_cipher(text, mode)

    ParallelDispatcher(workers=4).run(Recording("1"), "ABCDEFGH", ENC)
    assert threading.current_thread().name not in seen

def test_chunk_failure_raises_dispatch_error():
    cipher = FailingChunk("1")
    with pytest.raises(DispatchError, match="bad chunk") as excinfo:
        ParallelDispatcher(workers=4).run(cipher, "AAAABBBBQQQQDDDD", ENC)
    assert isinstance(excinfo.value.__cause__, RuntimeError)

# ── Configuration ────────────────────────────────────────────────────────────
def test_workers_default_from_config(monkeypatch):
    monkeypatch.setenv("CIPHER_WORKERS", "5")
    assert ParallelDispatcher().workers == 5

def test_workers_default_is_twelve(monkeypatch):
    monkeypatch.delenv("CIPHER_WORKERS", raising=False)
    assert ParallelDispatcher().workers == 12

@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_bad_worker_config_rejected(monkeypatch, value):
    monkeypatch.setenv("CIPHER_WORKERS", value)
    with pytest.raises(ValueError, match="CIPHER_WORKERS"):
        ParallelDispatcher()

def test_bad_worker_argument_rejected():
    with pytest.raises(ValueError):
        ParallelDispatcher(workers=0)

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
