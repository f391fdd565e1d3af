"""
classical_cipher — Live Demo: All Three Ciphers
===============================================
Run:  python examples/demo_all_ciphers.py

Encrypts and decrypts one message with every cipher, single pass and
through the parallel dispatcher, with timing printed for each.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_cipher            import cipher_factory, sanitize_text, ParallelDispatcher
from classical_cipher.ciphers.base import CipherMode

LINE = "═" * 70
MSG  = "Harvest now, decrypt later: the Playfair cipher was cracked in WWI."

def header(name, key):
    print(f"\n{LINE}")
    print(f"  {name}  (key = {key!r})")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
text = sanitize_text(MSG)
dispatcher = ParallelDispatcher(workers=4)

print(f"\n{LINE}")
print("  classical_cipher — Caesar / Playfair / Vigenère Demo")
print(LINE)
print(f"  Message:   {MSG}")
print(f"  Sanitized: {text}")

for name, key in [("caesar", "10"), ("playfair", "hello"), ("vigenere", "hello")]:
    header(name.upper(), key)
    cipher = cipher_factory(name, key)
    t0 = time.perf_counter()
    ct = dispatcher.run(cipher, text, CipherMode.ENCRYPT)
    pt = dispatcher.run(cipher, ct, CipherMode.DECRYPT)
    elapsed = time.perf_counter() - t0
    ok("Chunks",     [len(c) for c in dispatcher.split(cipher, text)])
    ok("Encrypted",  ct)
    ok("Decrypted",  pt)
    ok("Matches single pass", cipher.encrypt(text) == ct)
    ok("Round-trip", f"{elapsed*1000:.2f} ms")

print(f"\n{LINE}\n")
