"""
Parallel dispatcher
===================
Splits sanitized text into one chunk per worker, runs the chunks
through a shared cipher on a thread pool and joins the results in
submission order. The joined output is identical to a single
apply_cipher() call over the whole text.

Chunking per cipher:
  caesar    any offsets; lengths differ by at most one, longer first
  vigenere  chunk starts on multiples of the key length so every chunk
            begins at key index 0; the last chunk takes the remainder
  playfair  never split; one synchronous call on the whole text
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import List, Optional

from .ciphers.base import Cipher, CipherMode, CipherType
from .config import get_config
from .exceptions import DispatchError

logger = logging.getLogger(__name__)


def even_chunks(text: str, count: int, unit: int = 1) -> List[str]:
    """
    Cut `text` into exactly `count` contiguous chunks whose start
    offsets are multiples of `unit`. Whole units are spread as evenly
    as possible, one extra unit to each of the earliest chunks, and the
    final chunk also takes any tail shorter than a unit. Chunks may be
    empty when the text is short.
    """
    if count < 1:
        raise ValueError(f"Chunk count must be at least 1, got {count}.")
    if unit < 1:
        raise ValueError(f"Chunk unit must be at least 1, got {unit}.")
    base, extra = divmod(len(text) // unit, count)
    chunks = []
    start = 0
    for i in range(count):
        units = base + (1 if i < extra else 0)
        end = len(text) if i == count - 1 else start + units * unit
        chunks.append(text[start:end])
        start = end
    return chunks


class ParallelDispatcher:
    """Fixed-size worker pool applying one cipher to chunked text."""

    def __init__(self, workers: Optional[int] = None):
        if workers is None:
            workers = get_config().WORKERS
        if workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {workers}.")
        self._workers = workers

    @property
    def workers(self) -> int:
        return self._workers

    def split(self, cipher: Cipher, text: str) -> List[str]:
        """Chunks `text` would be cut into for `cipher`."""
        if cipher.cipher_type is CipherType.PLAYFAIR:
            return [text]
        if cipher.cipher_type is CipherType.VIGENERE:
            return even_chunks(text, self._workers, unit=cipher.period)
        return even_chunks(text, self._workers)

    def run(self, cipher: Cipher, text: str, mode: CipherMode) -> str:
        """
        Apply `cipher` to `text` in `mode`.

        Blocks until every chunk is done. If any chunk raises, chunks
        still queued are cancelled and DispatchError is raised from the
        first failure; no partial output is returned.
        """
        if cipher.cipher_type is CipherType.PLAYFAIR:
            logger.debug(f"{cipher!r}: whole text ({len(text)} chars), single call")
            return cipher.apply_cipher(text, mode)

        chunks = self.split(cipher, text)
        logger.info(
            f"{cipher!r} {mode.value}: {len(text)} chars over "
            f"{len(chunks)} chunks, {self._workers} workers"
        )
        logger.debug(f"Chunk lengths: {[len(c) for c in chunks]}")

        with ThreadPoolExecutor(max_workers=self._workers) as pool:
            futures = [pool.submit(cipher.apply_cipher, chunk, mode) for chunk in chunks]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()
            for index, future in enumerate(futures):
                if future in done and future.exception() is not None:
                    raise DispatchError(
                        f"Chunk {index} of {len(futures)} failed: {future.exception()}"
                    ) from future.exception()
        return "".join(future.result() for future in futures)
