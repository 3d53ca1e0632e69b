"""Disk Fragmenter: compacting a disk map and computing its checksum."""

from __future__ import annotations

import heapq
from itertools import takewhile

FREE = -1


def _expand(text: str) -> list[int]:
    """Turn a dense disk map into one entry per block, FREE for empty blocks."""
    blocks: list[int] = []
    for index, ch in enumerate(text):
        if not (ch.isascii() and ch.isdigit()):
            raise ValueError("Invalid number!")
        owner = index // 2 if index % 2 == 0 else FREE
        blocks.extend([owner] * int(ch))
    return blocks


def _compact(blocks: list[int]) -> None:
    """Move blocks one at a time from the end into the earliest free block."""
    zero_gap = bool(blocks) and blocks[0] == FREE
    gaps = [index for index, block in enumerate(blocks) if block == FREE and index >= 1]
    for i in reversed(range(len(blocks))):
        if i == 0 or (not zero_gap and (not gaps or gaps[0] >= i)):
            break
        if blocks[i] != FREE and gaps:
            j = heapq.heappop(gaps)
            blocks[j], blocks[i] = blocks[i], FREE
            heapq.heappush(gaps, i)


def find_empty_space(blocks: list[int], amount: int, before: int) -> int | None:
    """Return the start of the first run of ``amount`` free blocks ending before ``before``."""
    if before < amount:
        return None
    if amount == 0:
        return 0
    run = 0
    for index in range(before):
        run = run + 1 if blocks[index] == FREE else 0
        if run == amount:
            return index - amount + 1
    return None


def whole_file_compact(blocks: list[int]) -> None:
    """Move whole files, last first, into the leftmost free span that fits them."""
    i = len(blocks) - 1
    while i > 0:
        if blocks[i] == FREE:
            i -= 1
            continue
        current_id = blocks[i]
        size = 0
        while blocks[i] == current_id:
            if i == 0:
                return
            i -= 1
            size += 1
        opening = find_empty_space(blocks, size, i + 1)
        if opening is not None:
            for offset in range(size):
                blocks[opening + offset] = current_id
                blocks[i + offset + 1] = FREE


def run_a(text: str) -> int:
    blocks = _expand(text)
    _compact(blocks)
    used = takewhile(lambda block: block != FREE, blocks)
    return sum(position * block for position, block in enumerate(used))


def run_b(text: str) -> int:
    blocks = _expand(text)
    whole_file_compact(blocks)
    return sum(
        position * block for position, block in enumerate(blocks) if block != FREE
    )