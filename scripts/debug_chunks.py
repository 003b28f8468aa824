#!/usr/bin/env python3
"""Debug chunks au niveau bas"""

import sys
from pathlib import Path

from outer_worlds_save.parser import ChunkScanner, decompress


def debug_chunks_raw(save_path: Path, max_chunks: int = 10):
    """Affiche les premiers chunks avec un aperçu hex"""
    with open(save_path, 'rb') as f:
        data = decompress(f)

    print(f"📦 Décompressé: {len(data)} bytes\n")

    scanner = ChunkScanner(data)
    chunks = scanner.scan_all_chunks()

    if scanner.first_marker_offset is None:
        print("⚠️  Aucun marqueur trouvé")
        return

    print(f"Premier marqueur @ {scanner.first_marker_offset} (0x{scanner.first_marker_offset:X})")
    print(f"Préambule non couvert: {data[:min(32, scanner.first_marker_offset)].hex()}\n")

    for num, chunk in enumerate(chunks[:max_chunks]):
        print(f"Chunk #{num} {chunk.name} @ offset {chunk.offset} (0x{chunk.offset:X})")
        print(f"  Length: {chunk.length} (0x{chunk.length:X})")
        print(f"  Start: {data[chunk.offset:chunk.offset + min(32, chunk.length)].hex()}")
        print()

    print(f"Total: {len(chunks)} chunks, {len(scanner.markers)} marqueurs")


if __name__ == '__main__':
    debug_chunks_raw(Path(sys.argv[1]) if len(sys.argv) > 1 else Path('SaveGame.dat'))
