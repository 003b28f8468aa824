"""Parser module for SaveGame.dat files"""

from .classifier import is_chunk_marker
from .decompressor import decompress
from .scanner import ChunkRecord, ChunkScanner, scan
from .emitter import ChunkEmitter, chunk_file_name, emit
from .decoders import register_decoder, decode_chunk
from .manifest import build_manifest, write_manifest, summarize_by_name

__all__ = [
    'is_chunk_marker',
    'decompress',
    'ChunkRecord',
    'ChunkScanner',
    'scan',
    'ChunkEmitter',
    'chunk_file_name',
    'emit',
    'register_decoder',
    'decode_chunk',
    'build_manifest',
    'write_manifest',
    'summarize_by_name',
]
