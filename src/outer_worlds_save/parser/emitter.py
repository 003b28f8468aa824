"""
Écriture des chunks découverts sur disque (un fichier .bin par chunk)
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import ChunkRangeError, ChunkWriteError
from .scanner import ChunkRecord

logger = logging.getLogger(__name__)


def chunk_file_name(record: ChunkRecord) -> str:
    """Nom déterministe : {offset}-{name}_0x{OFFSET}.bin"""
    return f"{record.offset}-{record.name}_0x{record.offset:X}.bin"


def slice_chunk(data: bytes, record: ChunkRecord) -> bytes:
    """Extrait les octets du chunk, lève ChunkRangeError si hors buffer"""
    if record.offset < 0 or record.offset > len(data):
        raise ChunkRangeError(f"Offset {record.offset} hors du buffer ({len(data)} bytes)")

    if record.length < 0 or record.end > len(data):
        raise ChunkRangeError(
            f"Chunk {record.name} @ {record.offset}: longueur {record.length} "
            f"dépasse le buffer ({len(data)} bytes)"
        )

    return data[record.offset:record.end]


def emit(output_root: Path, data: bytes, record: ChunkRecord) -> Path:
    """
    Écrit un chunk et loggue une ligne de diagnostic

    Args:
        output_root: Dossier de sortie (doit exister)
        data: Buffer décompressé complet
        record: Chunk à écrire

    Returns:
        Chemin du fichier écrit
    """
    chunk_data = slice_chunk(data, record)
    chunk_path = Path(output_root) / chunk_file_name(record)

    try:
        chunk_path.write_bytes(chunk_data)
    except OSError as e:
        raise ChunkWriteError(record, chunk_path, e) from e

    logger.debug(
        f"Chunk écrit: {record.name}\tOffset: {record.offset}\t0x{record.offset:X}"
        f"\tlength: {record.length}\t0x{record.length:X}"
    )
    return chunk_path


class ChunkEmitter:
    """Écrit les chunks d'un même buffer dans un dossier de travail"""

    def __init__(self, output_root: Path, data: bytes, skip_failed_writes: bool = False):
        self.output_root = Path(output_root)
        self.data = data
        self.skip_failed_writes = skip_failed_writes

        self.written: List[Tuple[ChunkRecord, Path]] = []
        self.failures: List[ChunkWriteError] = []

    def emit(self, record: ChunkRecord) -> Optional[Path]:
        """
        Écrit un chunk. En mode skip_failed_writes, une erreur d'écriture
        est loggée et gardée pour le rapport final au lieu d'être propagée.
        """
        try:
            path = emit(self.output_root, self.data, record)
        except ChunkWriteError as e:
            if not self.skip_failed_writes:
                raise
            logger.error(str(e))
            self.failures.append(e)
            return None

        self.written.append((record, path))
        return path
