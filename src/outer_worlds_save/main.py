"""
Découverte des chunks d'une sauvegarde The Outer Worlds

Tant que le format n'est pas reverse-engineeré, on découpe la sauvegarde
décompressée sur les marqueurs de nom de chunk et on écrit chaque morceau
dans un dossier de travail pour analyse hors-ligne.
"""

import logging
import sys
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .config import Config
from .errors import ChunkRangeError, ChunkWriteError, SaveParserError
from .locator import find_save_file
from .logging_setup import setup_logging
from .parser import ChunkEmitter, ChunkRecord, ChunkScanner, decode_chunk, decompress
from .parser.manifest import build_manifest, write_manifest

logger = logging.getLogger(__name__)

MANIFEST_NAME = 'chunks.csv'

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_WRITE_FAILURES = 2


@dataclass
class DiscoveryResult:
    """Résultat d'une découverte de chunks"""
    save_path: Path
    working_dir: Path
    raw_copy: Path
    buffer_len: int
    chunks: List[ChunkRecord] = field(default_factory=list)
    written: List[Tuple[ChunkRecord, Path]] = field(default_factory=list)
    failures: List[ChunkWriteError] = field(default_factory=list)
    decoded: Dict[int, Any] = field(default_factory=dict)
    manifest_path: Optional[Path] = None


def create_working_dir(output_root: Path) -> Path:
    """Nouveau dossier de travail unique sous output_root"""
    working_dir = Path(output_root) / str(uuid.uuid4())
    working_dir.mkdir(parents=True)
    return working_dir


def discover_chunks(
    save_path: Path,
    output_root: Path,
    skip_failed_writes: bool = False,
    whole_buffer_fallback: bool = False,
    write_manifest_csv: bool = True
) -> DiscoveryResult:
    """
    Décompresse une sauvegarde, la découpe en chunks et écrit chaque chunk

    Args:
        save_path: Fichier de sauvegarde compressé
        output_root: Parent du dossier de travail créé pour ce run
        skip_failed_writes: Continue si l'écriture d'un chunk échoue
        whole_buffer_fallback: Politique quand aucun marqueur n'est trouvé
        write_manifest_csv: Écrit chunks.csv dans le dossier de travail

    Returns:
        DiscoveryResult (chunks, fichiers écrits, échecs éventuels)

    Raises:
        DecodeError: Conteneur invalide, rien n'est écrit
        ScanError: Buffer décompressé vide ou trop petit
        ChunkWriteError: Écriture impossible (sauf skip_failed_writes)
    """
    save_path = Path(save_path)

    with open(save_path, 'rb') as f:
        data = decompress(f)
    logger.info(f"Décompressé: {len(data)} bytes (0x{len(data):X})")

    working_dir = create_working_dir(output_root)
    logger.info(f"Dossier de travail: {working_dir}")

    raw_copy = working_dir / save_path.name
    raw_copy.write_bytes(data)

    result = DiscoveryResult(
        save_path=save_path,
        working_dir=working_dir,
        raw_copy=raw_copy,
        buffer_len=len(data)
    )

    scanner = ChunkScanner(data, whole_buffer_fallback=whole_buffer_fallback)
    emitter = ChunkEmitter(working_dir, data, skip_failed_writes=skip_failed_writes)

    for record in scanner.iter_chunks():
        result.chunks.append(record)
        emitter.emit(record)

        decoded = decode_chunk(record, data[record.offset:record.end])
        if decoded is not None:
            result.decoded[record.offset] = decoded

    result.written = emitter.written
    result.failures = emitter.failures

    logger.info(f"{len(result.chunks)} chunks découverts, {len(result.written)} écrits")
    if scanner.first_marker_offset is None:
        logger.warning("Aucun marqueur de chunk trouvé")

    if write_manifest_csv:
        manifest = build_manifest(result.written)
        result.manifest_path = write_manifest(manifest, working_dir / MANIFEST_NAME)
        logger.info(f"Index: {result.manifest_path}")

    return result


def main() -> int:
    """Traite la première sauvegarde trouvée, retourne le code de sortie"""
    try:
        config = Config.from_env()
        setup_logging(config.log_dir)
    except OSError as e:
        # pas encore de fichier de log
        print(f"❌ Initialisation impossible: {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        save_path = find_save_file(config.save_dir, config.save_name)
        logger.info(f"Sauvegarde: {save_path}")

        result = discover_chunks(
            save_path,
            config.output_dir,
            skip_failed_writes=config.skip_failed_writes,
            whole_buffer_fallback=config.whole_buffer_fallback,
            write_manifest_csv=config.write_manifest
        )
    except ChunkRangeError:
        logger.exception("Chunk hors du buffer (bug du scanner)")
        return EXIT_ERROR
    except (SaveParserError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return EXIT_ERROR

    if result.failures:
        logger.error(f"{len(result.failures)} chunks non écrits:")
        for failure in result.failures:
            logger.error(f"  {failure.record.name} @ {failure.record.offset}: {failure.cause}")
        return EXIT_WRITE_FAILURES

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
