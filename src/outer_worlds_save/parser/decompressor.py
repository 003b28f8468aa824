"""
Décompression du conteneur de sauvegarde (zlib, ou ZSTD si magic détecté)
"""

import io
import logging
import zlib
from typing import BinaryIO, Union

import zstandard as zstd

from ..errors import DecodeError

logger = logging.getLogger(__name__)

ZSTD_MAGIC = b'\x28\xb5\x2f\xfd'
READ_SIZE = 64 * 1024


def _as_stream(source: Union[bytes, bytearray, BinaryIO]) -> BinaryIO:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    return source


def _peek(stream: BinaryIO, size: int) -> bytes:
    """Lit les premiers octets puis revient au début (stream seekable requis)"""
    position = stream.tell()
    head = stream.read(size)
    stream.seek(position)
    return head


def decompress_zlib(stream: BinaryIO) -> bytes:
    """Décompresse un flux zlib par blocs de 64 KiB"""
    dobj = zlib.decompressobj()
    output = io.BytesIO()

    try:
        while True:
            block = stream.read(READ_SIZE)
            if not block:
                break
            output.write(dobj.decompress(block))
            if dobj.eof:
                break
        output.write(dobj.flush())
    except zlib.error as e:
        raise DecodeError(f"Flux zlib invalide: {e}") from e

    if not dobj.eof:
        raise DecodeError(f"Flux zlib tronqué ({output.tell()} bytes décompressés)")

    trailing = len(dobj.unused_data) + len(stream.read())
    if trailing:
        logger.debug(f"{trailing} bytes ignorés après la fin du flux zlib")

    return output.getvalue()


def decompress_zstd(stream: BinaryIO) -> bytes:
    """
    Décompresse un flux ZSTD par blocs de 64 KiB

    Les frames concaténées sont enchaînées, une frame incomplète en fin
    de flux lève DecodeError.
    """
    dctx = zstd.ZstdDecompressor()
    dobj = dctx.decompressobj()
    output = io.BytesIO()

    try:
        while True:
            block = stream.read(READ_SIZE)
            if not block:
                break
            while block:
                if dobj.eof:
                    dobj = dctx.decompressobj()
                output.write(dobj.decompress(block))
                block = dobj.unused_data if dobj.eof else b''
    except zstd.ZstdError as e:
        raise DecodeError(f"Flux ZSTD invalide: {e}") from e

    if not dobj.eof:
        raise DecodeError(f"Flux ZSTD tronqué ({output.tell()} bytes décompressés)")

    return output.getvalue()


def decompress(source: Union[bytes, bytearray, BinaryIO]) -> bytes:
    """
    Décompresse une sauvegarde complète en mémoire

    Args:
        source: Octets compressés ou fichier binaire ouvert (seekable)

    Returns:
        Buffer décompressé

    Raises:
        DecodeError: Conteneur invalide, tronqué ou vide
    """
    stream = _as_stream(source)

    head = _peek(stream, len(ZSTD_MAGIC))
    if not head:
        raise DecodeError("Conteneur vide")

    if head == ZSTD_MAGIC:
        return decompress_zstd(stream)

    return decompress_zlib(stream)
