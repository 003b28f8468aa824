"""
Scanner de chunks pour les sauvegardes décompressées

Le format n'est pas connu : on cherche à chaque offset un préfixe int32
little-endian égal à 5 suivi d'un nom de chunk (4 majuscules + NUL).
Chaque marqueur confirmé ferme le chunk précédent, le dernier chunk
s'étend jusqu'à la fin du buffer.
"""

import struct
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from ..errors import ScanError
from .classifier import MARKER_NAME_LEN, MARKER_WINDOW_LEN, is_chunk_marker

LENGTH_PREFIX = struct.Struct('<i')
MARKER_PREFIX = LENGTH_PREFIX.pack(MARKER_WINDOW_LEN)

# Nom du chunk "buffer entier" quand aucun marqueur n'est trouvé
UNMARKED_NAME = '----'


@dataclass(frozen=True)
class ChunkRecord:
    """Plage [offset, offset + length) supposée être un chunk logique"""
    offset: int
    name: str
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True)
class NoOpenChunk:
    """Aucun marqueur confirmé pour l'instant"""


@dataclass(frozen=True)
class OpenChunk:
    """Chunk ouvert au dernier marqueur confirmé, longueur encore inconnue"""
    offset: int


ScanState = Union[NoOpenChunk, OpenChunk]


def read_chunk_name(data: bytes, offset: int) -> str:
    """Lit le nom (4 lettres) qui suit le préfixe de longueur du marqueur"""
    start = offset + LENGTH_PREFIX.size
    return data[start:start + MARKER_NAME_LEN].decode('ascii')


def is_marker_at(data: bytes, offset: int) -> bool:
    """Préfixe == 5 à `offset` et fenêtre acceptée par le classifier"""
    if offset < 0 or offset + LENGTH_PREFIX.size > len(data):
        return False

    possible_length = LENGTH_PREFIX.unpack_from(data, offset)[0]
    if possible_length != MARKER_WINDOW_LEN:
        return False

    start = offset + LENGTH_PREFIX.size
    return is_chunk_marker(data[start:start + possible_length])


def iter_marker_offsets(data: bytes) -> Iterator[int]:
    """
    Tous les offsets de marqueurs, dans l'ordre croissant.

    Équivalent à tester chaque offset octet par octet : seuls les offsets
    où le préfixe vaut 5 peuvent matcher, bytes.find les trouve tous
    (chevauchements compris puisqu'on repart à offset + 1).
    """
    offset = data.find(MARKER_PREFIX)
    while offset != -1:
        if is_marker_at(data, offset):
            yield offset
        offset = data.find(MARKER_PREFIX, offset + 1)


def close_chunk(state: OpenChunk, end: int, data: bytes) -> ChunkRecord:
    return ChunkRecord(
        offset=state.offset,
        name=read_chunk_name(data, state.offset),
        length=end - state.offset
    )


def advance(state: ScanState, offset: int, data: bytes) -> Tuple[ScanState, Optional[ChunkRecord]]:
    """
    Transition sur un marqueur confirmé à `offset`.

    Retourne le nouvel état (toujours OpenChunk(offset)) et le chunk
    précédent fermé, ou None si c'était le premier marqueur.
    """
    closed = None
    if isinstance(state, OpenChunk):
        closed = close_chunk(state, offset, data)

    return OpenChunk(offset), closed


def finish(state: ScanState, data: bytes) -> Optional[ChunkRecord]:
    """Ferme le dernier chunk ouvert sur la fin du buffer"""
    if isinstance(state, OpenChunk):
        return close_chunk(state, len(data), data)
    return None


class ChunkScanner:
    """Découpe un buffer décompressé en chunks candidats"""

    def __init__(self, data: bytes, whole_buffer_fallback: bool = False):
        """
        Args:
            data: Buffer décompressé complet (jamais modifié)
            whole_buffer_fallback: Si True et qu'aucun marqueur n'est trouvé,
                retourne un seul chunk couvrant tout le buffer
        """
        self.data = bytes(data)
        self.whole_buffer_fallback = whole_buffer_fallback
        self.state: ScanState = NoOpenChunk()
        self.markers: List[int] = []
        self.chunks: List[ChunkRecord] = []

    def iter_chunks(self) -> Iterator[ChunkRecord]:
        """
        Produit les chunks au fur et à mesure que les marqueurs sont confirmés
        """
        if len(self.data) < LENGTH_PREFIX.size:
            raise ScanError(f"Buffer trop petit pour être scanné ({len(self.data)} bytes)")

        self.state = NoOpenChunk()
        self.markers = []

        for offset in iter_marker_offsets(self.data):
            self.state, closed = advance(self.state, offset, self.data)
            self.markers.append(offset)
            if closed is not None:
                yield closed

        last = finish(self.state, self.data)
        if last is not None:
            yield last
        elif self.whole_buffer_fallback:
            yield ChunkRecord(offset=0, name=UNMARKED_NAME, length=len(self.data))

    def scan_all_chunks(self) -> List[ChunkRecord]:
        """Scanne tout le buffer et retourne la liste ordonnée des chunks"""
        self.chunks = list(self.iter_chunks())
        return self.chunks

    @property
    def first_marker_offset(self) -> Optional[int]:
        return self.markers[0] if self.markers else None


def scan(data: bytes, whole_buffer_fallback: bool = False) -> List[ChunkRecord]:
    """
    Scanne un buffer décompressé

    Args:
        data: Buffer décompressé
        whole_buffer_fallback: Politique quand aucun marqueur n'est trouvé

    Returns:
        Chunks triés par offset, contigus du premier marqueur à la fin du buffer
    """
    return ChunkScanner(data, whole_buffer_fallback).scan_all_chunks()
