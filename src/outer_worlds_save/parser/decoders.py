"""
Registre de décodeurs par nom de chunk

Le format des entrées n'est pas encore connu : aucun décodeur n'est
enregistré par défaut. Un décodeur reçoit le chunk et ses octets bruts.
"""

from typing import Any, Callable, Dict, Optional

from .scanner import ChunkRecord

Decoder = Callable[[ChunkRecord, bytes], Any]

_DECODERS: Dict[str, Decoder] = {}


def register_decoder(name: str) -> Callable[[Decoder], Decoder]:
    """
    Décorateur pour enregistrer un décodeur

    Exemple:
        @register_decoder('ABCD')
        def decode_abcd(record, data):
            ...
    """
    def wrapper(func: Decoder) -> Decoder:
        if name in _DECODERS:
            raise ValueError(f"Décodeur déjà enregistré pour {name}")
        _DECODERS[name] = func
        return func

    return wrapper


def unregister_decoder(name: str) -> None:
    _DECODERS.pop(name, None)


def get_decoder(name: str) -> Optional[Decoder]:
    return _DECODERS.get(name)


def registered_names():
    return sorted(_DECODERS)


def decode_chunk(record: ChunkRecord, data: bytes) -> Optional[Any]:
    """Décode un chunk si un décodeur existe pour son nom, sinon None"""
    decoder = get_decoder(record.name)
    if decoder is None:
        return None
    return decoder(record, data)
