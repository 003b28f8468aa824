"""
Heuristique de reconnaissance des noms de chunks
Un nom de chunk = 4 lettres majuscules ASCII suivies d'un NUL
"""

MARKER_NAME_LEN = 4
MARKER_WINDOW_LEN = MARKER_NAME_LEN + 1


def is_marker_char(b: int, index: int) -> bool:
    """Vérifie un octet du nom selon sa position dans la fenêtre"""
    if index == MARKER_NAME_LEN:
        return b == 0x00

    return 0x41 <= b <= 0x5A  # 'A'..'Z'


def is_chunk_marker(window: bytes) -> bool:
    """
    Retourne True si la fenêtre de 5 octets ressemble à un nom de chunk.

    Les faux positifs (payload qui matche par hasard) sont possibles et
    tolérés : ce n'est qu'un filtre structurel, sans connaissance du format.
    """
    if len(window) != MARKER_WINDOW_LEN:
        return False

    for i, b in enumerate(window):
        if not is_marker_char(b, i):
            return False

    return True
