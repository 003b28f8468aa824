"""
Erreurs levées pendant la découverte des chunks
"""


class SaveParserError(Exception):
    """Erreur de base du parser de sauvegarde"""


class SaveNotFoundError(SaveParserError, FileNotFoundError):
    """Aucun fichier de sauvegarde trouvé"""


class DecodeError(SaveParserError):
    """Conteneur compressé invalide ou tronqué"""


class ScanError(SaveParserError):
    """Buffer vide ou trop petit pour être scanné"""


class ChunkRangeError(SaveParserError, IndexError):
    """
    Offset/longueur de chunk hors du buffer.
    Indique un bug du scanner, jamais une donnée utilisateur invalide.
    """


class ChunkWriteError(SaveParserError, OSError):
    """Écriture d'un artefact de chunk impossible"""

    def __init__(self, record, path, cause: OSError):
        super().__init__(f"Écriture impossible pour {record.name} @ {record.offset} ({path}): {cause}")
        self.record = record
        self.path = path
        self.cause = cause
