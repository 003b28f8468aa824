"""
Recherche des fichiers de sauvegarde sur le disque
"""

from pathlib import Path
from typing import List

from .config import DEFAULT_SAVE_NAME
from .errors import SaveNotFoundError


def get_save_files(save_dir: Path) -> List[Path]:
    """Tous les .dat sous save_dir (récursif), triés"""
    save_dir = Path(save_dir)
    if not save_dir.is_dir():
        raise SaveNotFoundError(f"Dossier de sauvegardes introuvable: {save_dir}")

    return sorted(p for p in save_dir.rglob('*.dat') if p.is_file())


def find_save_file(save_dir: Path, save_name: str = DEFAULT_SAVE_NAME) -> Path:
    """Première sauvegarde nommée save_name (une seule est traitée)"""
    for save_path in get_save_files(save_dir):
        if save_path.name == save_name:
            return save_path

    raise SaveNotFoundError(f"Aucun {save_name} trouvé dans {save_dir}")
