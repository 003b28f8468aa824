"""
Configuration via variables d'environnement (.env supporté)
"""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

PROGRAM_NAME = 'OuterWorldsSaveParser'
DEFAULT_SAVE_NAME = 'SaveGame.dat'


def default_save_dir() -> Path:
    return Path.home() / 'Saved Games' / 'The Outer Worlds'


def default_output_dir() -> Path:
    return Path(tempfile.gettempdir()) / 'outer-worlds-save-parser'


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    if not value:
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class Config:
    save_dir: Path
    save_name: str
    output_dir: Path
    log_dir: Path
    skip_failed_writes: bool = False
    whole_buffer_fallback: bool = False
    write_manifest: bool = True

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> 'Config':
        """
        Construit la config depuis l'environnement

        Variables:
            OUTER_WORLDS_SAVE_DIR: Dossier des sauvegardes (recherche récursive)
            OUTER_WORLDS_SAVE_NAME: Nom du fichier à traiter
            OUTER_WORLDS_OUTPUT_DIR: Parent des dossiers de travail
            OUTER_WORLDS_LOG_DIR: Dossier du fichier de log
            SKIP_FAILED_WRITES: Continue si l'écriture d'un chunk échoue
            WHOLE_BUFFER_FALLBACK: Un chunk "buffer entier" si aucun marqueur
            WRITE_MANIFEST: Écrit chunks.csv dans le dossier de travail
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        return cls(
            save_dir=_env_path('OUTER_WORLDS_SAVE_DIR') or default_save_dir(),
            save_name=os.getenv('OUTER_WORLDS_SAVE_NAME') or DEFAULT_SAVE_NAME,
            output_dir=_env_path('OUTER_WORLDS_OUTPUT_DIR') or default_output_dir(),
            log_dir=_env_path('OUTER_WORLDS_LOG_DIR') or Path.cwd(),
            skip_failed_writes=_env_flag('SKIP_FAILED_WRITES', False),
            whole_buffer_fallback=_env_flag('WHOLE_BUFFER_FALLBACK', False),
            write_manifest=_env_flag('WRITE_MANIFEST', True),
        )
