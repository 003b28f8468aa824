"""Fixtures partagées et construction de buffers pour les tests"""

import logging
import struct
import zlib
from pathlib import Path
from typing import Dict

import pytest

from outer_worlds_save.logging_setup import PACKAGE_LOGGER


def marker(name: str) -> bytes:
    """Préfixe de longueur 5 + nom de 4 lettres + NUL"""
    return struct.pack('<i', 5) + name.encode('ascii') + b'\x00'


def build_buffer(size: int, markers: Dict[int, str], fill: int = 0) -> bytes:
    data = bytearray([fill] * size)
    for offset, name in markers.items():
        m = marker(name)
        data[offset:offset + len(m)] = m
    assert len(data) == size
    return bytes(data)


@pytest.fixture
def two_chunk_buffer() -> bytes:
    return build_buffer(100, {0: 'ABCD', 40: 'WXYZ'})


@pytest.fixture
def save_file(tmp_path: Path, two_chunk_buffer: bytes) -> Path:
    save_dir = tmp_path / 'saves' / 'profile' / 'slot1'
    save_dir.mkdir(parents=True)
    path = save_dir / 'SaveGame.dat'
    path.write_bytes(zlib.compress(two_chunk_buffer))
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
