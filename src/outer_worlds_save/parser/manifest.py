"""
Index des chunks écrits (DataFrame Polars → CSV)
"""

from pathlib import Path
from typing import Iterable, Tuple

import polars as pl

from .scanner import ChunkRecord

MANIFEST_COLUMNS = ['offset', 'offset_hex', 'name', 'length', 'length_hex', 'file']


def build_manifest(written: Iterable[Tuple[ChunkRecord, Path]]) -> pl.DataFrame:
    """
    Construit l'index des chunks

    Args:
        written: Couples (chunk, fichier écrit)

    Returns:
        DataFrame avec colonnes:
        - offset / offset_hex: Position du chunk dans le buffer
        - name: Nom du chunk (4 lettres)
        - length / length_hex: Taille du chunk
        - file: Nom du fichier .bin
    """
    rows = []

    for record, path in written:
        rows.append({
            'offset': record.offset,
            'offset_hex': f"0x{record.offset:X}",
            'name': record.name,
            'length': record.length,
            'length_hex': f"0x{record.length:X}",
            'file': Path(path).name,
        })

    if not rows:
        return pl.DataFrame(schema={
            'offset': pl.Int64,
            'offset_hex': pl.Utf8,
            'name': pl.Utf8,
            'length': pl.Int64,
            'length_hex': pl.Utf8,
            'file': pl.Utf8,
        })

    return pl.DataFrame(rows).select(MANIFEST_COLUMNS).sort('offset')


def write_manifest(df: pl.DataFrame, output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.write_csv(output_path)
    return output_path


def summarize_by_name(df: pl.DataFrame) -> pl.DataFrame:
    """Nombre de chunks et taille totale par nom, du plus fréquent au moins fréquent"""
    return (
        df.group_by('name')
        .agg([
            pl.len().alias('count'),
            pl.col('length').sum().alias('total_length'),
        ])
        .sort(['count', 'name'], descending=[True, False])
    )
