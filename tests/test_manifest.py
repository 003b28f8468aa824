from pathlib import Path

import polars as pl

from outer_worlds_save.parser.manifest import (
    MANIFEST_COLUMNS,
    build_manifest,
    summarize_by_name,
    write_manifest,
)
from outer_worlds_save.parser.scanner import ChunkRecord


def _written():
    return [
        (ChunkRecord(40, 'WXYZ', 60), Path('/tmp/run/40-WXYZ_0x28.bin')),
        (ChunkRecord(0, 'ABCD', 40), Path('/tmp/run/0-ABCD_0x0.bin')),
        (ChunkRecord(100, 'ABCD', 300), Path('/tmp/run/100-ABCD_0x64.bin')),
    ]


def test_build_manifest_sorted_with_hex_columns():
    df = build_manifest(_written())

    assert df.columns == MANIFEST_COLUMNS
    assert df['offset'].to_list() == [0, 40, 100]
    assert df['offset_hex'].to_list() == ['0x0', '0x28', '0x64']
    assert df['length_hex'].to_list() == ['0x28', '0x3C', '0x12C']
    assert df['file'].to_list() == ['0-ABCD_0x0.bin', '40-WXYZ_0x28.bin', '100-ABCD_0x64.bin']


def test_empty_manifest_keeps_columns():
    df = build_manifest([])
    assert df.height == 0
    assert df.columns == MANIFEST_COLUMNS


def test_write_manifest_csv(tmp_path):
    path = write_manifest(build_manifest(_written()), tmp_path / 'out' / 'chunks.csv')

    df = pl.read_csv(path)
    assert df.height == 3
    assert df['name'].to_list() == ['ABCD', 'WXYZ', 'ABCD']


def test_summarize_by_name():
    summary = summarize_by_name(build_manifest(_written()))

    assert summary['name'].to_list() == ['ABCD', 'WXYZ']
    assert summary['count'].to_list() == [2, 1]
    assert summary['total_length'].to_list() == [340, 60]
