#!/usr/bin/env python3
"""
Découverte des chunks d'une sauvegarde donnée en argument
(sans recherche dans "Saved Games")
"""

import argparse
import sys
from pathlib import Path

from outer_worlds_save.config import Config
from outer_worlds_save.errors import SaveParserError
from outer_worlds_save.logging_setup import setup_logging
from outer_worlds_save.main import discover_chunks
from outer_worlds_save.parser import build_manifest, summarize_by_name


def main():
    parser = argparse.ArgumentParser(description="Découpe un SaveGame.dat en chunks")
    parser.add_argument('save', type=Path, help="Fichier de sauvegarde compressé")
    parser.add_argument('--output', type=Path, default=None, help="Parent du dossier de travail")
    parser.add_argument('--skip-failed-writes', action='store_true')
    args = parser.parse_args()

    config = Config.from_env()
    setup_logging(config.log_dir)

    print(f"\n{'='*80}")
    print(f"📂 Sauvegarde: {args.save}")
    print(f"{'='*80}\n")

    try:
        result = discover_chunks(
            args.save,
            args.output or config.output_dir,
            skip_failed_writes=args.skip_failed_writes,
            whole_buffer_fallback=config.whole_buffer_fallback
        )
    except SaveParserError as e:
        print(f"❌ Erreur: {e}")
        return 1

    print(f"✅ {len(result.chunks)} chunks découverts ({result.buffer_len:,} bytes décompressés)")
    print(f"📁 Dossier: {result.working_dir}")

    if result.written:
        print(f"\n{'─'*80}")
        print("Chunks par nom:")
        print(summarize_by_name(build_manifest(result.written)))

    if result.failures:
        print(f"\n⚠️  {len(result.failures)} chunks non écrits")
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
