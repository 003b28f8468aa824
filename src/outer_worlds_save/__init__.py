"""Découverte de chunks dans les sauvegardes The Outer Worlds"""

__version__ = '0.1.0'
