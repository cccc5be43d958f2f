"""
Adaptateurs pour les datasets IMDb.

Ce module fournit:
- TSVParser: Parser pour les fichiers TSV compresses (title.principals.tsv.gz, etc.)
- IMDbDatasetDownloader: Telechargement et cache des datasets
"""

from .dataset_downloader import IMDbDatasetDownloader
from .tsv_parser import TSVParser

__all__ = ["TSVParser", "IMDbDatasetDownloader"]
