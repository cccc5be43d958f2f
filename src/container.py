"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.imdb.dataset_downloader import IMDbDatasetDownloader
from .adapters.imdb.tsv_parser import TSVParser
from .config import Settings
from .services.catalog import Catalog
from .services.credits_loader import CreditsLoaderService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        loader = container.credits_loader()
        loader.load_principals(container.config().principals_path)
        catalog = loader.catalog
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters
    tsv_parser = providers.Singleton(TSVParser)

    dataset_downloader = providers.Factory(
        IMDbDatasetDownloader,
        cache_dir=config.provided.datasets_dir,
    )

    # Catalogue - Factory : chaque chargement part d'un catalogue vide
    catalog = providers.Factory(Catalog)

    # Service de chargement - Factory avec un catalogue neuf
    credits_loader = providers.Factory(
        CreditsLoaderService,
        catalog=catalog,
        parser=tsv_parser,
    )
