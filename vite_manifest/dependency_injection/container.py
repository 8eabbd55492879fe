# pylint: disable=c-extension-no-member, too-few-public-methods
from dependency_injector import containers, providers

from vite_manifest.misc.utils import resolve_manifest_path
from vite_manifest.services.manifest_loader import build_index


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    vite_manifest_path = providers.Callable(
        resolve_manifest_path, config.vite.web_root, config.vite.manifest
    )

    vite_manifest_service = providers.Singleton(
        build_index, manifest_path=vite_manifest_path
    )
