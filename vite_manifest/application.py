import logging
from configparser import ConfigParser
from typing import Union

from vite_manifest.dependency_injection.config import get_config, get_vite_config
from vite_manifest.dependency_injection.container import Container

log = logging.getLogger(__name__)


def _setup_logging(config: ConfigParser) -> None:
    loglevel_name = config.get("app", "loglevel", fallback="info").upper()
    loglevel = logging.getLevelName(loglevel_name)

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {loglevel_name}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )


def create_container(
    config: Union[ConfigParser, None] = None, container: Union[Container, None] = None
) -> Container:
    """
    Startup step: binds the configuration and builds the manifest index once.
    A malformed manifest raises here, before any request is served.
    """
    container = container if container is not None else Container()
    _config: ConfigParser = config if config is not None else get_config()
    _setup_logging(_config)

    container.config.from_dict(
        {section: dict(_config[section]) for section in _config.sections()}
    )
    container.config.vite.from_dict(get_vite_config(_config).model_dump())

    manifest_service = container.vite_manifest_service()
    log.debug(
        "Vite manifest index ready with %d chunks (manifest found: %s)",
        len(manifest_service),
        manifest_service.manifest_found,
    )
    return container
