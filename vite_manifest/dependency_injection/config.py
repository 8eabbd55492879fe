import configparser

from vite_manifest.models.vite_config import ViteConfig

_PATH = "vite.conf"
_CONFIG = None


# pylint:disable=global-statement
def get_config(path=None) -> configparser.ConfigParser:
    """
    Use this method only when it's not possible to inject config variables
    """
    global _CONFIG
    global _PATH
    if path is None:
        path = _PATH
    if _CONFIG is None or _PATH != path:
        _PATH = path
        _CONFIG = configparser.ConfigParser()
        _CONFIG.read(_PATH)
    return _CONFIG


def get_vite_config(config: configparser.ConfigParser) -> ViteConfig:
    defaults = ViteConfig()
    return ViteConfig(
        web_root=config.get("vite", "web_root", fallback=defaults.web_root),
        manifest=config.get("vite", "manifest", fallback=defaults.manifest),
    )
