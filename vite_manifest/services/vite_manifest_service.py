import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Set

from vite_manifest.models.enums import ManifestDiagnostic
from vite_manifest.models.vite_chunk import ViteChunk

log = logging.getLogger(__name__)


class ViteManifestService:
    """
    Read-only index over the chunks of a Vite manifest.

    Keys are matched case-insensitively. The index is built once at startup
    and never changes afterwards, so it can be shared between requests
    without locking.
    """

    def __init__(self, manifest: Mapping[str, ViteChunk], manifest_found: bool = True):
        chunks: Dict[str, ViteChunk] = {}
        keys: Dict[str, str] = {}
        for key, chunk in manifest.items():
            chunks[key.lower()] = chunk
            keys.setdefault(key.lower(), key)

        self._chunks = MappingProxyType(chunks)
        self._manifest = MappingProxyType(
            {key: chunks[lowered] for lowered, key in keys.items()}
        )
        self._manifest_found = manifest_found

    @property
    def manifest_found(self) -> bool:
        return self._manifest_found

    def get_manifest(self) -> Mapping[str, ViteChunk]:
        return self._manifest

    def lookup(self, key: str) -> Optional[ViteChunk]:
        chunk = self._chunks.get(key.lower())
        if chunk is None:
            # without a manifest every lookup misses
            level = logging.WARNING if self._manifest_found else logging.DEBUG
            log.log(
                level,
                "The chunk '%s' was not found in the Vite manifest. "
                "If you're using the Vite dev server, missing chunks are expected.",
                key,
                extra={"diagnostic": ManifestDiagnostic.ENTRY_NOT_FOUND},
            )
        return chunk

    def get_asset_url(self, input_path: str) -> Optional[str]:
        chunk = self.lookup(input_path)
        if chunk is None:
            return None
        return chunk.file

    def imported_chunks(self, key: str) -> List[ViteChunk]:
        """
        Returns the chunks statically imported by ``key``, transitively and
        depth first, each chunk once. The entry itself is not included.
        """
        entry = self.lookup(key)
        if entry is None:
            return []

        seen: Set[str] = {key.lower()}
        result: List[ViteChunk] = []

        def visit(chunk: ViteChunk) -> None:
            for import_key in chunk.imports:
                lowered = import_key.lower()
                if lowered in seen:
                    continue
                seen.add(lowered)
                imported = self._chunks.get(lowered)
                if imported is None:
                    log.debug("Skipping unknown import '%s' of '%s'", import_key, key)
                    continue
                result.append(imported)
                visit(imported)

        visit(entry)
        return result

    def css_files(self, key: str) -> List[str]:
        entry = self.lookup(key)
        if entry is None:
            return []

        css: List[str] = []
        for chunk in [entry, *self.imported_chunks(key)]:
            for file in chunk.css:
                if file not in css:
                    css.append(file)
        return css

    def __getitem__(self, key: str) -> ViteChunk:
        return self._chunks[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._chunks

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[str]:
        return iter(self._manifest)
