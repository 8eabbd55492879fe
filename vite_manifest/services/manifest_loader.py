import json
import logging
from typing import Dict

from pydantic import ValidationError

from vite_manifest.exceptions.manifest_exceptions import ManifestParseError
from vite_manifest.misc.utils import file_content, json_from_string
from vite_manifest.models.enums import ManifestDiagnostic
from vite_manifest.models.vite_chunk import ViteChunk
from vite_manifest.services.vite_manifest_service import ViteManifestService

log = logging.getLogger(__name__)


class ManifestLoader:
    def __init__(self, manifest_path: str):
        self.manifest_path = manifest_path

    def load(self) -> ViteManifestService:
        try:
            content = file_content(self.manifest_path)
        except (OSError, UnicodeDecodeError) as exception:
            raise ManifestParseError(
                manifest_path=self.manifest_path, reason=str(exception)
            ) from exception

        if content is None:
            log.warning(
                "The Vite manifest %s was not found. Did you forget 'npm run build'? "
                "Ignore this message if you're using the Vite dev server.",
                self.manifest_path,
                extra={"diagnostic": ManifestDiagnostic.MANIFEST_MISSING},
            )
            return ViteManifestService({}, manifest_found=False)

        chunks = self._parse(content)
        log.info("Loaded %d chunks from Vite manifest %s", len(chunks), self.manifest_path)
        return ViteManifestService(chunks)

    def _parse(self, content: str) -> Dict[str, ViteChunk]:
        try:
            data = json_from_string(content)
        except json.JSONDecodeError as exception:
            raise ManifestParseError(
                manifest_path=self.manifest_path, reason=str(exception)
            ) from exception

        if not isinstance(data, dict):
            raise ManifestParseError(
                manifest_path=self.manifest_path,
                reason=f"expected a JSON object, got {type(data).__name__}",
            )

        chunks: Dict[str, ViteChunk] = {}
        for key, value in data.items():
            try:
                chunks[key] = ViteChunk.model_validate(value)
            except ValidationError as exception:
                raise ManifestParseError(
                    manifest_path=self.manifest_path,
                    reason=f"invalid chunk '{key}': {exception}",
                ) from exception
        return chunks


def build_index(manifest_path: str) -> ViteManifestService:
    return ManifestLoader(manifest_path).load()
