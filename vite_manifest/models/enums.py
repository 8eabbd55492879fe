from enum import Enum


class ManifestDiagnostic(str, Enum):
    MANIFEST_MISSING = "ManifestMissing"
    ENTRY_NOT_FOUND = "EntryNotFound"
