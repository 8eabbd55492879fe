class ManifestException(Exception):
    pass


class ManifestParseError(ManifestException):
    def __init__(self, *, manifest_path: str, reason: str):
        super().__init__(f"Unable to parse Vite manifest {manifest_path}: {reason}")
        self.manifest_path = manifest_path
        self.reason = reason
