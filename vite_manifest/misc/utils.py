import json
from os import path
from typing import Any, Union


def file_content(filepath: str) -> Union[str, None]:
    if filepath is not None and path.exists(filepath):
        # utf-8-sig skips a leading byte order mark
        with open(filepath, "r", encoding="utf-8-sig") as file:
            return file.read()
    return None


def json_from_string(content: str) -> Any:
    return json.loads(content)


def resolve_manifest_path(web_root: str, manifest: str) -> str:
    if path.isabs(manifest):
        return manifest
    return path.join(web_root, manifest)
