import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from vite_manifest.dependency_injection.config import get_config


@pytest.fixture
def config():
    yield get_config("tests/vite.test.conf")


@pytest.fixture
def sample_manifest() -> Dict[str, Any]:
    return {
        "src/main.ts": {
            "file": "assets/main-ABC123.js",
            "src": "src/main.ts",
            "isEntry": True,
            "css": ["assets/main-XYZ.css"],
            "imports": ["_vendor-DEF456.js"],
        },
        "_vendor-DEF456.js": {
            "file": "assets/vendor-DEF456.js",
            "css": ["assets/vendor-QRS.css"],
        },
        "resources/css/app.scss": {
            "file": "assets/app-OH0OBLf7.css",
            "src": "resources/css/app.scss",
        },
    }


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[Any], str]:
    def _write(content: Any) -> str:
        manifest_path = tmp_path / "manifest.json"
        if isinstance(content, str):
            manifest_path.write_text(content, encoding="utf-8")
        else:
            manifest_path.write_text(json.dumps(content), encoding="utf-8")
        return str(manifest_path)

    return _write
