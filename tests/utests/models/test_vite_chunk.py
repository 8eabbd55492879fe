import pytest
from pydantic import ValidationError

from vite_manifest.models.vite_chunk import ViteChunk


def test_defaults_for_missing_fields():
    chunk = ViteChunk.model_validate({"file": "assets/main-ABC123.js"})

    assert chunk.file == "assets/main-ABC123.js"
    assert chunk.src is None
    assert chunk.name is None
    assert chunk.is_entry is False
    assert chunk.is_dynamic_entry is False
    assert chunk.css == ()
    assert chunk.assets == ()
    assert chunk.imports == ()
    assert chunk.dynamic_imports == ()


def test_reads_camel_case_manifest_fields():
    chunk = ViteChunk.model_validate(
        {
            "file": "assets/bar-gkvgaI9m.js",
            "isEntry": True,
            "isDynamicEntry": True,
            "dynamicImports": ["baz.js"],
        }
    )

    assert chunk.is_entry is True
    assert chunk.is_dynamic_entry is True
    assert chunk.dynamic_imports == ("baz.js",)


def test_field_names_are_case_insensitive():
    chunk = ViteChunk.model_validate(
        {"FILE": "assets/main.js", "IsEntry": True, "CSS": ["assets/main.css"]}
    )

    assert chunk.file == "assets/main.js"
    assert chunk.is_entry is True
    assert chunk.css == ("assets/main.css",)


def test_unknown_fields_are_ignored():
    chunk = ViteChunk.model_validate(
        {"file": "assets/main.js", "integrity": "sha384-abc"}
    )

    assert not hasattr(chunk, "integrity")


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"file": ""},
        {"src": "src/main.ts"},
        "assets/main.js",
        {"file": "assets/main.js", "css": "assets/main.css"},
    ],
)
def test_invalid_chunk_shapes(data):
    with pytest.raises(ValidationError):
        ViteChunk.model_validate(data)


def test_chunk_is_frozen():
    chunk = ViteChunk(file="assets/main.js")

    with pytest.raises(ValidationError):
        chunk.file = "assets/other.js"


def test_chunk_lists_are_immutable():
    chunk = ViteChunk.model_validate(
        {"file": "assets/main.js", "css": ["assets/main.css"], "imports": ["_a.js"]}
    )

    assert chunk.css == ("assets/main.css",)
    with pytest.raises(AttributeError):
        chunk.css.append("assets/injected.css")  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        chunk.imports.append("_b.js")  # type: ignore[attr-defined]
