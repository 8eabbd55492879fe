from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ViteChunk(BaseModel):
    """
    One build output unit as described by an entry of the Vite manifest.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file: str = Field(min_length=1)
    src: Optional[str] = None
    name: Optional[str] = None
    is_entry: bool = Field(default=False, alias="isEntry")
    is_dynamic_entry: bool = Field(default=False, alias="isDynamicEntry")
    css: Tuple[str, ...] = Field(default_factory=tuple)
    assets: Tuple[str, ...] = Field(default_factory=tuple)
    imports: Tuple[str, ...] = Field(default_factory=tuple)
    dynamic_imports: Tuple[str, ...] = Field(
        default_factory=tuple, alias="dynamicImports"
    )

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitive(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        known: Dict[str, str] = {}
        for field_name, field in cls.model_fields.items():
            alias = field.alias or field_name
            known[alias.lower()] = alias

        return {known.get(key.lower(), key): value for key, value in data.items()}
