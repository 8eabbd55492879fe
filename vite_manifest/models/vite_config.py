from pydantic import BaseModel


class ViteConfig(BaseModel):
    web_root: str = "static"
    manifest: str = "manifest.json"
