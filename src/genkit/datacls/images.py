from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AssemblyConfiguration(BaseModel):
    """
        Class describes which build outputs are copied into the image and where.
    """
    target_dir: str
    files: List[str] = Field(default_factory=list)


class BuildConfiguration(BaseModel):
    """
        Class describes how an image is built. `from` is the base image.
    """
    model_config = ConfigDict(populate_by_name=True)

    from_image: Optional[str] = Field(None, alias='from')  # 'from'
    ports: List[str] = Field(default_factory=list)
    workdir: Optional[str] = None
    cmd: List[str] = Field(default_factory=list)
    env: Dict[str, str] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)
    assembly: Optional[AssemblyConfiguration] = None


class ImageConfiguration(BaseModel):
    """
        Class represents one build specification handed to the image assembler.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    alias: Optional[str] = None
    build: BuildConfiguration = Field(default_factory=BuildConfiguration)
    metadata: Dict[str, str | bool] = Field(default_factory=dict)
