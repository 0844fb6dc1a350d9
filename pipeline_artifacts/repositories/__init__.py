from .artifact_config_repository import ArtifactConfigRepository
from .pipeline_repository import PipelineRepository

__all__ = [
    'ArtifactConfigRepository',
    'PipelineRepository'
]
