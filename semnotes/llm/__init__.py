"""OpenAI model listing."""

from .models import ModelCatalog, ModelInfo

__all__ = ["ModelCatalog", "ModelInfo"]
