"""Read-only access to the OpenAI model listing API."""

import logging
from dataclasses import asdict, dataclass

from openai import OpenAI

from semnotes.errors import ClientActivationError, ModelProviderError

logger = logging.getLogger(__name__)


@dataclass
class ModelInfo:
    """A model offered by the provider."""

    id: str
    created: int
    owned_by: str
    object: str = "model"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_openai(cls, model) -> "ModelInfo":
        return cls(
            id=model.id,
            created=model.created,
            owned_by=model.owned_by,
            object=model.object,
        )


class ModelCatalog:
    """Lists and retrieves OpenAI models.

    Construction only records the API key. Call activate() before use to
    build the client; activation failures raise ClientActivationError.
    """

    def __init__(self, api_key: str, client: OpenAI | None = None) -> None:
        self._api_key = api_key
        self._client = client

    @property
    def is_active(self) -> bool:
        return self._client is not None

    def activate(self) -> "ModelCatalog":
        """Create the OpenAI client. Safe to call more than once."""
        if self._client is not None:
            return self

        try:
            self._client = OpenAI(api_key=self._api_key)
        except Exception as e:
            logger.error(f"Failed to initialize OpenAI client: {e}")
            raise ClientActivationError(f"Failed to initialize OpenAI client: {e}") from e

        logger.info("OpenAI client initialized successfully")
        return self

    @property
    def client(self) -> OpenAI:
        """The activated OpenAI client, for calls beyond model listing."""
        if self._client is None:
            raise ClientActivationError("Model catalog used before activate()")
        return self._client

    def list_models(self) -> list[ModelInfo]:
        """List all models available to the configured API key."""
        client = self.client
        try:
            logger.debug("Fetching list of OpenAI models")
            models = [ModelInfo.from_openai(m) for m in client.models.list()]
        except Exception as e:
            logger.error(f"Error fetching OpenAI models: {e}")
            raise ModelProviderError("Failed to fetch OpenAI models") from e

        logger.info(f"Fetched {len(models)} OpenAI models")
        return models

    def get_model(self, model_id: str) -> ModelInfo:
        """Get details of one model, e.g. "gpt-4o-mini"."""
        client = self.client
        try:
            logger.debug(f"Fetching details for model: {model_id}")
            model = ModelInfo.from_openai(client.models.retrieve(model_id))
        except Exception as e:
            logger.error(f"Error fetching model {model_id}: {e}")
            raise ModelProviderError(f"Failed to fetch model: {model_id}") from e

        logger.info(f"Retrieved model: {model_id}")
        return model

    def is_model_available(self, model_id: str) -> bool:
        try:
            self.get_model(model_id)
            return True
        except ModelProviderError:
            logger.warning(f"Model {model_id} is not available")
            return False
