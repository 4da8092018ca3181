"""Application wiring: builds the store from settings."""

import logging

from .config import Settings
from .repositories import FilesystemRepository
from .sample_data import seed_if_empty
from .services import TaskStore

logger = logging.getLogger(__name__)


def create_store(settings: Settings | None = None) -> TaskStore:
    """Create the repository and store, seed if requested, and load state."""
    settings = settings or Settings()
    repository = FilesystemRepository(settings.data_dir)

    if settings.seed_sample_data:
        seed_if_empty(repository)

    store = TaskStore(repository, missing_task_policy=settings.missing_task_policy)
    store.load()
    logger.debug("Store ready (data_dir=%s)", settings.data_dir)
    return store
