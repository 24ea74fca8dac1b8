import logging

from app.core.config import settings
from app.core.routers import cep

logger = logging.getLogger(__name__)


def bootstrap_app(app):
    prefix = f"/api/{settings.VERSION}"

    app.include_router(cep.router, prefix=prefix, tags=["CEP"])
    logger.info("Routers registered.")
