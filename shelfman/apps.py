import logging

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


def log_refresh_failure(sender, error, ticket, **kwargs):
    logger.error("Product refresh %d failed: %s", ticket, error)


class ShelfmanConfig(AppConfig):
    name = "shelfman"
    verbose_name = _("Catálogo Mayorista")

    def ready(self):
        from shelfman.signals import snapshot_refresh_failed

        snapshot_refresh_failed.connect(
            log_refresh_failure, dispatch_uid="shelfman.log_refresh_failure"
        )
