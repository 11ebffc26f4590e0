"""Application service: Bulk Update Product Variants use case.

Applies a list of independent partial updates. The unit of atomicity is
the single item: each update runs the full single-item sequence
(validate, mutate, persist, publish) and commits on its own. A failing
item is recorded and the batch moves on; items already committed are
never rolled back.

Items are processed strictly one after another. Running them
concurrently would let two renames both pass the sibling-name check.
"""

from __future__ import annotations

import logging
import threading
from typing import Sequence

from catalog.application.dto import BulkUpdateError, BulkUpdateResultDTO, VariantUpdate
from catalog.application.update_product_variant import (
    UpdateProductVariantHandler,
    VariantUpdated,
    VariantUpdateFailed,
)
from catalog.domain.exceptions import ErrorKind

logger = logging.getLogger(__name__)


class BulkUpdateProductVariantsHandler:

    def __init__(self, update_handler: UpdateProductVariantHandler) -> None:
        self._update_handler = update_handler

    def handle(
        self,
        updates: Sequence[VariantUpdate],
        user_id: str,
        cancel: threading.Event | None = None,
    ) -> BulkUpdateResultDTO:
        """Update every item, isolating failures per item.

        Cancellation is checked between items. Once requested, the items
        not yet started are reported as CANCELLED; earlier successes stay
        committed.
        """
        result = BulkUpdateResultDTO(total_updates=len(updates))
        logger.info(
            "Starting bulk update of %d product variants by user %s",
            result.total_updates, user_id,
        )

        for update in updates:
            if cancel is not None and cancel.is_set():
                result.errors.append(
                    BulkUpdateError(
                        update.variant_id,
                        "Bulk update cancelled before this item was processed",
                        ErrorKind.CANCELLED,
                    )
                )
                continue

            outcome = self._update_handler.try_handle(update, user_id, cancel)
            if isinstance(outcome, VariantUpdated):
                result.updated_variants.append(outcome.variant)
                logger.info("Updated variant %s", update.variant_id)
            elif isinstance(outcome, VariantUpdateFailed):
                result.errors.append(outcome.error)
                logger.warning(
                    "Failed to update variant %s (%s): %s",
                    update.variant_id,
                    outcome.error.error_kind.value,
                    outcome.error.error_message,
                )

        logger.info(
            "Bulk update completed. Successful: %d, Failed: %d, Total: %d",
            result.successful_updates, result.failed_updates, result.total_updates,
        )
        return result
