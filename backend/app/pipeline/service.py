# backend/app/pipeline/service.py

"""
Report pipeline shared by the three route families.

fetch -> status filter -> (per-item enrichment) -> (synthesis)
      -> render -> send -> (post-send status writes) -> response
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from app.ai.service import AIService
from app.notifications.render import render_report_html
from app.notifications.schemas import MailMessage
from app.notifications.service import MailTransport
from app.notion.schemas import VeilleItem
from app.notion.service import NotionService
from app.notion.variants import DONE_STATUS, VariantSchema, filter_by_status

from .concurrency import Outcome, concurrent_map
from .config import PipelineConfig, WritePolicy
from .schemas import ReportResponse, WriteFailure

logger = logging.getLogger(__name__)


class RecordWriteError(RuntimeError):
    """A Notion page update failed; ``item`` is what we tried to write."""

    def __init__(self, item: VeilleItem, cause: Exception) -> None:
        super().__init__(f"Failed to update Notion page {item.id}: {cause}")
        self.item = item
        self.cause = cause


def collect_outcomes(
    outcomes: Sequence[Outcome[VeilleItem]],
    originals: Sequence[VeilleItem],
    policy: WritePolicy,
    failures: List[WriteFailure],
) -> List[VeilleItem]:
    """
    Apply the write policy to settled outcomes.

    FAIL_FAST raises the first error in input order. TOLERANT keeps every
    item (the one carried by the error when there is one), logs the error
    and appends it to ``failures``.
    """
    if policy == WritePolicy.FAIL_FAST:
        for outcome in outcomes:
            if not outcome.ok:
                raise outcome.error

    items: List[VeilleItem] = []
    for outcome, original in zip(outcomes, originals):
        if outcome.ok:
            items.append(outcome.value)
            continue

        item = getattr(outcome.error, "item", None) or original
        logger.error("Notion update failed for page %s: %s", item.id, outcome.error)
        failures.append(WriteFailure(id=item.id, title=item.title, error=str(outcome.error)))
        items.append(item)

    return items


class ReportPipeline:
    """
    Runs one report for a route family.

    Collaborators are injected; nothing is kept between runs.
    """

    def __init__(
        self,
        notion: NotionService,
        ai: AIService,
        mailer: MailTransport,
        *,
        sender: str,
        config: Optional[PipelineConfig] = None,
    ) -> None:
        self._notion = notion
        self._ai = ai
        self._mailer = mailer
        self._sender = sender
        self._config = config or PipelineConfig()

    # ---- steps ---------------------------------------------------------

    def _enrich_one(self, variant: VariantSchema, item: VeilleItem) -> VeilleItem:
        comment = self._ai.generate_summary(item.title, item.description, item.url)
        category = self._ai.classify_category(item.title, item.description, item.url)
        enriched = item.model_copy(update={"category": category, "comments": comment})

        try:
            self._notion.update_page(item.id, variant.enrichment_patch(category, comment))
        except Exception as exc:  # noqa: BLE001 - handled by the write policy
            raise RecordWriteError(enriched, exc) from exc

        return enriched.model_copy(update={"status": DONE_STATUS})

    def _enrich(
        self,
        variant: VariantSchema,
        items: Sequence[VeilleItem],
        failures: List[WriteFailure],
    ) -> List[VeilleItem]:
        outcomes = concurrent_map(
            lambda item: self._enrich_one(variant, item),
            items,
            max_workers=self._config.max_workers,
        )
        return collect_outcomes(outcomes, items, self._config.write_policy, failures)

    def _write_one_status(self, variant: VariantSchema, item: VeilleItem) -> VeilleItem:
        try:
            self._notion.update_page(item.id, variant.status_patch())
        except Exception as exc:  # noqa: BLE001 - handled by the write policy
            raise RecordWriteError(item, exc) from exc

        logger.info("Status updated for page %s", item.id)
        return item.model_copy(update={"status": DONE_STATUS})

    def _write_statuses(
        self,
        variant: VariantSchema,
        items: Sequence[VeilleItem],
        failures: List[WriteFailure],
    ) -> List[VeilleItem]:
        # One record at a time.
        outcomes: List[Outcome[VeilleItem]] = []
        for item in items:
            try:
                outcomes.append(Outcome(value=self._write_one_status(variant, item)))
            except RecordWriteError as exc:
                outcomes.append(Outcome(error=exc))
        return collect_outcomes(outcomes, items, self._config.write_policy, failures)

    # ---- public API ------------------------------------------------------

    def run(self, variant: VariantSchema, database_id: str, recipient: str) -> ReportResponse:
        """
        Run the pipeline for ``database_id`` and mail the report to ``recipient``.

        :raises NotionClientError: query failures (and write failures under FAIL_FAST)
        :raises AIClientError: synthesis failures
        :raises MailDeliveryError: the email could not be sent
        """
        items = self._notion.fetch_items(database_id, variant)
        selected = filter_by_status(items, variant.trigger_status)
        logger.info(
            "%s report: %d/%d records with status %r",
            variant.name,
            len(selected),
            len(items),
            variant.trigger_status,
        )

        if not selected:
            return ReportResponse(
                message=f"Aucune donnée avec le statut '{variant.trigger_status}'.",
            )

        failures: List[WriteFailure] = []
        if variant.enrich_items:
            selected = self._enrich(variant, selected, failures)

        narrative: Optional[str] = None
        if variant.synthesize_report and variant.synthesis_prompt:
            narrative = self._ai.synthesize_report(selected, variant.synthesis_prompt)

        message = MailMessage(
            sender=self._sender,
            recipient=recipient,
            html=render_report_html(variant.name, selected, narrative),
        )
        receipt = self._mailer.send(message)
        logger.info("Email sent to %s: %s", recipient, receipt.response)

        if variant.write_status_after_send:
            selected = self._write_statuses(variant, selected, failures)

        return ReportResponse(
            message=variant.success_message,
            suggestions=narrative,
            results=list(selected),
            failures=failures or None,
        )
