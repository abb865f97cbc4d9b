"""Bounded worker pool for the add pass of an edit."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from ghprojects.core.contracts.config import DEFAULT_WORKER_COUNT
from ghprojects.core.contracts.edit import WorkUnit
from ghprojects.core.contracts.fields import ResolvedField
from ghprojects.core.engine.items import ItemPipeline
from ghprojects.core.engine.progress import EditProgress, NullEditProgress

_LOG = logging.getLogger(__name__)

ADD_PHASE = "Add"


class AddItemsOrchestrator:
    """Adds item numbers to a project with at most ``worker_count`` concurrent pipelines.

    Workers pull numbers from a shared queue and run the full per-item
    pipeline before pulling again. The first failure sets a shared stop
    flag; workers finish their in-flight item and stop at their next pull.
    Items already attached stay attached.
    """

    def __init__(
        self,
        pipeline: ItemPipeline,
        *,
        worker_count: int = DEFAULT_WORKER_COUNT,
        progress: EditProgress | None = None,
    ) -> None:
        self._pipeline = pipeline
        self._worker_count = max(1, worker_count)
        self._progress = progress or NullEditProgress()

    async def run(self, item_numbers: Sequence[int], fields: Mapping[str, ResolvedField]) -> list[WorkUnit]:
        """Add every number in *item_numbers*, re-raising the first error observed.

        Returns:
            The work units in caller order, each in its terminal state.
        """
        units = [WorkUnit(number=number) for number in item_numbers]
        if not units:
            return units

        queue: asyncio.Queue[WorkUnit] = asyncio.Queue()
        for unit in units:
            queue.put_nowait(unit)
        stop = asyncio.Event()
        errors: list[Exception] = []
        shared_fields = MappingProxyType(dict(fields))
        worker_count = min(self._worker_count, len(units))

        _LOG.debug("Adding %d items with %d workers", len(units), worker_count)
        async with asyncio.TaskGroup() as tg:
            for index in range(worker_count):
                tg.create_task(self._worker(index, queue, stop, errors, shared_fields))

        if errors:
            raise errors[0]
        return units

    async def _worker(
        self,
        index: int,
        queue: asyncio.Queue[WorkUnit],
        stop: asyncio.Event,
        errors: list[Exception],
        fields: Mapping[str, ResolvedField],
    ) -> None:
        while not stop.is_set():
            try:
                unit = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            try:
                await self._pipeline.run(unit, fields)
            except Exception as exc:
                errors.append(exc)
                stop.set()
                return
            self._progress.item_done(ADD_PHASE)
        _LOG.debug("worker %d stopping: add pass cancelled", index)
