import asyncio
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from langensemble.detectors.base import BaseDetector
from langensemble.models.detection import DetectionProfile
from langensemble.utils.logger import get_logger

logger = get_logger()


def run_batch(
    detector: BaseDetector, inputs: Sequence[str], max_workers: int | None = None
) -> list[DetectionProfile]:
    """
    Runs one detector over a batch of texts.

    Args:
        detector: The adapter to run.
        inputs: The texts to analyze.
        max_workers: Thread pool size. None uses the executor default.

    Returns:
        One profile per input, in input order.
    """
    return run_batches([detector], inputs, max_workers)[0]


def run_batches(
    detectors: Sequence[BaseDetector],
    inputs: Sequence[str],
    max_workers: int | None = None,
) -> list[list[DetectionProfile]]:
    """
    Runs several detectors over the same batch, fanning out across both the
    detector axis and the input axis in a single thread pool.

    Every call writes into a pre-sized slot addressed by (detector, input) index,
    so the output order is independent of completion order.

    Args:
        detectors: The adapters to run.
        inputs: The texts to analyze.
        max_workers: Thread pool size. None uses the executor default.

    Returns:
        Slots indexed as result[detector_index][input_index].
    """
    slots: list[list[DetectionProfile | None]] = [
        [None] * len(inputs) for _ in detectors
    ]
    if not inputs or not detectors:
        return [list(row) for row in slots]  # type: ignore[misc]

    logger.debug(
        f"Running {len(detectors)} detector(s) over a batch of {len(inputs)} text(s)"
    )

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: dict[Future[DetectionProfile], tuple[int, int]] = {
            executor.submit(detector.detect, text): (d_idx, i_idx)
            for d_idx, detector in enumerate(detectors)
            for i_idx, text in enumerate(inputs)
        }
        for future in as_completed(futures):
            d_idx, i_idx = futures[future]
            slots[d_idx][i_idx] = _result_or_empty(future, detectors[d_idx])

    return slots  # type: ignore[return-value]


async def a_run_batch(
    detector: BaseDetector, inputs: Sequence[str]
) -> list[DetectionProfile]:
    """Async version of run_batch."""
    return (await a_run_batches([detector], inputs))[0]


async def a_run_batches(
    detectors: Sequence[BaseDetector], inputs: Sequence[str]
) -> list[list[DetectionProfile]]:
    """
    Async version of run_batches. `asyncio.gather` returns results in argument
    order, which maps one-to-one onto the (detector, input) slots.
    """
    if not inputs or not detectors:
        return [[] for _ in detectors]

    calls = [
        _a_detect_or_empty(detector, text)
        for detector in detectors
        for text in inputs
    ]
    flat = await asyncio.gather(*calls)

    width = len(inputs)
    return [flat[d_idx * width : (d_idx + 1) * width] for d_idx in range(len(detectors))]


def _result_or_empty(
    future: Future[DetectionProfile], detector: BaseDetector
) -> DetectionProfile:
    # Adapters that break the no-raise contract still yield an empty slot.
    try:
        return future.result()
    except Exception as e:
        logger.error(f"Detector '{detector.name}' raised during batch detection: {e}")
        return DetectionProfile(engine=detector.name)


async def _a_detect_or_empty(detector: BaseDetector, text: str) -> DetectionProfile:
    try:
        return await detector.a_detect(text)
    except Exception as e:
        logger.error(f"Detector '{detector.name}' raised during batch detection: {e}")
        return DetectionProfile(engine=detector.name)
