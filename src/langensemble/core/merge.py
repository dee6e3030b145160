from collections.abc import Sequence

from langensemble.models.detection import DetectionProfile, MergedProfile


def merge_profiles(profiles: Sequence[DetectionProfile]) -> MergedProfile:
    """
    Merges the profiles of several engines for the SAME text.

    Each language code keeps the highest confidence any engine reported for it. A
    code seen by a single engine keeps that engine's confidence. Since only the
    maximum survives, the result does not depend on the order of `profiles`, and
    merging a profile with itself changes nothing.

    Args:
        profiles: One profile per engine, all for the same text.

    Returns:
        MergedProfile: Best confidence per code. Empty if every profile is empty.
    """
    best: dict[str, float] = {}
    for profile in profiles:
        for entry in profile.entries:
            current = best.get(entry.code)
            if current is None or entry.percent > current:
                best[entry.code] = entry.percent
    return MergedProfile(scores=best)


def merge_batch(
    per_engine: Sequence[Sequence[DetectionProfile]],
) -> list[MergedProfile]:
    """
    Merges engine-major batch results into one merged profile per input.

    Args:
        per_engine: per_engine[engine_index][input_index], as produced by
            `run_batches`.

    Returns:
        One MergedProfile per input, in input order.

    Raises:
        ValueError: If the engines returned batches of different lengths.
    """
    if not per_engine:
        return []

    lengths = {len(batch) for batch in per_engine}
    if len(lengths) != 1:
        raise ValueError(
            f"Cannot merge batches of different lengths: {sorted(lengths)}"
        )

    return [merge_profiles(column) for column in zip(*per_engine, strict=True)]
