from .config import Config


def rank_journeys(direct_results, transfer_results, limit=None):
    """
    Merge direct and transfer journeys, shortest total duration first.

    The sort is stable, so equal durations keep discovery order (direct
    results ahead of transfer results). Only the top `limit` are kept.
    """
    if limit is None:
        limit = Config.MAX_RESULTS
    merged = list(direct_results) + list(transfer_results)
    merged.sort(key=lambda journey: journey.total_duration)
    return merged[:limit]
