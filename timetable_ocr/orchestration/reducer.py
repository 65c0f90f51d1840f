"""
Reduce карт остановок по документам в одну карту корпуса.

Записи одной остановки из разных документов конкатенируются, дубликаты
не удаляются. Вклады документов сливаются в порядке ключа документа,
а не в порядке завершения потоков: результат не зависит от порядка входа.
"""

from typing import Iterable, Tuple

from contracts.d2_parsing_dto import StopMap


def merge_stop_maps(contributions: Iterable[Tuple[str, StopMap]]) -> StopMap:
    """
    Args:
        contributions: пары (ключ документа, карта остановок документа)

    Returns:
        Объединённая карта (порядок ключей = порядок первого появления)
    """
    merged: StopMap = {}
    for _, stops in sorted(contributions, key=lambda item: item[0]):
        for stop_id, records in stops.items():
            merged.setdefault(stop_id, []).extend(records)
    return merged


def sort_stop_map(stops: StopMap) -> StopMap:
    """Пересобирает карту с ключами в лексикографическом порядке."""
    return {stop_id: list(stops[stop_id]) for stop_id in sorted(stops)}


def reduce_corpus(contributions: Iterable[Tuple[str, StopMap]]) -> StopMap:
    return sort_stop_map(merge_stop_maps(contributions))
