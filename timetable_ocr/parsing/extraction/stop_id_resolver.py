from loguru import logger

from ..templates.template_config import CorrectionTable


class StopIdResolver:
    """
    Исправляет ID остановки из заголовка сегмента.

    Порядок:
    1. Переопределение по названию остановки (ID в документе отсутствует)
    2. Общий ID у разных остановок -> по направлению; неизвестное направление = raw ID
    3. Иначе точечные исправления заглушек и опечаток
    """

    def __init__(self, corrections: CorrectionTable):
        self.stop_name_overrides = dict(corrections.stop_name_overrides)
        self.stop_id_by_destination = {
            raw_id: dict(mapping) for raw_id, mapping in corrections.stop_id_by_destination.items()
        }
        self.stop_id_overrides = dict(corrections.stop_id_overrides)

    def resolve(self, raw_id: str, destination: str, stop_name: str) -> str:
        stop_id = self.stop_name_overrides.get(stop_name, raw_id)

        if stop_id in self.stop_id_by_destination:
            resolved = self.stop_id_by_destination[stop_id].get(destination, stop_id)
        else:
            resolved = self.stop_id_overrides.get(stop_id, stop_id)

        if resolved != raw_id:
            logger.debug(
                f"[StopIdResolver] '{raw_id}' ({stop_name} -> {destination}) -> '{resolved}'"
            )
        return resolved
