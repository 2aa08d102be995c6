# objscene/utils/logger.py
# ---------------------------------------------------------------
# Единый логгер пакета.  Все модули импортируют `logger` отсюда.
# ---------------------------------------------------------------

import logging


def init_logger(level: str = "INFO") -> logging.Logger:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    log = logging.getLogger("objscene")
    log.setLevel(level)
    return log


logger = init_logger()


def set_level(level: str) -> None:
    """Сменить уровень логирования ("DEBUG", "INFO", ...)."""
    logger.setLevel(level.upper())
