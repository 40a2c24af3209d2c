import logging
from typing import IO, Optional

LOGGER_NAME = "kmeans2d"


def setup_logger(
    level: int = logging.INFO,
    name: str = LOGGER_NAME,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Возвращает логгер для передачи в ``KMeans(..., logger=...)``.

    Обработчик добавляется один раз, повторные вызовы только меняют
    уровень. Сообщения не дублируются через root-логгер.

    :param level: минимальный уровень логирования
    :param name: имя логгера (по умолчанию — логгер пакета)
    :param stream: поток вывода, по умолчанию stderr
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def format_run_prefix(n_points: int, n_clusters: int) -> str:
    """Префикс для сообщений одного запуска: ``[N=.. K=..]``."""
    return f"[N={n_points} K={n_clusters}]"
