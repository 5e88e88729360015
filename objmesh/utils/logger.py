# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("objmesh")

logger = init_logger()

def set_level(level):
    """Принимает имя уровня ('DEBUG') или число (logging.DEBUG)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            logger.warning(f"Unknown log level '{level}', keeping {logging.getLevelName(logger.level)}")
            return
        level = resolved
    logger.setLevel(level)
