# objmesh/loader.py
# -*- coding: utf-8 -*-
"""
Точка входа для рендера: путь к .obj → (MeshBuffer, CornerReport | None).

* Один вызов = один Model + один MeshBuffer, ничего общего между вызовами.
* Любая фатальная ошибка прерывает загрузку целиком и пробрасывается
  вызывающему; частичный результат не возвращается.
* Несколько файлов можно грузить параллельно через load_models().
"""

from typing import Dict, Optional, Tuple

from objmesh.errors import MeshLoadError
from objmesh.format.parser import parse_file
from objmesh.mesh.buffer import MeshBuffer
from objmesh.mesh.builder import build
from objmesh.mesh.corners import CornerReport, log_corner_report
from objmesh.multithread.task_pool import TaskPool
from objmesh.utils.config import Config
from objmesh.utils.logger import logger, set_level
from objmesh.utils.profiler import Profiler

LoadResult = Tuple[MeshBuffer, Optional[CornerReport]]


def load_obj(path, diagnostics: bool = False) -> LoadResult:
    """Прочитать и развернуть один OBJ‑файл."""
    logger.info(f"[Loader] Loading obj file {path}")
    try:
        with Profiler(f"parse {path}"):
            model = parse_file(path)
        with Profiler(f"build {path}"):
            buffer, report = build(model, diagnostics=diagnostics)
    except MeshLoadError as exc:
        logger.error(f"[Loader] {path}: {exc}")
        raise

    if model.unknown_tokens:
        logger.warning(
            f"[Loader] {path}: skipped {len(model.unknown_tokens)} line(s) with unknown tokens"
        )
    if report is not None:
        log_corner_report(report, str(path))

    logger.info(f"[Loader] {path}: {buffer.count} vertices")
    return buffer, report


def load_models(models: Dict[str, str],
                diagnostics: bool = False,
                max_workers: Optional[int] = None) -> Dict[str, LoadResult]:
    """
    Загрузить несколько моделей параллельно.

    `models` – имя → путь. Первая же фатальная ошибка пробрасывается
    после того, как пул дождётся остальных задач.
    """
    with TaskPool(max_workers=max_workers) as pool:
        futures = {
            name: pool.submit(load_obj, path, diagnostics)
            for name, path in models.items()
        }
        pool.wait_all()
    return {name: future.result() for name, future in futures.items()}


def load_configured_models(config: Config = None) -> Dict[str, LoadResult]:
    """Загрузить всё, что перечислено в секции "models" конфига."""
    cfg = config if config is not None else Config()
    set_level(cfg["log_level"])
    models = cfg.models
    if not models:
        logger.warning("[Loader] No models configured.")
        return {}
    return load_models(
        models,
        diagnostics=cfg.output_corner_vertices,
        max_workers=cfg["max_workers"],
    )
