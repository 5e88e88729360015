# objmesh/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Независимые загрузки (по одной на файл) идут в разных потоках;
# общего состояния между ними нет.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor
import queue

from objmesh.utils.logger import logger

class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers,
                                           thread_name_prefix="objmesh")
        self.tasks = queue.Queue()
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        self._prune()
        future = self.executor.submit(fn, *args, **kwargs)
        self.tasks.put(future)
        return future

    def _prune(self):
        """Убрать из очереди успешно завершённые задачи; упавшие остаются до wait_all()."""
        pending = []
        while not self.tasks.empty():
            future = self.tasks.get()
            if future.cancelled():
                continue
            if not future.done() or future.exception() is not None:
                pending.append(future)
        for future in pending:
            self.tasks.put(future)

    @property
    def pending(self) -> int:
        return self.tasks.qsize()

    def wait_all(self):
        """Блокировать до завершения всех поставленных задач."""
        while not self.tasks.empty():
            future = self.tasks.get()
            try:
                future.result()  # пробрасывает исключения, если они возникли
            except Exception as exc:
                logger.error(f"[TaskPool] Task failed: {exc}")
                raise

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown(wait=True)
