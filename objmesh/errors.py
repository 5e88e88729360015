# objmesh/errors.py
"""
Иерархия ошибок загрузчика.

Фатальные ошибки (StreamUnavailable, ParseError, IndexOutOfRange)
прерывают загрузку целиком. UnknownToken не бросается – экземпляры
копятся в Model.unknown_tokens и пишутся в лог.
"""


class MeshLoadError(RuntimeError):
    """Общий предок всех ошибок загрузки."""


class StreamUnavailable(MeshLoadError, OSError):
    """Источник не удалось открыть или прочитать."""

    def __init__(self, source, reason=""):
        self.source = str(source)
        self.reason = str(reason)
        msg = f"Could not read '{self.source}'"
        if self.reason:
            msg += f": {self.reason}"
        super().__init__(msg)

    def __str__(self):
        return self.args[0]


class ParseError(MeshLoadError, ValueError):
    """Строка с геометрией содержит некорректное числовое поле."""

    def __init__(self, line: str, line_number: int = None, reason: str = ""):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        where = f" (line {line_number})" if line_number is not None else ""
        msg = f"Error loading line{where}: {line}"
        if reason:
            msg += f" [{reason}]"
        super().__init__(msg)


class IndexOutOfRange(MeshLoadError, IndexError):
    """Индекс угла грани выходит за границы своей таблицы."""

    def __init__(self, table: str, index: int, size: int, face_number: int = None):
        self.table = table
        self.index = index            # как в файле, 1‑based
        self.size = size
        self.face_number = face_number
        where = f"face {face_number}: " if face_number is not None else ""
        super().__init__(
            f"{where}{table} index {index} out of range (table has {size} entries)"
        )


class UnknownToken(MeshLoadError):
    """Неизвестный ведущий токен строки. Не фатально."""

    def __init__(self, token: str, line_number: int = None):
        self.token = token
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Unknown token{where}: {token}")
