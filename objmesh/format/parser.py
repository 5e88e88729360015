# objmesh/format/parser.py
# ---------------------------------------------------------------
# Разбор текстового формата Wavefront OBJ в Model.
# Один проход по строкам, без состояния между вызовами.
# ---------------------------------------------------------------

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from objmesh.errors import ParseError, StreamUnavailable, UnknownToken
from objmesh.format.numbers import parse_float, parse_index
from objmesh.format.tokens import Token, tokenize
from objmesh.model import CornerIndex, Face, Model, Normal, Position, TexCoord
from objmesh.utils.logger import logger


# ----------------------------------------------------------------------
# Углы граней: a, a/b, a/b/c, a//c
# ----------------------------------------------------------------------
def read_index(text: str) -> Tuple[Optional[int], Optional[str], bool]:
    """
    Съесть одно поле до '/'.

    Возвращает (значение, остаток, есть_ли_поле). Остаток – None, если
    разделителей больше нет. Пустое поле даёт (None, остаток, False).
    Значение возвращается как в файле (1‑based).
    """
    head, sep, tail = text.partition("/")
    rest = tail if sep else None
    if not head:
        return None, rest, False
    return parse_index(head), rest, True


def read_corner(text: str) -> CornerIndex:
    """Разобрать спецификацию угла и перевести индексы в 0‑based."""
    vertex, rest, present = read_index(text)
    if not present:
        raise ValueError(f"missing vertex index in {text!r}")

    texcoord = normal = None
    if rest is not None:
        texcoord, rest, _ = read_index(rest)
        if rest is not None:
            normal, rest, present = read_index(rest)
            if not present:
                raise ValueError(f"empty normal index in {text!r}")
            if rest is not None:
                raise ValueError(f"too many fields in {text!r}")

    # 1‑based → 0‑based строго после проверки наличия
    return CornerIndex(
        vertex - 1,
        texcoord - 1 if texcoord is not None else None,
        normal - 1 if normal is not None else None,
    )


# ----------------------------------------------------------------------
def _read_floats(args: List[str], count: int) -> List[float]:
    if len(args) != count:
        raise ValueError(f"expected {count} values, got {len(args)}")
    return [parse_float(a) for a in args]


def _read_face(args: List[str]) -> Face:
    if len(args) not in (3, 4):
        raise ValueError(f"face must have 3 or 4 corners, got {len(args)}")
    return Face(read_corner(a) for a in args)


def _read_lines(stream: Iterable[str], source: str):
    """Итерация по потоку с переводом ошибок чтения в StreamUnavailable."""
    it = iter(stream)
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise StreamUnavailable(source, exc) from exc
        yield line


# ----------------------------------------------------------------------
def parse(stream: Iterable[str], source: str = "<stream>") -> Model:
    """
    Прочитать поток строк OBJ и вернуть заполненный Model.

    Пустые строки и комментарии пропускаются. Неизвестные токены
    логируются и копятся в `model.unknown_tokens`, разбор продолжается.
    Битое числовое поле → ParseError с текстом строки; частичный Model
    наружу не отдаётся.
    """
    model = Model()

    for number, raw in enumerate(_read_lines(stream, source), start=1):
        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        fields = stripped.split()
        token, args = fields[0], fields[1:]
        kind = tokenize(token)

        if kind is Token.IGNORED:
            continue
        if kind is Token.UNKNOWN:
            warning = UnknownToken(token, number)
            model.unknown_tokens.append(warning)
            logger.warning(f"[Parser] {source}: {warning}")
            continue

        try:
            if kind is Token.VERTEX:
                model.positions.append(Position(*_read_floats(args, 3)))
            elif kind is Token.NORMAL:
                model.normals.append(Normal(*_read_floats(args, 3)))
            elif kind is Token.TEXCOORD:
                model.texcoords.append(TexCoord(*_read_floats(args, 2)))
            elif kind is Token.FACE:
                model.faces.append(_read_face(args))
        except ValueError as exc:
            raise ParseError(line, number, str(exc)) from exc

    logger.debug(f"[Parser] {source}: {model!r}")
    return model


def parse_file(path) -> Model:
    """Открыть файл (UTF‑8, BOM допускается) и разобрать его."""
    p = Path(path)
    try:
        f = p.open("r", encoding="utf-8-sig")
    except OSError as exc:
        raise StreamUnavailable(p, exc.strerror or exc) from exc
    with f:
        return parse(f, source=str(p))
