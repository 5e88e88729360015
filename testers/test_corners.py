# -*- coding: utf-8 -*-
import logging

from objmesh.mesh import Vertex, build, find_corner_vertices, log_corner_report
from objmesh.mesh.corners import CornerReport

# центр первым, затем по одной вершине в каждом углу uv‑квадрата
FAN_AROUND_CENTER = """
    v 0.5 0.5 0
    v 0 0 0
    v 1 0 0
    v 1 1 0
    v 0 1 0
    vt 0.5 0.5
    vt 0 0
    vt 1 0
    vt 1 1
    vt 0 1
    f 1/1 2/2 3/3
    f 1/1 4/4 5/5
"""


def test_all_four_corners_found(parse_text):
    buffer, report = build(parse_text(FAN_AROUND_CENTER), diagnostics=True)
    assert report.all_found
    assert report.missing == []
    assert report["min_u_min_v"].texcoord == (0.0, 0.0)
    assert report["min_u_max_v"].texcoord == (0.0, 1.0)
    assert report["max_u_min_v"].texcoord == (1.0, 0.0)
    assert report["max_u_max_v"].texcoord == (1.0, 1.0)
    assert report["max_u_max_v"].position == (1.0, 1.0, 0.0)


def test_searches_require_strict_improvement_on_both_axes(parse_text):
    # Квадрат одной гранью: первая вершина (0,0) «забирает» три поиска,
    # и ни одна следующая не лучше её сразу по обеим осям.
    model = parse_text("""
        v 0 0 0
        v 1 0 0
        v 1 1 0
        v 0 1 0
        vt 0 0
        vt 1 0
        vt 1 1
        vt 0 1
        f 1/1 2/2 3/3 4/4
    """)
    _, report = build(model, diagnostics=True)
    assert report["min_u_min_v"].texcoord == (0.0, 0.0)
    assert report["min_u_max_v"].texcoord == (0.0, 0.0)
    assert report["max_u_min_v"].texcoord == (0.0, 0.0)
    assert report["max_u_max_v"].texcoord == (1.0, 1.0)


def test_first_of_equal_candidates_wins():
    a = Vertex((0, 0, 0), texcoord=(0.0, 0.0))
    b = Vertex((9, 9, 9), texcoord=(0.0, 0.0))
    report = find_corner_vertices([a, b])
    assert report["min_u_min_v"].position == (0, 0, 0)


def test_no_vertices_means_every_search_fails():
    report = find_corner_vertices([])
    assert not report.all_found
    assert sorted(report.missing) == sorted(
        ["min_u_min_v", "min_u_max_v", "max_u_min_v", "max_u_max_v"]
    )


def test_nan_texcoords_never_qualify():
    report = find_corner_vertices([Vertex((0, 0, 0), texcoord=(float("nan"), 0.0))])
    assert not report.found("min_u_min_v")


def test_diagnostics_do_not_change_the_buffer(parse_text):
    model = parse_text(FAN_AROUND_CENTER)
    plain, none = build(model)
    checked, report = build(model, diagnostics=True)
    assert none is None
    assert report is not None
    assert plain.vertices == checked.vertices


def test_report_logging(caplog):
    caplog.set_level(logging.INFO, logger="objmesh")
    found = Vertex((1, 2, 3), texcoord=(0.0, 1.0))
    report = CornerReport({
        "min_u_min_v": None,
        "min_u_max_v": found,
        "max_u_min_v": None,
        "max_u_max_v": None,
    })
    log_corner_report(report, "dome")

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 3
    assert "could not find min_u_min_v" in caplog.text
    assert "[Corners] dome: min_u_max_v: position=(1.0, 2.0, 3.0) uv=(0.0, 1.0)" in caplog.text
