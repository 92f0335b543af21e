from types import SimpleNamespace
from uuid import uuid4

from certifica.services.catalog import (
    FALLBACK_THEME,
    REMOVED_COURSE_NAME,
    build_summary,
    course_name_for,
    filter_students,
    issuance_stats,
    resolve_theme,
)


def _course(name, theme_id=None):
    return SimpleNamespace(id=uuid4(), name=name, theme_id=theme_id)


def _student(name, course, cpf="111.222.333-44", status="PENDENTE"):
    course_id = course.id if hasattr(course, "id") else course
    return SimpleNamespace(id=uuid4(), name=name, cpf=cpf, course_id=course_id, status=status)


def _theme(theme_id, primary="#111111"):
    return SimpleNamespace(id=theme_id, name=theme_id, primary_color=primary,
                           accent_color="#222222", ribbon_color="#333333")


# =============================================
# SEARCH
# =============================================

def test_search_matches_name_cpf_and_course():
    basic = _course("Curso Básico")
    silva_course = _course("Curso Silva Avançado")
    ana = _student("Ana Silva", basic)
    joao = _student("João Pereira", basic, cpf="987.654.321-00")
    carla = _student("Carla Dias", silva_course)

    result = filter_students([ana, joao, carla], [basic, silva_course], "silva")

    assert result == [ana, carla]


def test_search_is_case_insensitive_and_matches_cpf_digits():
    course = _course("ELETRICISTA")
    a = _student("PEDRO", course, cpf="123.456.789-09")
    b = _student("PAULA", course, cpf="000.111.222-33")

    assert filter_students([a, b], [course], "456.789") == [a]
    assert filter_students([a, b], [course], "eletri") == [a, b]
    assert filter_students([a, b], [course], "PaUlA") == [b]


def test_empty_search_returns_everything_in_order():
    course = _course("X")
    students = [_student(f"S{i}", course) for i in range(5)]
    assert filter_students(students, [course], "") == students
    assert filter_students(students, [course], None) == students
    assert filter_students(students, [course], "   ") == students


def test_search_ignores_removed_course_label():
    orphan = _student("Sem Curso", uuid4())
    assert filter_students([orphan], [], "removido") == []
    assert filter_students([orphan], [], "sem curso") == [orphan]


def test_course_name_for():
    course = _course("SOLDA")
    assert course_name_for(_student("A", course), [course]) == "SOLDA"
    assert course_name_for(_student("B", uuid4()), [course]) == REMOVED_COURSE_NAME


# =============================================
# ISSUANCE STATS
# =============================================

def test_issuance_stats_sorted_descending():
    a, b, c = _course("A"), _course("B"), _course("C")
    students = (
        [_student("a", a, status="EMITIDO") for _ in range(3)]
        + [_student("b", b, status="EMITIDO") for _ in range(5)]
        + [_student("pending", c), _student("pending", a)]
    )

    stats = issuance_stats([a, b, c], students)

    assert [s.course_name for s in stats] == ["B", "A", "C"]
    assert [s.count for s in stats] == [5, 3, 0]


def test_issuance_stats_ties_keep_course_order():
    a, b, c = _course("A"), _course("B"), _course("C")
    students = [_student("x", c, status="EMITIDO"), _student("y", a, status="EMITIDO")]

    stats = issuance_stats([a, b, c], students)

    assert [s.course_name for s in stats] == ["A", "C", "B"]


def test_summary_totals():
    a, b = _course("A"), _course("B")
    students = [_student("1", a, status="EMITIDO"), _student("2", a), _student("3", b, status="EMITIDO")]

    summary = build_summary([a, b], students)

    assert summary.total_courses == 2
    assert summary.total_students == 3
    assert summary.total_issued == 2
    assert [s.count for s in summary.course_stats] == [1, 1]


# =============================================
# THEME RESOLUTION
# =============================================

def test_resolve_theme_exact_match():
    themes = [_theme("blue", "#0000ff"), _theme("green", "#00ff00")]
    assert resolve_theme("green", themes).primary_color == "#00ff00"


def test_resolve_theme_deleted_falls_back_to_first():
    themes = [_theme("blue", "#0000ff"), _theme("green", "#00ff00")]
    assert resolve_theme("deleted", themes).id == "blue"
    assert resolve_theme(None, themes).id == "blue"


def test_resolve_theme_empty_list_uses_fallback():
    theme = resolve_theme("anything", [])
    assert theme == FALLBACK_THEME
    assert (theme.primary_color, theme.accent_color, theme.ribbon_color) == ("#0f172a", "#e67e00", "#f59e0b")
