import pytest

from tdcompile.compiler import Compiler, main
from tdcompile.errors import ErrorKind, TopDownError
from tdcompile.source import SourceFile

EXAMPLE = "Title;\n\tA;\n\t\tA1;\n\tB;\n"
EXPECTED_OUTPUT = (
    "orden()contenido(Title);\n"
    "orden(1)contenido(A);\n"
    "orden(1.1)contenido(A1);\n"
    "orden(2)contenido(B);\n"
)


def _compiler(tmp_path, text):
    source = tmp_path / "topdown"
    source.write_bytes(text.encode("utf-8"))
    return Compiler(source, tmp_path / "topdown-formateado")


def test_compile_writes_formatted_outline(tmp_path, capsys):
    compiler = _compiler(tmp_path, EXAMPLE)
    outline = compiler.compile()
    assert (tmp_path / "topdown-formateado").read_text() == EXPECTED_OUTPUT
    assert len(outline) == len(EXAMPLE.splitlines())
    assert "[CompiladorTopDown]: Compilación Completa." in capsys.readouterr().out


def test_orders_have_parents_listed_first(tmp_path):
    text = "T;\n\ta;\n\t\tb;\n\t\tc;\n\t\t\td;\n\te;\n\t\tf;\n"
    outline = _compiler(tmp_path, text).compile()
    seen = set()
    for node in outline:
        if "." in node.order:
            assert node.order.rsplit(".", 1)[0] in seen
        seen.add(node.order)
    assert [node.content for node in outline] == ["T", "a", "b", "c", "d", "e", "f"]


def test_multiline_title(tmp_path):
    outline = _compiler(tmp_path, "Title\ncontinued;\n\tA;\n").compile()
    nodes = list(outline)
    assert nodes[0].content == "Title\ncontinued"
    assert nodes[1].content == "A"


def test_bad_indentation_raises(tmp_path):
    with pytest.raises(TopDownError) as info:
        _compiler(tmp_path, "Title;\nA;\n").compile()
    assert info.value.kind is ErrorKind.COMPILER_INDENT


def test_missing_source_raises(tmp_path):
    compiler = Compiler(tmp_path / "absent", tmp_path / "out")
    with pytest.raises(TopDownError) as info:
        compiler.compile()
    assert info.value.kind is ErrorKind.COMPILER_SOURCE


def test_empty_source_raises(tmp_path):
    with pytest.raises(TopDownError) as info:
        _compiler(tmp_path, "").compile()
    assert info.value.kind is ErrorKind.COMPILER_SOURCE


def test_count_children(tmp_path):
    compiler = _compiler(tmp_path, EXAMPLE)
    compiler.source = SourceFile.from_text(EXAMPLE)
    assert compiler.count_children(0) == 2
    assert compiler.count_children(3) == 0


def test_count_children_out_of_range(tmp_path):
    compiler = _compiler(tmp_path, EXAMPLE)
    compiler.source = SourceFile.from_text(EXAMPLE)
    with pytest.raises(TopDownError) as info:
        compiler.count_children(len(compiler.source))
    assert info.value.kind is ErrorKind.LINE_MISSING


def test_gather_content_beyond_end_is_empty(tmp_path):
    compiler = _compiler(tmp_path, EXAMPLE)
    compiler.source = SourceFile.from_text(EXAMPLE)
    assert compiler.gather_content(len(compiler.source) + 1, ";") == ""


def test_gather_content_skips_malformed_line(tmp_path, capsys):
    compiler = _compiler(tmp_path, "")
    compiler.source = SourceFile.from_text("Title;\n\tbad;;\n")
    assert compiler.gather_content(1, ";") == ""
    assert ErrorKind.LINE_MALFORMED.message in capsys.readouterr().err


def test_find_title_adds_root_node(tmp_path):
    compiler = _compiler(tmp_path, EXAMPLE)
    compiler.source = SourceFile.from_text(EXAMPLE)
    assert compiler.find_title() == "Title"
    nodes = list(compiler.outline)
    assert [(n.order, n.content) for n in nodes] == [("", "Title")]


def test_save_empty_outline_reports(tmp_path, capsys):
    compiler = _compiler(tmp_path, EXAMPLE)
    compiler.save()
    assert ErrorKind.OUTLINE_EMPTY.message in capsys.readouterr().err


def test_main_compiles_given_paths(tmp_path):
    source = tmp_path / "in"
    output = tmp_path / "out"
    source.write_text(EXAMPLE)
    assert main([str(source), str(output)]) == 0
    assert output.read_text() == EXPECTED_OUTPUT


def test_main_reports_failure(tmp_path, capsys):
    assert main([str(tmp_path / "absent"), str(tmp_path / "out")]) == 0
    err = capsys.readouterr().err
    assert ErrorKind.COMPILER_SOURCE.message in err
    assert not (tmp_path / "out").exists()