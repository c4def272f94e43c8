# tdcompile

`tdcompile` turns a top-down design written as an indented outline into a
flat list of numbered nodes.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Writing an outline

- The first node is the title and has no indentation.
- Every line after the title node must be indented with at least one tab
  or space. Each tab or space counts as one level.
- A node ends on the line that holds a `;`. A node may span several lines
  at the same indentation. The text of all its lines is joined together,
  and lines without a marker keep their newline.
- The text of a line stops at its first `;`, `{` or `}`. Any of these
  characters ends the node on that line.
- A node that is indented one level deeper than another node is its child.

Example outline:

    Make tea;
    	Boil water;
    	Brew;
    		Add leaves;

## Running

    tdcompile [SOURCE] [OUTPUT]

`SOURCE` defaults to `topdown` and `OUTPUT` defaults to `topdown-formateado`.
Both paths are relative to the current directory. The compiler prints its
progress to standard output. The result holds one node per line, and each
line shows the node's position in the tree:

    orden()contenido(Make tea);
    orden(1)contenido(Boil water);
    orden(2)contenido(Brew);
    orden(2.1)contenido(Add leaves);

The title has an empty order. Its children are numbered `1`, `2`, …, and
deeper nodes are numbered after their parent (`2.1`, `2.1.1`, …).

The compiler reports the problem on standard error and stops without
writing output when:

- the source cannot be opened,
- the source is empty,
- a line after the title is not indented.

The command always exits with status 0.

## Using it from Python

- `tdcompile.line.Line(text)` analyses one line of an outline.
  - It provides `indent`, `ends` and `well_written`.
  - `content()` returns the text before the marker.
  - `flag(char)` returns a line's flag for `;`, `{` or `}`.
- `tdcompile.source.SourceFile` holds a parsed outline.
  - Build one with `SourceFile.from_text(text)` or `SourceFile.read(path)`.
  - `len()` and `line`, `indent`, `content` and `flag` work per line.
  - `node_start(number)`, `node_count()` and `node_starts` tell where each
    node begins.
- `tdcompile.node.Node` is a dataclass with `order` and `content`.
  `serialize()` returns the formatted line.
- `tdcompile.node.Outline` collects nodes.
  - `add(order, content)` adds a node.
  - An outline can be iterated and measured with `len()`.
  - `save(path)` writes it in the formatted layout.
- `tdcompile.compiler.Compiler(source_path, output_path)` runs the stages:
  - `load`
  - `check_indentation`
  - `find_title`
  - `name_children`
  - `save`

  `compile()` runs all of them in order and returns the resulting
  `Outline`.
- `tdcompile.errors.TopDownError` is raised with an `ErrorKind` when
  something goes wrong. Its `message` gives the text of the error.

## Limitations

The `{` and `}` characters only end a line. They do not open or close
blocks, and `Line.flag` returns `False` for them.