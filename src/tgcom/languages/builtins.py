# topmark:header:start
#
#   project      : tgcom
#   file         : builtins.py
#   file_relpath : src/tgcom/languages/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Built-in language table.

One static table maps every supported language to its single-line comment marker
and file extensions. `tgcom.languages.registry` indexes it by name, alias, and
extension.

Exports:
    LANGUAGES: Concrete `Language` definitions grouped by marker family.
"""

from __future__ import annotations

from tgcom.languages.base import Language, PairedMarker, SimpleMarker

SLASH = SimpleMarker("//")
POUND = SimpleMarker("#")
DASH = SimpleMarker("--")
PERCENT = SimpleMarker("%")
HTML = PairedMarker("<!--", "-->")

LANGUAGES: list[Language] = [
    # // line comments
    Language(
        name="go",
        marker=SLASH,
        extensions=(".go",),
        aliases=("golang",),
        description="Go source files (*.go)",
    ),
    Language(
        name="javascript",
        marker=SLASH,
        extensions=(".js",),
        aliases=("js",),
        description="JavaScript source files (*.js)",
    ),
    Language(
        name="typescript",
        marker=SLASH,
        extensions=(".ts",),
        aliases=("ts",),
        description="TypeScript source files (*.ts)",
    ),
    Language(
        name="c",
        marker=SLASH,
        extensions=(".c", ".h"),
        description="C sources and headers (*.c, *.h)",
    ),
    Language(
        name="cpp",
        marker=SLASH,
        extensions=(".cpp", ".cc"),
        aliases=("c++",),
        description="C++ sources (*.cpp, *.cc)",
    ),
    Language(
        name="java",
        marker=SLASH,
        extensions=(".java",),
        description="Java source files (*.java)",
    ),
    Language(
        name="php",
        marker=SLASH,
        extensions=(".php",),
        description="PHP scripts (*.php)",
    ),
    Language(
        name="swift",
        marker=SLASH,
        extensions=(".swift",),
        description="Swift source files (*.swift)",
    ),
    Language(
        name="kotlin",
        marker=SLASH,
        extensions=(".kt", ".kts"),
        description="Kotlin sources and scripts (*.kt, *.kts)",
    ),
    Language(
        name="rust",
        marker=SLASH,
        extensions=(".rs",),
        description="Rust source files (*.rs)",
    ),
    Language(
        name="scala",
        marker=SLASH,
        extensions=(".scala",),
        description="Scala source files (*.scala)",
    ),
    Language(
        name="dart",
        marker=SLASH,
        extensions=(".dart",),
        description="Dart source files (*.dart)",
    ),
    Language(
        name="objective-c",
        marker=SLASH,
        extensions=(".mm",),
        aliases=("objc",),
        description="Objective-C++ source files (*.mm)",
    ),
    Language(
        name="verilog",
        marker=SLASH,
        extensions=(".v", ".sv"),
        aliases=("systemverilog",),
        description="Verilog/SystemVerilog sources (*.v, *.sv)",
    ),
    # # line comments
    Language(
        name="bash",
        marker=POUND,
        extensions=(".sh", ".bash"),
        aliases=("sh", "shell"),
        description="POSIX/Bash shell scripts (*.sh, *.bash)",
    ),
    Language(
        name="python",
        marker=POUND,
        extensions=(".py",),
        aliases=("py",),
        description="Python source files (*.py)",
    ),
    Language(
        name="ruby",
        marker=POUND,
        extensions=(".rb",),
        description="Ruby source files (*.rb)",
    ),
    Language(
        name="perl",
        marker=POUND,
        extensions=(".pl",),
        description="Perl scripts (*.pl)",
    ),
    Language(
        name="r",
        marker=POUND,
        extensions=(".R",),
        description="R scripts (*.R)",
    ),
    Language(
        name="elixir",
        marker=POUND,
        extensions=(".ex", ".exs"),
        description="Elixir sources and scripts (*.ex, *.exs)",
    ),
    # -- line comments
    Language(
        name="haskell",
        marker=DASH,
        extensions=(".hs",),
        description="Haskell source files (*.hs)",
    ),
    Language(
        name="sql",
        marker=DASH,
        extensions=(".sql",),
        description="SQL scripts (*.sql)",
    ),
    Language(
        name="lua",
        marker=DASH,
        extensions=(".lua",),
        description="Lua scripts (*.lua)",
    ),
    Language(
        name="vhdl",
        marker=DASH,
        extensions=(".vhd", ".vhdl"),
        description="VHDL sources (*.vhd, *.vhdl)",
    ),
    # % line comments
    Language(
        name="matlab",
        marker=PERCENT,
        extensions=(".m",),
        description="MATLAB scripts (*.m)",
    ),
    Language(
        name="erlang",
        marker=PERCENT,
        extensions=(".erl",),
        description="Erlang source files (*.erl)",
    ),
    # <!-- --> paired delimiters
    Language(
        name="html",
        marker=HTML,
        extensions=(".html",),
        aliases=("htm",),
        description="HTML documents (*.html)",
    ),
]
