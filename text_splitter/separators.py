"""
Separator handling: splitting on a literal separator and the static
separator tables used by the recursive strategy.

Every table is ordered most-structural first and ends with the empty
string, which splits into single characters and is the guaranteed
fallback of the recursive strategy.
"""

import re
from enum import Enum
from typing import Union

from .exceptions import UnsupportedLanguageError

DEFAULT_SEPARATORS = ["\n\n", "\n", " ", ""]


def split_on_separator(text: str, separator: str, keep_separator: bool) -> list[str]:
    """
    Split text on a literal separator, discarding empty fragments.

    With keep_separator, each fragment keeps the separator occurrence that
    introduces it ("a\\nb" on "\\n" gives ["a", "\\nb"]). The empty
    separator splits into characters.
    """
    if separator:
        if keep_separator:
            splits = re.split(f"(?={re.escape(separator)})", text)
        else:
            splits = text.split(separator)
    else:
        splits = list(text)
    return [s for s in splits if s != ""]


class Language(str, Enum):
    """Languages with a built-in separator table."""
    CPP = "cpp"
    GO = "go"
    JAVA = "java"
    JS = "js"
    PHP = "php"
    PROTO = "proto"
    PYTHON = "python"
    RST = "rst"
    RUBY = "ruby"
    RUST = "rust"
    SCALA = "scala"
    SWIFT = "swift"
    MARKDOWN = "markdown"
    LATEX = "latex"
    HTML = "html"
    SOL = "sol"


# Line-level fallback shared by the code and markup tables.
_LINES = ["\n\n", "\n", " ", ""]

_SEPARATORS: dict[Language, list[str]] = {
    Language.CPP: [
        # Class definitions
        "\nclass ",
        # Function definitions
        "\nvoid ", "\nint ", "\nfloat ", "\ndouble ",
        # Control flow
        "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ",
        *_LINES,
    ],
    Language.GO: [
        "\nfunc ", "\nvar ", "\nconst ", "\ntype ",
        "\nif ", "\nfor ", "\nswitch ", "\ncase ",
        *_LINES,
    ],
    Language.JAVA: [
        "\nclass ",
        # Method definitions
        "\npublic ", "\nprotected ", "\nprivate ", "\nstatic ",
        "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ",
        *_LINES,
    ],
    Language.JS: [
        "\nfunction ", "\nconst ", "\nlet ", "\nvar ", "\nclass ",
        "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ", "\ndefault ",
        *_LINES,
    ],
    Language.PHP: [
        "\nfunction ", "\nclass ",
        "\nif ", "\nforeach ", "\nwhile ", "\ndo ", "\nswitch ", "\ncase ",
        *_LINES,
    ],
    Language.PROTO: [
        "\nmessage ", "\nservice ", "\nenum ", "\noption ", "\nimport ",
        "\nsyntax ",
        *_LINES,
    ],
    Language.PYTHON: [
        "\nclass ", "\ndef ", "\n\tdef ",
        *_LINES,
    ],
    Language.RST: [
        # Section titles
        "\n===\n", "\n---\n", "\n***\n",
        # Directives
        "\n.. ",
        *_LINES,
    ],
    Language.RUBY: [
        "\ndef ", "\nclass ",
        "\nif ", "\nunless ", "\nwhile ", "\nfor ", "\ndo ", "\nbegin ",
        "\nrescue ",
        *_LINES,
    ],
    Language.RUST: [
        "\nfn ", "\nconst ", "\nlet ",
        "\nif ", "\nwhile ", "\nfor ", "\nloop ", "\nmatch ", "\nconst ",
        *_LINES,
    ],
    Language.SCALA: [
        "\nclass ", "\nobject ",
        "\ndef ", "\nval ", "\nvar ",
        "\nif ", "\nfor ", "\nwhile ", "\nmatch ", "\ncase ",
        *_LINES,
    ],
    Language.SWIFT: [
        "\nfunc ",
        "\nclass ", "\nstruct ", "\nenum ",
        "\nif ", "\nfor ", "\nwhile ", "\ndo ", "\nswitch ", "\ncase ",
        *_LINES,
    ],
    Language.MARKDOWN: [
        # Headings, starting with level 2. Setext headings are not handled.
        "\n## ", "\n### ", "\n#### ", "\n##### ", "\n###### ",
        # End of code block
        "```\n\n",
        # Horizontal rules (exactly three characters)
        "\n\n***\n\n", "\n\n---\n\n", "\n\n___\n\n",
        *_LINES,
    ],
    Language.LATEX: [
        # Sectioning
        "\n\\chapter{", "\n\\section{", "\n\\subsection{",
        "\n\\subsubsection{",
        # Environments
        "\n\\begin{enumerate}", "\n\\begin{itemize}",
        "\n\\begin{description}", "\n\\begin{list}", "\n\\begin{quote}",
        "\n\\begin{quotation}", "\n\\begin{verse}", "\n\\begin{verbatim}",
        # Math
        "\n\\begin{align}", "$$", "$",
        *_LINES,
    ],
    Language.HTML: [
        "<body>", "<div>", "<p>", "<br>", "<li>",
        "<h1>", "<h2>", "<h3>", "<h4>", "<h5>", "<h6>",
        "<span>", "<table>", "<tr>", "<td>", "<th>", "<ul>", "<ol>",
        "<header>", "<footer>", "<nav>",
        # Head
        "<head>", "<style>", "<script>", "<meta>", "<title>",
        " ", "",
    ],
    Language.SOL: [
        # Compiler information
        "\npragma ", "\nusing ",
        # Contracts
        "\ncontract ", "\ninterface ", "\nlibrary ",
        # Members
        "\nconstructor ", "\ntype ", "\nfunction ", "\nevent ",
        "\nmodifier ", "\nerror ", "\nstruct ", "\nenum ",
        # Control flow
        "\nif ", "\nfor ", "\nwhile ", "\ndo while ", "\nassembly ",
        *_LINES,
    ],
}


def get_separators_for_language(language: Union[Language, str]) -> list[str]:
    """
    Return the separator list for a language tag.

    Raises:
        UnsupportedLanguageError: If no table exists for the tag.
    """
    try:
        key = Language(language)
    except ValueError:
        raise UnsupportedLanguageError(str(language)) from None
    return list(_SEPARATORS[key])
