"""memodiff - render text changes as an accessible HTML review document.

memodiff compares two text files with diff-match-patch and renders the
result as one self-contained HTML page. Insertions and deletions are
highlighted inline, every change is reachable with the keyboard in reading
order, and deleted text stays visible but inert.

Key Features
------------
- Character-level diff with semantic cleanup
- Inline highlighting with visible line-break markers
- Keyboard navigation through all changes via a shared tab order
- Self-contained output: no external stylesheet, font or icon requests
- Alternative path that post-processes ``diff_prettyHtml`` markup

Requirements
------------
- Python 3.10+
- beautifulsoup4, diff-match-patch, rich

Examples
--------
Compare two files and write the review page next to the revised file:

    >>> from memodiff import write_diff
    >>> write_diff("draft_v1.txt", "draft_v2.txt")
    PosixPath('draft_v2_diff_from_draft_v1.html')

Render a document from two strings:

    >>> from memodiff import diff_texts
    >>> html = diff_texts("cat\\n", "car\\n", title="'a.txt'→'b.txt'")

"""

from memodiff.diff import (
    DiffKind,
    DiffOperation,
    compare_files,
    compute_diff,
    derive_output_path,
    diff_texts,
    make_title,
    render_diff,
    write_diff,
)
from memodiff.exceptions import MemodiffError
from memodiff.options import DiffHtmlOptions

__version__ = "0.1.0"

__all__ = [
    "DiffHtmlOptions",
    "DiffKind",
    "DiffOperation",
    "MemodiffError",
    "__version__",
    "compare_files",
    "compute_diff",
    "derive_output_path",
    "diff_texts",
    "make_title",
    "render_diff",
    "write_diff",
]
