# src/svg_sanitizer/color/css.py
"""
Declaration-level tokenizer for inline 'style' attributes and stylesheet text.

Values are only replaced for exact property names; everything else (other
declarations, separators, whitespace, comments) is kept byte-identical.
Comments are opaque: a ';', '{' or '}' inside '/* ... */' never splits a
declaration or a rule body, and comments around a declaration are carried
in its leading/trailing whitespace.
"""
import re
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

STYLE_COLOR_PROPERTIES = ("fill", "stroke")
CSS_COLOR_PROPERTIES = ("fill", "stroke", "color", "background-color")

# A comment ends at its first '*/'; an unterminated one runs to the end of the text.
COMMENT = r'/\*(?:[^*]|\*(?!/))*(?:\*/|\Z)'

SEPARATOR_RE = re.compile(COMMENT + r'|;', re.DOTALL)

# name : value, with the surrounding whitespace and comments kept in separate groups
DECLARATION_RE = re.compile(
    r'^(?P<lead>(?:\s|' + COMMENT + r')*)(?P<name>[-\w]+)(?P<sep>\s*:\s*)'
    r'(?P<value>.*?)(?P<trail>(?:\s|' + COMMENT + r')*)$',
    re.DOTALL
)
IMPORTANT_RE = re.compile(r'\s*!\s*important$', re.IGNORECASE)

# Either a top-level comment (left alone) or an innermost '{...}' rule body.
BLOCK_RE = re.compile(
    r'(?P<comment>' + COMMENT + r')|\{(?P<body>(?:' + COMMENT + r'|[^{}/]|/(?!\*))*)\}',
    re.DOTALL
)

ValueMapper = Callable[[str], Optional[str]]


def split_declarations(text: str) -> List[str]:
    """Splits a declaration list on the ';' separators outside comments."""
    chunks: List[str] = []
    start = 0
    for match in SEPARATOR_RE.finditer(text):
        if match.group() == ";":
            chunks.append(text[start:match.start()])
            start = match.end()
    chunks.append(text[start:])
    return chunks


def _split_value(value: str) -> Tuple[str, str]:
    """Splits 'red !important' into ('red', ' !important')."""
    match = IMPORTANT_RE.search(value)
    if not match:
        return value, ""
    return value[:match.start()], value[match.start():]


def iter_declaration_values(text: str, properties: Iterable[str]) -> Iterator[str]:
    """Yields the trimmed values of the given properties in a declaration list."""
    wanted = {p.lower() for p in properties}
    for chunk in split_declarations(text):
        match = DECLARATION_RE.match(chunk)
        if match and match.group("name").lower() in wanted:
            color, _ = _split_value(match.group("value"))
            color = color.strip()
            if color:
                yield color


def rewrite_declarations(text: str, properties: Iterable[str], mapper: ValueMapper) -> str:
    """
    Rewrites the values of the given properties in a ';'-separated declaration list.

    Args:
        text (str): e.g. 'fill: #f00; stroke-width: 2'.
        properties (Iterable[str]): Property names to rewrite (case-insensitive).
        mapper (ValueMapper): Receives the trimmed value; returns the replacement
                              or None to keep the declaration unchanged.
    """
    wanted = {p.lower() for p in properties}
    chunks: List[str] = []
    for chunk in split_declarations(text):
        match = DECLARATION_RE.match(chunk)
        if not match or match.group("name").lower() not in wanted:
            chunks.append(chunk)
            continue

        color, important = _split_value(match.group("value"))
        color = color.strip()
        if not color or color.lower() == "none":
            chunks.append(chunk)
            continue

        replacement = mapper(color)
        if replacement is None or replacement == color:
            chunks.append(chunk)
            continue

        chunks.append(
            match.group("lead") + match.group("name") + match.group("sep")
            + replacement + important + match.group("trail")
        )
    return ";".join(chunks)


def iter_stylesheet_values(css: str, properties: Iterable[str]) -> Iterator[str]:
    """Yields the values of the given properties from every rule body in a stylesheet."""
    props = tuple(properties)
    for block in BLOCK_RE.finditer(css):
        if block.group("body") is not None:
            yield from iter_declaration_values(block.group("body"), props)


def rewrite_stylesheet(css: str, properties: Iterable[str], mapper: ValueMapper) -> str:
    """Applies rewrite_declarations to the body of every innermost '{...}' block."""
    props = tuple(properties)

    def _rewrite_block(block):
        if block.group("body") is None:
            return block.group()
        return "{" + rewrite_declarations(block.group("body"), props, mapper) + "}"

    return BLOCK_RE.sub(_rewrite_block, css)
