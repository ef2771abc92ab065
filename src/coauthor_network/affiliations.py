"""
Affiliation Parsing
===================

Split the Scopus "Authors with affiliations" field into author blocks.

The field lists one block per author, separated by ``;``. Each block is a
comma-separated run of tokens: surname, given name or initials, then
institution parts, with the country as the last token::

    Smith J., Dept. of Physics, MIT, Cambridge, United States; Lee K., KAIST, South Korea
"""

from typing import Callable, List, Optional

from coauthor_network.models import AuthorBlock

BLOCK_SEPARATOR = ";"
TOKEN_SEPARATOR = ","


def split_blocks(text: Optional[str]) -> List[str]:
    """Split affiliation text into trimmed, non-empty blocks."""
    if not text:
        return []
    return [b.strip() for b in text.split(BLOCK_SEPARATOR) if b.strip()]


def split_tokens(block: str) -> List[str]:
    """Split one block into trimmed, non-empty tokens."""
    return [t.strip() for t in block.split(TOKEN_SEPARATOR) if t.strip()]


def author_key(surname: str, given: str) -> str:
    return f"{surname}, {given}"


def parse_block(block: str) -> Optional[AuthorBlock]:
    """
    Parse a single author block.

    Returns None when the block has fewer than two tokens, since no author
    key can be built from it.
    """
    tokens = split_tokens(block)
    if len(tokens) < 2:
        return None
    return AuthorBlock(
        key=author_key(tokens[0], tokens[1]),
        country=tokens[-1],
        tokens=tuple(tokens),
    )


def parse_affiliations(
    text: Optional[str],
    on_skip: Optional[Callable[[str], None]] = None,
) -> List[AuthorBlock]:
    """
    Parse every valid block of an affiliation string, in order.

    Args:
        text: The "Authors with affiliations" field.
        on_skip: Called with each block that has fewer than two tokens.
    """
    blocks = []
    for raw in split_blocks(text):
        parsed = parse_block(raw)
        if parsed is not None:
            blocks.append(parsed)
        elif on_skip is not None:
            on_skip(raw)
    return blocks
