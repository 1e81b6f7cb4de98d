"""The Markdown syntax tree: node values, source positions and tree nodes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Tuple


class TableAlignment(enum.Enum):
    """Alignment of a single table cell."""

    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    def xml_name(self) -> Optional[str]:
        """Name used in XML output, or None for unaligned cells."""
        if self is TableAlignment.NONE:
            return None
        return self.value


class ListType(enum.Enum):
    """The kind of list."""

    BULLET = "bullet"
    ORDERED = "ordered"


class ListDelimType(enum.Enum):
    """The delimiter after each number of an ordered list."""

    PERIOD = "period"
    PAREN = "paren"

    def xml_name(self) -> str:
        """Name used in XML output."""
        return self.value


@dataclass
class NodeCode:
    """An inline code span."""

    num_backticks: int = 0
    literal: str = ""


@dataclass
class NodeLink:
    """A link destination or image source, with optional title."""

    url: str = ""
    title: str = ""


@dataclass
class NodeList:
    """Metadata of a list or list item."""

    list_type: ListType = ListType.BULLET
    marker_offset: int = 0
    padding: int = 0
    start: int = 0
    delimiter: ListDelimType = ListDelimType.PERIOD
    bullet_char: str = ""
    tight: bool = False


@dataclass
class NodeDescriptionItem:
    """Metadata of a description list item."""

    marker_offset: int = 0
    padding: int = 0


@dataclass
class NodeCodeBlock:
    """Metadata and contents of a fenced or indented code block."""

    fenced: bool = False
    fence_char: str = ""
    fence_length: int = 0
    fence_offset: int = 0
    info: str = ""
    literal: str = ""


@dataclass
class NodeHeading:
    """Metadata of a heading."""

    level: int = 0
    setext: bool = False


@dataclass
class NodeHtmlBlock:
    """Metadata and contents of an HTML block."""

    block_type: int = 0
    literal: str = ""


@dataclass
class NodeFootnoteDefinition:
    """Metadata of a footnote definition."""

    name: str = ""
    total_references: int = 0


@dataclass
class NodeFootnoteReference:
    """Metadata of a footnote reference."""

    name: str = ""
    ref_num: int = 0
    ix: int = 0


class NodeKind(enum.Enum):
    """Every kind of node, carrying its XML element name."""

    DOCUMENT = "document"
    FRONT_MATTER = "frontmatter"
    BLOCK_QUOTE = "block_quote"
    LIST = "list"
    ITEM = "item"
    DESCRIPTION_LIST = "description_list"
    DESCRIPTION_ITEM = "description_item"
    DESCRIPTION_TERM = "description_term"
    DESCRIPTION_DETAILS = "description_details"
    CODE_BLOCK = "code_block"
    HTML_BLOCK = "html_block"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    THEMATIC_BREAK = "thematic_break"
    FOOTNOTE_DEFINITION = "footnote_definition"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    TEXT = "text"
    TASK_ITEM = "taskitem"
    SOFT_BREAK = "softbreak"
    LINE_BREAK = "linebreak"
    CODE = "code"
    HTML_INLINE = "html_inline"
    EMPH = "emph"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    SUPERSCRIPT = "superscript"
    LINK = "link"
    IMAGE = "image"
    FOOTNOTE_REFERENCE = "footnote_reference"


_BLOCK_KINDS = frozenset(
    {
        NodeKind.DOCUMENT,
        NodeKind.BLOCK_QUOTE,
        NodeKind.FOOTNOTE_DEFINITION,
        NodeKind.LIST,
        NodeKind.DESCRIPTION_LIST,
        NodeKind.DESCRIPTION_ITEM,
        NodeKind.DESCRIPTION_TERM,
        NodeKind.DESCRIPTION_DETAILS,
        NodeKind.ITEM,
        NodeKind.CODE_BLOCK,
        NodeKind.HTML_BLOCK,
        NodeKind.PARAGRAPH,
        NodeKind.HEADING,
        NodeKind.THEMATIC_BREAK,
        NodeKind.TABLE,
        NodeKind.TABLE_ROW,
        NodeKind.TABLE_CELL,
        NodeKind.TASK_ITEM,
    }
)

_INLINE_CONTAINERS = frozenset({NodeKind.PARAGRAPH, NodeKind.HEADING, NodeKind.TABLE_CELL})

_LINE_ACCEPTORS = frozenset({NodeKind.PARAGRAPH, NodeKind.HEADING, NodeKind.CODE_BLOCK})

_TABLE_CELL_CHILDREN = frozenset(
    {
        NodeKind.TEXT,
        NodeKind.CODE,
        NodeKind.EMPH,
        NodeKind.STRONG,
        NodeKind.LINK,
        NodeKind.IMAGE,
        NodeKind.STRIKETHROUGH,
        NodeKind.HTML_INLINE,
    }
)


@dataclass
class NodeValue:
    """A node's kind together with the data that kind carries.

    The data is a string for text, front matter and inline HTML; a
    ``NodeList`` for lists and items; a list of ``TableAlignment`` for
    tables; a bool (header row) for table rows; the check character or
    None for task items; and the matching ``Node*`` record otherwise.
    """

    kind: NodeKind
    data: Any = None

    def is_block(self) -> bool:
        """Whether this is a block node rather than an inline."""
        return self.kind in _BLOCK_KINDS

    def contains_inlines(self) -> bool:
        """Whether nodes of this kind hold inline children."""
        return self.kind in _INLINE_CONTAINERS

    def text(self) -> Optional[str]:
        """The text of a ``TEXT`` node, or None for any other kind."""
        if self.kind is NodeKind.TEXT:
            return self.data
        return None

    def set_text(self, text: str) -> None:
        """Replace the text of a ``TEXT`` node."""
        if self.kind is not NodeKind.TEXT:
            raise TypeError(f"{self.kind.name} node carries no text")
        self.data = text

    def accepts_lines(self) -> bool:
        """Whether the block parser feeds raw lines into this node."""
        return self.kind in _LINE_ACCEPTORS

    def xml_node_name(self) -> str:
        """Element name of this node in XML output."""
        return self.kind.value


@dataclass(frozen=True, order=True)
class LineColumn:
    """A 1-based line and column position."""

    line: int
    column: int

    def column_add(self, offset: int) -> LineColumn:
        """A copy with the column moved by ``offset``."""
        column = self.column + offset
        if column < 0:
            raise ValueError(f"column {self.column} moved by {offset} is negative")
        return LineColumn(self.line, column)


@dataclass(order=True)
class Sourcepos:
    """The span of the source a node was parsed from."""

    start: LineColumn
    end: LineColumn

    @classmethod
    def from_tuple(cls, values: Tuple[int, int, int, int]) -> Sourcepos:
        """Build from ``(start_line, start_column, end_line, end_column)``."""
        start_line, start_column, end_line, end_column = values
        return cls(LineColumn(start_line, start_column), LineColumn(end_line, end_column))

    def __str__(self) -> str:
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


class AstNode:
    """A node of the syntax tree, linked to its parent and siblings."""

    def __init__(
        self,
        value: NodeValue,
        sourcepos: Optional[Sourcepos] = None,
        open: bool = True,
    ) -> None:
        self.value = value
        self.sourcepos = sourcepos if sourcepos is not None else Sourcepos.from_tuple((1, 1, 1, 0))
        self.internal_offset = 0
        self.content = ""
        self.open = open
        self.last_line_blank = False
        self.table_visited = False
        self.parent: Optional[AstNode] = None
        self.first_child: Optional[AstNode] = None
        self.last_child: Optional[AstNode] = None
        self.previous_sibling: Optional[AstNode] = None
        self.next_sibling: Optional[AstNode] = None

    def __repr__(self) -> str:
        return f"AstNode({self.value!r}, {self.sourcepos})"

    def detach(self) -> None:
        """Unlink this node (with its subtree) from its parent and siblings."""
        parent, prev, nxt = self.parent, self.previous_sibling, self.next_sibling
        self.parent = self.previous_sibling = self.next_sibling = None
        if nxt is not None:
            nxt.previous_sibling = prev
        elif parent is not None:
            parent.last_child = prev
        if prev is not None:
            prev.next_sibling = nxt
        elif parent is not None:
            parent.first_child = nxt

    def append(self, child: AstNode) -> None:
        """Make ``child`` the last child of this node."""
        child.detach()
        child.parent = self
        last = self.last_child
        if last is not None:
            child.previous_sibling = last
            last.next_sibling = child
        else:
            self.first_child = child
        self.last_child = child

    def prepend(self, child: AstNode) -> None:
        """Make ``child`` the first child of this node."""
        child.detach()
        child.parent = self
        first = self.first_child
        if first is not None:
            child.next_sibling = first
            first.previous_sibling = child
        else:
            self.last_child = child
        self.first_child = child

    def insert_after(self, sibling: AstNode) -> None:
        """Place ``sibling`` directly after this node."""
        sibling.detach()
        sibling.parent = self.parent
        sibling.previous_sibling = self
        nxt = self.next_sibling
        if nxt is not None:
            nxt.previous_sibling = sibling
            sibling.next_sibling = nxt
        elif self.parent is not None:
            self.parent.last_child = sibling
        self.next_sibling = sibling

    def insert_before(self, sibling: AstNode) -> None:
        """Place ``sibling`` directly before this node."""
        sibling.detach()
        sibling.parent = self.parent
        sibling.next_sibling = self
        prev = self.previous_sibling
        if prev is not None:
            prev.next_sibling = sibling
            sibling.previous_sibling = prev
        elif self.parent is not None:
            self.parent.first_child = sibling
        self.previous_sibling = sibling

    def children(self) -> Iterator[AstNode]:
        """Iterate over the direct children in order."""
        node = self.first_child
        while node is not None:
            nxt = node.next_sibling
            yield node
            node = nxt

    def following_siblings(self) -> Iterator[AstNode]:
        """Iterate over this node and the siblings after it."""
        node: Optional[AstNode] = self
        while node is not None:
            nxt = node.next_sibling
            yield node
            node = nxt

    def ancestors(self) -> Iterator[AstNode]:
        """Iterate over this node and its ancestors, innermost first."""
        node: Optional[AstNode] = self
        while node is not None:
            yield node
            node = node.parent

    def descendants(self) -> Iterator[AstNode]:
        """Iterate over this node and its whole subtree in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node.children())))


def make_inline(value: NodeValue, sourcepos: Sourcepos) -> AstNode:
    """Create a closed inline node."""
    return AstNode(value, sourcepos, open=False)


def last_child_is_open(node: AstNode) -> bool:
    """Whether the node's last child exists and is still open."""
    return node.last_child is not None and node.last_child.open


def can_contain_type(node: AstNode, child: NodeValue) -> bool:
    """Whether ``node`` may contain a node with value ``child``."""
    if child.kind is NodeKind.DOCUMENT:
        return False
    if child.kind is NodeKind.FRONT_MATTER:
        return node.value.kind is NodeKind.DOCUMENT

    kind = node.value.kind
    if kind in (
        NodeKind.DOCUMENT,
        NodeKind.BLOCK_QUOTE,
        NodeKind.FOOTNOTE_DEFINITION,
        NodeKind.DESCRIPTION_TERM,
        NodeKind.DESCRIPTION_DETAILS,
        NodeKind.ITEM,
        NodeKind.TASK_ITEM,
    ):
        return child.is_block() and child.kind not in (NodeKind.ITEM, NodeKind.TASK_ITEM)
    if kind is NodeKind.LIST:
        return child.kind in (NodeKind.ITEM, NodeKind.TASK_ITEM)
    if kind is NodeKind.DESCRIPTION_LIST:
        return child.kind is NodeKind.DESCRIPTION_ITEM
    if kind is NodeKind.DESCRIPTION_ITEM:
        return child.kind in (NodeKind.DESCRIPTION_TERM, NodeKind.DESCRIPTION_DETAILS)
    if kind in (
        NodeKind.PARAGRAPH,
        NodeKind.HEADING,
        NodeKind.EMPH,
        NodeKind.STRONG,
        NodeKind.LINK,
        NodeKind.IMAGE,
    ):
        return not child.is_block()
    if kind is NodeKind.TABLE:
        return child.kind is NodeKind.TABLE_ROW
    if kind is NodeKind.TABLE_ROW:
        return child.kind is NodeKind.TABLE_CELL
    if kind is NodeKind.TABLE_CELL:
        return child.kind in _TABLE_CELL_CHILDREN
    return False


def ends_with_blank_line(node: AstNode) -> bool:
    """Whether the node, or its trailing list/item descendants, ends in a blank line."""
    current: Optional[AstNode] = node
    while current is not None:
        if current.last_line_blank:
            return True
        if current.value.kind in (NodeKind.LIST, NodeKind.ITEM, NodeKind.TASK_ITEM):
            current = current.last_child
        else:
            current = None
    return False


def containing_block(node: AstNode) -> Optional[AstNode]:
    """The nearest block node among the node and its ancestors."""
    return next((n for n in node.ancestors() if n.value.is_block()), None)