"""Best-effort CSS rule extraction.

This is a brace-aware scanner, not a CSS grammar: it finds style rules
(selector + declarations) and skips comments and at-rule blocks. Malformed
input never raises; unterminated constructs are dropped and scanning stops.
"""

import re
from enum import Enum, auto

from .models import StyleRule

COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


class State(Enum):
    """Scanner states."""
    BETWEEN_RULES = auto()
    AT_RULE_PRELUDE = auto()
    AT_RULE_BLOCK = auto()
    SELECTOR = auto()
    DECLARATIONS = auto()
    DONE = auto()


def strip_comments(text: str) -> str:
    """Remove /* ... */ comments, keeping their newlines for line numbering."""
    return COMMENT.sub(lambda m: "\n" * m.group().count("\n"), text)


def split_declarations(block: str) -> tuple[str, ...]:
    """Split a declaration block on ';' into trimmed, non-empty entries."""
    return tuple(d.strip() for d in block.split(";") if d.strip())


class _Scanner:
    """Single-pass cursor over comment-stripped CSS.

    Each ``_on_<state>`` handler consumes input from the cursor and returns
    the next state. ``line`` always reflects the newlines consumed so far.
    """

    def __init__(self, text: str, source_name: str):
        self.text = text
        self.source_name = source_name
        self.pos = 0
        self.line = 1
        self.rules: list[StyleRule] = []

        self._selector: list[str] = []
        self._selector_line = 1
        self._block: list[str] = []
        self._depth = 0

        self._handlers = {
            State.BETWEEN_RULES: self._on_between_rules,
            State.AT_RULE_PRELUDE: self._on_at_rule_prelude,
            State.AT_RULE_BLOCK: self._on_at_rule_block,
            State.SELECTOR: self._on_selector,
            State.DECLARATIONS: self._on_declarations,
        }

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]

    def advance(self) -> str:
        ch = self.text[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
        return ch

    def run(self) -> list[StyleRule]:
        state = State.BETWEEN_RULES
        while state is not State.DONE:
            state = self._handlers[state]()
        return self.rules

    def _on_between_rules(self) -> State:
        while not self.at_end and self.peek().isspace():
            self.advance()
        if self.at_end:
            return State.DONE
        if self.peek() == "@":
            return State.AT_RULE_PRELUDE
        self._selector = []
        self._selector_line = self.line
        return State.SELECTOR

    def _on_at_rule_prelude(self) -> State:
        while not self.at_end:
            ch = self.advance()
            if ch == "{":
                self._depth = 1
                return State.AT_RULE_BLOCK
        return State.DONE

    def _on_at_rule_block(self) -> State:
        while not self.at_end and self._depth > 0:
            ch = self.advance()
            if ch == "{":
                self._depth += 1
            elif ch == "}":
                self._depth -= 1
        return State.BETWEEN_RULES

    def _on_selector(self) -> State:
        while not self.at_end:
            ch = self.advance()
            if ch == "\\" and not self.at_end:
                self._selector.append(ch)
                self._selector.append(self.advance())
                continue
            if ch == "{":
                self._block = []
                self._depth = 1
                return State.DECLARATIONS
            self._selector.append(ch)
        # Trailing text with no '{' is dropped.
        return State.DONE

    def _on_declarations(self) -> State:
        while not self.at_end:
            ch = self.advance()
            if ch == "{":
                self._depth += 1
            elif ch == "}":
                self._depth -= 1
                if self._depth == 0:
                    break
            self._block.append(ch)
        self._emit()
        return State.BETWEEN_RULES

    def _emit(self) -> None:
        selector = "".join(self._selector).strip()
        if not selector:
            return
        self.rules.append(StyleRule(
            selector=selector,
            declarations=split_declarations("".join(self._block)),
            source_line=self._selector_line,
            source_name=self.source_name,
        ))


def extract_rules(text: str, source_name: str) -> list[StyleRule]:
    """Extract the style rules of a stylesheet.

    Args:
        text: Raw CSS source
        source_name: File name or label recorded on each rule

    Returns:
        Rules in source order. At-rule bodies (``@media``, ``@keyframes``...)
        are skipped entirely; an at-rule without a block (``@import``) runs
        to the next ``{`` and takes that block with it.
    """
    return _Scanner(strip_comments(text), source_name).run()
