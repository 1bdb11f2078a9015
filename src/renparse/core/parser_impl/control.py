"""
Control flow parsing for Ren'Py scripts.

Handles label, if/elif/else, while, jump, call, return and pass.
"""

from typing import TYPE_CHECKING, Any

from .. import ir


class ControlParserMixin:
    """
    Mixin providing control flow statement parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        begin_line: Any
        end_line: Any
        peek_line: Any
        expect_keyword: Any
        expect_punct: Any
        expect_python_rest: Any
        parse_python_rest: Any
        parse_label_name: Any
        parse_block: Any
        try_parse_say: Any
        span_of: Any
        _require_lexer: Any

    def parse_label(self) -> ir.LabelStatement:
        """
        Parse label statement.

        Syntax:
            label start:
                "Hello world"
        """
        keyword = self.expect_keyword("label")
        name = self.parse_label_name()
        self.expect_punct(":")
        self.end_line("label statement")

        block = self.parse_block()
        return ir.LabelStatement(name=name, block=block, span=self.span_of(keyword, block.span))

    def parse_if(self) -> ir.IfStatement:
        """
        Parse if statement with its elif and else clauses.

        Syntax:
            if x == 1:
                ...
            elif x == 2:
                ...
            else:
                ...
        """
        keyword = self.expect_keyword("if")
        condition = self.expect_python_rest("condition")
        self.expect_punct(":")
        self.end_line("if statement")
        block = self.parse_block()
        last = block.span

        elifs: list[ir.ElifClause] = []
        while self._next_line_is_clause("elif"):
            self.begin_line()
            elif_keyword = self.expect_keyword("elif")
            elif_condition = self.expect_python_rest("condition")
            self.expect_punct(":")
            self.end_line("elif clause")
            elif_block = self.parse_block()
            elifs.append(
                ir.ElifClause(
                    condition=elif_condition,
                    block=elif_block,
                    span=self.span_of(elif_keyword, elif_block.span),
                )
            )
            last = elif_block.span

        else_block = None
        if self._next_line_is_clause("else"):
            self.begin_line()
            self.expect_keyword("else")
            self.expect_punct(":")
            self.end_line("else clause")
            else_block = self.parse_block()
            last = else_block.span

        return ir.IfStatement(
            condition=condition,
            block=block,
            elifs=elifs,
            else_block=else_block,
            span=self.span_of(keyword, last),
        )

    def _next_line_is_clause(self, keyword: str) -> bool:
        """
        Check whether the next line continues an if statement.

        Only a TEXT line directly after the block's DEDENT qualifies; a
        deeper dedent or a separator means the if statement has ended.
        A say-shaped line such as ``else "Hi"`` is dialogue, not a clause.
        """
        lexer = self.peek_line()
        if lexer is None or lexer.peek_name() != keyword:
            return False
        return self.try_parse_say(lexer) is None

    def parse_while(self) -> ir.WhileStatement:
        keyword = self.expect_keyword("while")
        condition = self.expect_python_rest("condition")
        self.expect_punct(":")
        self.end_line("while statement")

        block = self.parse_block()
        return ir.WhileStatement(
            condition=condition, block=block, span=self.span_of(keyword, block.span)
        )

    def parse_jump(self) -> ir.JumpStatement:
        keyword = self.expect_keyword("jump")
        target = self.parse_label_name()
        self.end_line("jump statement")
        return ir.JumpStatement(target=target, span=self.span_of(keyword, target.span))

    def parse_call(self) -> ir.CallStatement:
        """
        Parse call statement.

        Syntax:
            call chapter2
            call .subroutine from after_sub
        """
        keyword = self.expect_keyword("call")
        target = self.parse_label_name()

        from_label = None
        if self._require_lexer().read_keyword("from") is not None:
            from_label = self.parse_label_name()

        self.end_line("call statement")
        end = from_label.span if from_label else target.span
        return ir.CallStatement(
            target=target, from_label=from_label, span=self.span_of(keyword, end)
        )

    def parse_return(self) -> ir.ReturnStatement:
        keyword = self.expect_keyword("return")
        value = self.parse_python_rest()
        self.end_line("return statement")
        end = value.span if value else keyword
        return ir.ReturnStatement(value=value, span=self.span_of(keyword, end))

    def parse_pass(self) -> ir.PassStatement:
        keyword = self.expect_keyword("pass")
        self.end_line("pass statement")
        return ir.PassStatement(span=self.span_of(keyword, keyword))
