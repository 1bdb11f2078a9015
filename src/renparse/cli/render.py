"""
Rich rendering of syntax trees for the ``parse`` command.
"""

from rich.text import Text
from rich.tree import Tree

from renparse.core import ir


def describe_image(image: ir.ImageSpec) -> str:
    parts = [image.name]
    for modifier in image.modifiers:
        if isinstance(modifier, ir.AtClause):
            parts.append(f"at {modifier.transform}")
        elif isinstance(modifier, ir.OnlayerClause):
            parts.append(f"onlayer {modifier.layer}")
        elif isinstance(modifier, ir.AsClause):
            parts.append(f"as {modifier.tag}")
        elif isinstance(modifier, ir.ZorderClause):
            parts.append(f"zorder {modifier.order}")
        elif isinstance(modifier, ir.BehindClause):
            parts.append("behind " + " ".join(modifier.tags))
    return " ".join(parts)


def describe_statement(statement: ir.Statement) -> str:
    """One-line summary of a statement, without its nested blocks."""
    kind = statement.kind.value

    if isinstance(statement, ir.SayStatement):
        content = statement.content
        if isinstance(content, ir.Dialogue):
            words = [content.who] + [str(a) for a in content.attributes]
            if content.temporary_attributes:
                words.append("@")
                words.extend(str(a) for a in content.temporary_attributes)
            return f"say {' '.join(words)}: {content.what.raw}"
        return f"say {content.what.raw}"

    if isinstance(statement, ir.LabelStatement):
        return f"label {statement.name}"
    if isinstance(statement, ir.IfStatement | ir.WhileStatement):
        return f"{kind} {statement.condition}"
    if isinstance(statement, ir.MenuStatement):
        return f"menu {statement.name}" if statement.name else "menu"
    if isinstance(statement, ir.JumpStatement):
        return f"jump {statement.target}"
    if isinstance(statement, ir.CallStatement):
        if statement.from_label:
            return f"call {statement.target} from {statement.from_label}"
        return f"call {statement.target}"
    if isinstance(statement, ir.ReturnStatement):
        return f"return {statement.value}" if statement.value else "return"
    if isinstance(statement, ir.ShowStatement | ir.HideStatement | ir.SceneStatement):
        text = kind
        if statement.image is not None:
            text += f" {describe_image(statement.image)}"
        if statement.transition is not None:
            text += f" with {statement.transition}"
        return text
    if isinstance(statement, ir.WithStatement):
        return f"with {statement.transition}"
    if isinstance(statement, ir.DefineStatement | ir.DefaultStatement):
        return f"{kind} {statement.name} = {statement.value}"
    if isinstance(statement, ir.ImageStatement):
        return f"image {' '.join(statement.names)} = {statement.value}"
    return kind


def _add_block(parent: Tree, block: ir.Block) -> None:
    for statement in block.statements:
        _add_statement(parent, statement)


def _add_statement(parent: Tree, statement: ir.Statement) -> None:
    label = Text(describe_statement(statement))
    label.append(f"  [{statement.span.line}:{statement.span.column}]", style="dim")
    node = parent.add(label)

    if isinstance(statement, ir.LabelStatement | ir.WhileStatement):
        _add_block(node, statement.block)
    elif isinstance(statement, ir.IfStatement):
        _add_block(node, statement.block)
        for clause in statement.elifs:
            _add_block(node.add(Text(f"elif {clause.condition}")), clause.block)
        if statement.else_block is not None:
            _add_block(node.add(Text("else")), statement.else_block)
    elif isinstance(statement, ir.MenuStatement):
        if statement.caption is not None:
            _add_statement(node, statement.caption)
        for choice in statement.choices:
            text = f"choice {choice.text.raw}"
            if choice.condition is not None:
                text += f" if {choice.condition}"
            _add_block(node.add(Text(text)), choice.block)


def build_tree(source_file: ir.SourceFile) -> Tree:
    """Build a rich Tree mirroring the syntax tree's block structure."""
    tree = Tree(Text(source_file.file or "<string>", style="bold"))
    for statement in source_file.statements:
        _add_statement(tree, statement)
    return tree
