from graphviz import Digraph
from AST import Number, BinaryOp, Node


class ASTVis:
    _graph: Digraph
    debug: bool

    number_color = "#00BFFF"
    operator_color = "#D2691E"

    def __init__(self, filename: str = "graph/ast.dot",
                 debug: bool = False) -> None:
        self._graph = Digraph('ast', filename=filename,
                              node_attr={'shape': 'record'})
        self.debug = debug
        self._cnt = 0

    def _name(self) -> str:
        name = f"n{self._cnt}"
        self._cnt += 1
        return name

    def _label(self, node: Node) -> str:
        if isinstance(node, Number):
            label = str(node.value)
        else:
            label = node.op.value
        # Show source offsets in debug mode
        if self.debug and node.pos is not None:
            label += f" | {node.pos}"
        return label

    def _node(self, node: Node) -> str:
        name = self._name()

        if isinstance(node, Number):
            self._graph.node(name, self._label(node),
                             color=ASTVis.number_color)
        elif isinstance(node, BinaryOp):
            self._graph.node(name, self._label(node),
                             color=ASTVis.operator_color)
        else:
            raise Exception("Cannot draw node that is neither a number nor a "
                            f"binary operation {node}")

        return name

    def tree(self, root: Node) -> None:
        # Pre-order with an explicit stack; left-deep chains can be long
        stack = [(root, None)]
        while stack:
            node, parent = stack.pop()
            name = self._node(node)
            if parent:
                self._graph.edge(parent, name + ":n")
            if isinstance(node, BinaryOp):
                stack.append((node.right, name + ":se"))
                stack.append((node.left, name + ":sw"))

    def source(self) -> str:
        return self._graph.source

    def render(self):
        self._graph.render()
