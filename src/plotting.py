"""Text and Graphviz output for family forests."""

from collections.abc import Iterable
from pathlib import Path

import pydot

from graph import export_edges
from models import PersonNode
from query import list_descendants


def format_tree(root: PersonNode, show_birth_date: bool = True) -> list[str]:
    """Render a tree as indented lines, two spaces per generation."""
    lines = []
    for node, depth in list_descendants(root):
        if show_birth_date:
            details = f"age: {node.age}, born {node.birth_date}"
        else:
            details = f"age: {node.age}"
        lines.append(f"{'  ' * depth}{node.label} ({details})")
    return lines


def _quote(label: str) -> str:
    escaped = label.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_dot(roots: Iterable[PersonNode]) -> pydot.Dot:
    """Build a pydot digraph with one edge per parent-child link, labelled by name."""
    P = pydot.Dot("FamilyTree", graph_type="digraph")
    for root in roots:
        for parent_label, child_label in export_edges(root):
            P.add_edge(pydot.Edge(_quote(parent_label), _quote(child_label)))
    return P


def write_dot(roots: Iterable[PersonNode], output_path: Path) -> None:
    """Write the forest as DOT source, for rendering with Graphviz later."""
    build_dot(roots).write(str(output_path), format="raw")


def plot_tree(roots: Iterable[PersonNode], output_path: Path | None = None):
    """
    Render the forest with Graphviz.

    Args:
        roots: Roots of the trees to draw
        output_path: Path to save the image (png, svg or pdf by suffix). If None,
            displays interactively.
    """
    P = build_dot(roots)
    P.set("rankdir", "TB")  # Ancestors at top
    P.set("nodesep", "0.4")
    P.set("ranksep", "0.6")
    P.set_node_defaults(shape="box", style="rounded,filled", fillcolor="lightgray", fontsize="10")

    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        P.write(str(output_path), format=ext)
    else:
        _show(P)


def _show(P: pydot.Dot):
    """Render through a temporary PNG and display it in a matplotlib window."""
    import tempfile

    import matplotlib.image as mpimg
    import matplotlib.pyplot as plt

    with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
        image_path = Path(f.name)
    try:
        P.write(str(image_path), format="png")
        img = mpimg.imread(image_path)
    finally:
        image_path.unlink(missing_ok=True)

    plt.figure(figsize=(20, 16))
    plt.imshow(img)
    plt.axis("off")
    plt.title(f"Family Tree ({len(P.get_edges())} parent-child links)")
    plt.tight_layout()
    plt.show()
