"""pytest suite for edge export, graph building and DOT/text/image output."""

import shutil
from pathlib import Path

import pytest

from conftest import FAMILY_RECORDS, make_record
from graph import build_graph, export_edges
from plotting import build_dot, format_tree, plot_tree, write_dot
from tree import build_forest


class TestExportEdges:
    def setup_method(self):
        self.roots = build_forest(FAMILY_RECORDS)

    def test_small_family(self):
        roots = build_forest(
            [
                make_record(1, "A", "X", 40, "1980-01-01"),
                make_record(2, "B", "Y", 15, "2009-01-01", 1),
                make_record(3, "C", "Z", 12, "2012-01-01", 1),
            ]
        )
        assert list(export_edges(roots[0])) == [("A X", "B Y"), ("A X", "C Z")]

    def test_edges_in_child_pre_order(self):
        assert list(export_edges(self.roots[0])) == [
            ("A X", "B Y"),
            ("B Y", "D Y"),
            ("B Y", "E Y"),
            ("A X", "C Z"),
            ("C Z", "F Z"),
        ]

    def test_one_edge_per_non_root_node(self):
        edges = list(export_edges(self.roots[0]))
        assert len(edges) == 5

    def test_single_node_has_no_edges(self):
        assert list(export_edges(self.roots[2])) == []


class TestBuildGraph:
    def setup_method(self):
        self.roots = build_forest(FAMILY_RECORDS)
        self.G = build_graph(self.roots)

    def test_nodes_and_edges(self):
        assert self.G.number_of_nodes() == 9
        assert self.G.number_of_edges() == 6
        assert set(self.G.successors(2)) == {4, 5}
        assert list(self.G.predecessors(8)) == [7]

    def test_node_attributes(self):
        data = self.G.nodes[3]
        assert data["person_name"] == "C Z"
        assert data["given_name"] == "C"
        assert data["age"] == 40
        assert data["birth_date"] == "1980-09-30"

    def test_edge_type(self):
        assert self.G.edges[1, 2]["relationship_type"] == "PARENT_OF"


class TestDotOutput:
    def setup_method(self):
        self.roots = build_forest(FAMILY_RECORDS)

    def test_write_dot(self, tmp_path):
        path = tmp_path / "tree.dot"
        write_dot(self.roots, path)
        text = path.read_text(encoding="utf-8")

        assert text.startswith("digraph FamilyTree {")
        assert text.rstrip().endswith("}")
        lines = [line.strip() for line in text.splitlines()]
        expected = [
            '"A X" -> "B Y";',
            '"B Y" -> "D Y";',
            '"B Y" -> "E Y";',
            '"A X" -> "C Z";',
            '"C Z" -> "F Z";',
            '"G W" -> "H W";',
        ]
        positions = [lines.index(edge) for edge in expected]
        assert positions == sorted(positions)

    def test_one_edge_per_link(self):
        assert len(build_dot(self.roots).get_edges()) == 6


class TestFormatTree:
    def setup_method(self):
        self.roots = build_forest(FAMILY_RECORDS)

    def test_indented_lines(self):
        assert format_tree(self.roots[0]) == [
            "A X (age: 70, born 1950-03-01)",
            "  B Y (age: 45, born 1975-06-15)",
            "    D Y (age: 20, born 2000-01-01)",
            "    E Y (age: 18, born 2002-02-02)",
            "  C Z (age: 40, born 1980-09-30)",
            "    F Z (age: 10, born 2010-10-10)",
        ]

    def test_without_birth_date(self):
        assert format_tree(self.roots[1], show_birth_date=False) == [
            "G W (age: 60)",
            "  H W (age: 30)",
        ]


requires_graphviz = pytest.mark.skipif(shutil.which("dot") is None, reason="Graphviz 'dot' not installed")


@requires_graphviz
class TestPlotTree:
    def setup_method(self):
        self.roots = build_forest(FAMILY_RECORDS)

    def test_renders_svg(self, tmp_path):
        path = tmp_path / "t.svg"
        plot_tree(self.roots, path)
        text = path.read_text(encoding="utf-8")
        assert "<svg" in text
        assert "A X" in text

    def test_unknown_suffix_renders_png(self, tmp_path):
        path = tmp_path / "t.img"
        plot_tree(self.roots, path)
        assert path.read_bytes().startswith(b"\x89PNG")

    def test_displays_without_output_path(self, monkeypatch):
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        read_paths = []
        shown = []

        def fake_imread(path):
            read_paths.append(Path(path))
            assert Path(path).read_bytes().startswith(b"\x89PNG")
            return [[[0.0, 0.0, 0.0]]]

        monkeypatch.setattr(mpimg, "imread", fake_imread)
        monkeypatch.setattr(plt, "show", lambda: shown.append(True))

        plot_tree(self.roots)
        plt.close("all")

        assert shown == [True]
        assert len(read_paths) == 1
        assert not read_paths[0].exists()
