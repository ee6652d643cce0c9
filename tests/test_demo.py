import io
import re

import pytest

from bintree.demo import main, run_demo
from bintree.node import Node
from bintree.render import render


def _output(number: int) -> str:
    buffer = io.StringIO()
    run_demo(number, buffer)
    return buffer.getvalue()


def test_demo_0_prints_the_built_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    assert _output(0) == render(root)


def test_demo_2_ends_with_demo_3_tree():
    assert _output(2).endswith(_output(3))


def test_demos_on_shared_tree_start_with_it():
    shared = _output(3)
    for number in (4, 5, 9, 10, 11, 12, 13):
        assert _output(number).startswith(shared)


def test_demo_1_has_two_drawings_split_by_blank_line():
    parts = _output(1).split("\n\n")
    assert len(parts) == 2
    assert "(054)" in parts[1]
    assert "(054)" not in parts[0]


def test_inorder_demo_lists_sorted_values():
    lines = _output(7).splitlines()
    values = [int(line) for line in lines if line.strip().lstrip("-").isdigit()]
    assert len(values) == 7
    assert values == sorted(values)


def test_traversal_demos_list_same_values():
    def values(number):
        return sorted(
            int(line) for line in _output(number).splitlines() if line.isdigit()
        )

    assert values(6) == values(7) == values(8)
    assert _output(6).splitlines()[-7] == "98"
    assert _output(8).splitlines()[-1] == "98"


def test_height_demo():
    assert "Height from 98: 2" in _output(9)


def test_depth_demo_values_for_root_is_zero():
    assert "Depth of 98: 0" in _output(10)


def test_sibling_demo_prints_nil_for_root():
    assert _output(17).splitlines()[-1] == "Sibling of 98: (nil)"


def test_uncle_demo_reports_three_lines():
    lines = [line for line in _output(18).splitlines() if line.startswith("Uncle of")]
    assert len(lines) == 3
    assert lines[-1].endswith("(nil)")


def test_balance_demo_uses_signed_numbers():
    lines = [line for line in _output(14).splitlines() if line.startswith("Balance of")]
    assert len(lines) == 3
    assert all(re.fullmatch(r"Balance of -?\d+: [+-]\d+", line) for line in lines)


def test_perfect_demo_prints_three_results():
    lines = [line for line in _output(16).splitlines() if line.startswith("Perfect:")]
    assert len(lines) == 3
    assert all(line in ("Perfect: 0", "Perfect: 1") for line in lines)


def test_leaf_and_root_flags_are_binary():
    for number, word in ((4, "leaf"), (5, "root")):
        flags = re.findall(rf"a {word}: (\d+)", _output(number))
        assert len(flags) == 3
        assert set(flags) <= {"0", "1"}


def test_unknown_demo_raises():
    with pytest.raises(ValueError):
        run_demo(19, io.StringIO())


def test_main_runs_one_demo(capsys):
    assert main(["11"]) == 0
    assert capsys.readouterr().out == _output(11)


def test_main_runs_all_by_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "".join(_output(n) for n in range(19))


def test_main_rejects_unknown_number():
    with pytest.raises(SystemExit) as info:
        main(["42"])
    assert info.value.code == 2


def test_run_demo_defaults_to_stdout(capsys):
    run_demo(0)
    assert capsys.readouterr().out == _output(0)