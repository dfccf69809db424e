import re

from oslab.example import main, run_example


def test_inserts_follow_input_order():
    out = run_example()
    assert re.findall(r"insert (\w)", out) == list("REDSOXCUBT")


def test_deletion_drains_in_sorted_order():
    out = run_example()
    deleted = re.findall(r"delete (\w)", out)
    assert deleted[0] == "O"
    assert deleted[1:] == sorted(set("REDSOXCUBT") - {"O"})


def test_tree_stays_balanced_throughout():
    out = run_example()
    assert "check_black_height = 0" not in out
    assert out.count("check_black_height = ") == 10 + 1 + 9


def test_deleted_letter_not_shown_afterwards():
    out = run_example()
    after = out.split("delete O", 1)[1]
    assert re.findall(r": O \(", after) == []
    first_render = after.split("check_black_height", 1)[0]
    shown = sorted(re.findall(r": (\w) \(", first_render))
    assert shown == sorted("REDSXCUBT")


def test_last_render_is_empty_tree():
    out = run_example()
    last = out.rsplit("\n--\n", 1)[1]
    assert "(" not in last.split("check_black_height")[0]


def test_main_prints_example(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == run_example()