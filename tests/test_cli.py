import io

from dsakit.cli import main, run_menu


def run(script):
    out = io.StringIO()
    lst = run_menu(io.StringIO(script), out)
    return lst, out.getvalue()


def test_inserts_and_forward_display():
    lst, output = run("2 10\n2 20\n1 5\n8\n12\n")
    assert list(lst) == [5, 10, 20]
    assert "List (Forward): 5 10 20 \n" in output
    assert output.rstrip().endswith("Exiting program...")


def test_backward_display_and_count():
    lst, output = run("2 1 2 2 2 3 9 10 12")
    assert "List (Backward): 3 2 1 \n" in output
    assert f"Total nodes: {len(lst)}\n" in output


def test_insert_at_position():
    lst, _ = run("2 10 2 30 3 2 20 12")
    assert list(lst) == [10, 20, 30]


def test_invalid_insert_position():
    lst, output = run("3 0 7 12")
    assert "Invalid position!" in output
    assert list(lst) == []


def test_insert_position_out_of_range():
    lst, output = run("3 3 7 12")
    assert "Position out of range!" in output
    assert len(lst) == 0


def test_delete_on_empty_list():
    _, output = run("4 5 12")
    assert output.count("List is empty!") == 2


def test_delete_from_position_errors():
    _, output = run("6 1 2 9 6 5 12")
    assert "Invalid position or empty list!" in output
    assert "Position out of range!" in output


def test_delete_value_not_found():
    lst, output = run("2 4 7 8 12")
    assert "Value not found!" in output
    assert list(lst) == [4]


def test_search():
    _, output = run("2 4 2 8 11 8 11 99 12")
    assert "Element 8 found at position 2\n" in output
    assert "Element not found!" in output


def test_invalid_choice():
    _, output = run("42 abc 12")
    assert output.count("Invalid choice! Try again.") == 2


def test_end_of_input_stops_menu():
    lst, output = run("2 10")
    assert list(lst) == [10]
    assert "Exiting program..." not in output


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 7 8 12\n"))
    assert main([]) == 0
    assert "List (Forward): 7 \n" in capsys.readouterr().out