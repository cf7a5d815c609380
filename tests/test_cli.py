import pytest

from wimm.cli import Action, ActionKind, default_db_path, main, parse_args, run


@pytest.fixture
def db_args(tmp_path):
    return ["--db", str(tmp_path / "wimm.db")]


def add(db_args, capsys, name):
    run([*db_args, "add", name])
    out = capsys.readouterr().out.strip()
    prefix = "Added task: "
    assert out.startswith(prefix)
    return out[len(prefix):]


def test_default_db_path_file_name():
    assert default_db_path().name == "wimm.db"


@pytest.mark.parametrize(
    "words, action",
    [
        (["add", "read"], Action(ActionKind.ADD, "read")),
        (["a", "read"], Action(ActionKind.ADD, "read")),
        (["start", "x"], Action(ActionKind.START, "x")),
        (["s", "x"], Action(ActionKind.START, "x")),
        (["remove", "x"], Action(ActionKind.DELETE, "x")),
        (["rm", "x"], Action(ActionKind.DELETE, "x")),
        (["list"], Action(ActionKind.LIST)),
        (["ls"], Action(ActionKind.LIST)),
        (["complete", "x"], Action(ActionKind.COMPLETE, "x")),
        (["c", "x"], Action(ActionKind.COMPLETE, "x")),
        (["pause", "x"], Action(ActionKind.PAUSE, "x")),
        (["p", "x"], Action(ActionKind.PAUSE, "x")),
    ],
)
def test_parse_actions(tmp_path, words, action):
    args = parse_args(["--db", str(tmp_path / "w.db"), *words])
    assert args.action == action
    assert args.db_path == tmp_path / "w.db"
    assert args.force_init is False


def test_parse_force(tmp_path):
    assert parse_args(["--db", str(tmp_path / "w.db"), "--force", "ls"]).force_init is True


def test_subcommand_required(tmp_path):
    with pytest.raises(SystemExit):
        parse_args(["--db", str(tmp_path / "w.db")])


def test_missing_argument(tmp_path):
    with pytest.raises(SystemExit):
        parse_args(["--db", str(tmp_path / "w.db"), "start"])


def test_list_empty(db_args, capsys):
    run([*db_args, "list"])
    assert capsys.readouterr().out == "No tasks found.\n"


def test_add_then_list(db_args, capsys):
    task_id = add(db_args, capsys, "read")
    run([*db_args, "ls"])
    out = capsys.readouterr().out
    assert out.startswith(f"Task(id: {task_id}, name: read, status: Pending,")


def test_lifecycle_messages(db_args, capsys):
    task_id = add(db_args, capsys, "read")
    run([*db_args, "start", task_id])
    assert capsys.readouterr().out == f"Started task ID: {task_id}\n"
    run([*db_args, "pause", task_id])
    assert capsys.readouterr().out == f"Pause task: {task_id}\n"
    run([*db_args, "complete", task_id])
    assert capsys.readouterr().out == f"Completed task: {task_id}\n"
    run([*db_args, "ls"])
    assert "status: Completed" in capsys.readouterr().out
    run([*db_args, "rm", task_id])
    assert capsys.readouterr().out == f"Deleted task: {task_id}\n"


def test_force_truncates(db_args, capsys):
    add(db_args, capsys, "read")
    run([*db_args, "--force", "ls"])
    assert capsys.readouterr().out == "No tasks found.\n"


def test_main_reports_error(db_args, capsys):
    assert main([*db_args, "start", "nope"]) == 1
    assert capsys.readouterr().err == "Database error: Task not found for ID: nope\n"


def test_main_success(db_args, capsys):
    assert main([*db_args, "list"]) == 0
    assert capsys.readouterr().out == "No tasks found.\n"