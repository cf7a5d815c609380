from wimm.errors import DbError, WimmError


def test_db_error_message_is_prefixed():
    assert str(DbError("No DB path specified")) == "Database error: No DB path specified"


def test_db_error_keeps_raw_message():
    err = DbError("Task not found for ID: abc")
    assert err.message == "Task not found for ID: abc"


def test_db_error_is_a_wimm_error():
    err = DbError("boom")
    assert isinstance(err, WimmError)
    assert err.message == "boom"
    assert str(err) == "Database error: boom"


def test_db_error_args_carry_message():
    err = DbError("Invalid DB path: /")
    assert "Invalid DB path: /" in str(err)
    assert str(err).startswith("Database error: ")