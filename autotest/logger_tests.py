import os
import pytest


def logger_file_test(tmp_path):
    from densemat import Logger
    log_name = os.path.join(tmp_path, "test.log")
    logger = Logger(log_name)
    logger.log("task")
    logger.statement("a statement")
    logger.log("task")
    logger.close()
    with open(log_name, "r") as f:
        lines = f.readlines()
    assert "starting: opening" in lines[0]
    assert lines[1].strip().endswith("starting: task")
    assert lines[2].strip().endswith("a statement")
    assert "finished: task took:" in lines[3]
    assert len(logger.items) == 1  # the "opening" item is never finished


def logger_echo_test(capsys):
    from densemat import Logger
    logger = Logger(True)
    assert logger.echo
    assert logger.filename is None
    logger.statement("hello")
    assert "hello" in capsys.readouterr().out

    logger = Logger(False)
    logger.statement("quiet")
    assert capsys.readouterr().out == ""


def logger_warn_test(tmp_path):
    from densemat import Logger, DensematWarning
    log_name = os.path.join(tmp_path, "warn.log")
    logger = Logger(log_name)
    with pytest.warns(DensematWarning):
        logger.warn("careful")
    logger.close()
    with open(log_name, "r") as f:
        assert "WARNING: careful" in f.read()


def logger_lraise_test(tmp_path):
    from densemat import Logger, MatrixReadError
    log_name = os.path.join(tmp_path, "error.log")
    logger = Logger(log_name)
    try:
        logger.lraise("bad thing", MatrixReadError)
    except MatrixReadError as e:
        assert str(e) == "bad thing"
    else:
        raise Exception("should have failed")
    assert logger.f.closed
    with open(log_name, "r") as f:
        assert "ERROR: bad thing" in f.read()

    with pytest.raises(Exception):
        Logger(False).lraise("plain")


def logger_error_test(tmp_path, capsys):
    from densemat import Logger
    log_name = os.path.join(tmp_path, "error_only.log")
    logger = Logger(log_name)
    logger.error("no raise")
    assert not logger.f.closed
    assert "ERROR: no raise" in capsys.readouterr().out
    logger.close()
    logger.close()
    with open(log_name, "r") as f:
        assert "ERROR: no raise" in f.read()
